"""Exceptions raised while composing static website resources."""


class StaticWebsiteError(Exception):
  """Base class for all static website composition errors."""


class InvalidContentPathError(StaticWebsiteError, ValueError):
  """Content root does not exist or is not a directory."""


class InvalidArgumentError(StaticWebsiteError, ValueError):
  """A content, cache or configuration argument is malformed."""


class InvalidDomainError(StaticWebsiteError, ValueError):
  """Domain name cannot be split into a subdomain and a parent zone."""


class ZoneNotFoundError(StaticWebsiteError, LookupError):
  """No hosted zone exists for the parent domain of a target domain."""
