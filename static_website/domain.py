"""Domain name decomposition."""

from collections.abc import Callable
from dataclasses import dataclass

from static_website.errors import InvalidDomainError

# Maps a zone name to its hosted zone id, or None when no zone matches.
ZoneLookup = Callable[[str], str | None]


@dataclass(frozen=True)
class DomainParts:
  """A target domain split into the record label and its parent zone."""

  subdomain: str
  parent_domain: str

  def reconstruct(self) -> str:
    """Rebuild the domain the parts were split from."""
    if not self.subdomain:
      return self.parent_domain
    return f"{self.subdomain}.{self.parent_domain}"


def split_domain(domain: str) -> DomainParts:
  """Split a domain into its subdomain and parent domain.

  "www.example.com" becomes ("www", "example.com.") and "example.com" becomes
  ("", "example.com"). Parent domains derived from a subdomain carry a
  trailing dot, the canonical form of a DNS zone name.
  """
  labels = domain.split(".")
  if len(labels) < 2:
    raise InvalidDomainError(f"No top-level domain found in {domain!r}")
  if any(not label for label in labels):
    raise InvalidDomainError(f"Empty label in domain {domain!r}")

  # Apex domain, e.g. example.com
  if len(labels) == 2:
    return DomainParts(subdomain="", parent_domain=domain)

  return DomainParts(
    subdomain=labels[0],
    parent_domain=".".join(labels[1:]) + ".",
  )
