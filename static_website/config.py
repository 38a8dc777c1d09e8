"""Configuration loader for static websites."""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml
from aws_cdk import RemovalPolicy

from static_website.errors import InvalidArgumentError

TEN_MINUTES = 60 * 10


@dataclass(frozen=True)
class ContentArgs:
  """What the website serves."""

  # Path to the content files, relative to the website's base path
  path_to_content: str
  # Page served when CloudFront cannot find the requested object, e.g. "/404.html"
  custom_404_path: str | None = None


@dataclass(frozen=True)
class DomainArgs:
  """How a custom domain is attached to the website.

  If target_domain is a subdomain ("www.example.com"), the A record "www" is
  created in the "example.com" zone. If it is an apex domain ("example.com"),
  the record is created at the zone apex. The ACM certificate must match the
  target domain and live in us-east-1, a CloudFront requirement.
  """

  target_domain: str
  acm_certificate_arn: str


@dataclass(frozen=True)
class CacheSettings:
  """Default cache behavior of the distribution."""

  min_ttl: int = 0
  default_ttl: int = TEN_MINUTES
  max_ttl: int = TEN_MINUTES
  forward_cookies: bool = False
  forward_query_string: bool = False

  def __post_init__(self) -> None:
    if self.min_ttl < 0:
      raise InvalidArgumentError("min_ttl must not be negative")
    if not self.min_ttl <= self.default_ttl <= self.max_ttl:
      raise InvalidArgumentError(
        "Cache TTLs must satisfy min_ttl <= default_ttl <= max_ttl, "
        f"got {self.min_ttl}/{self.default_ttl}/{self.max_ttl}"
      )


@dataclass
class WebsiteConfig:
  """Configuration for a single static website."""

  name: str
  content: ContentArgs
  base_path: Path = field(default_factory=Path)
  domain: DomainArgs | None = None
  cache: CacheSettings = field(default_factory=CacheSettings)
  region: str = "us-east-1"
  owner: str | None = None
  removal_policy: RemovalPolicy = RemovalPolicy.RETAIN


@dataclass
class Config:
  """Multi-website configuration."""

  websites: list[WebsiteConfig] = field(default_factory=list)

  @classmethod
  def from_yaml(cls, path: Path | str = "websites.yaml") -> "Config":
    """Load configuration from YAML file.

    Content paths are resolved against the directory holding the file.
    """
    path = Path(path)
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    base_path = path.resolve().parent
    defaults = data.get("defaults", {})
    websites = [
      _website_from_dict({**defaults, **site_data}, base_path)
      for site_data in data.get("websites", [])
    ]
    return cls(websites=websites)


def _website_from_dict(data: dict[str, Any], base_path: Path) -> WebsiteConfig:
  for required in ("name", "path_to_content"):
    if not data.get(required):
      raise InvalidArgumentError(f"Website entry is missing {required!r}")
  name = data["name"]

  target_domain = data.get("target_domain")
  certificate_arn = data.get("acm_certificate_arn")
  if bool(target_domain) != bool(certificate_arn):
    raise InvalidArgumentError(
      f"Website {name!r} must set both target_domain and acm_certificate_arn, or neither"
    )
  domain = DomainArgs(target_domain, certificate_arn) if target_domain else None

  # Convert removal_policy string to enum
  removal_policy_str = str(data.get("removal_policy", "retain"))
  removal_policy = {
    "retain": RemovalPolicy.RETAIN,
    "destroy": RemovalPolicy.DESTROY,
  }.get(removal_policy_str.lower(), RemovalPolicy.RETAIN)

  return WebsiteConfig(
    name=name,
    content=ContentArgs(
      path_to_content=data["path_to_content"],
      custom_404_path=data.get("custom_404_path"),
    ),
    base_path=base_path,
    domain=domain,
    cache=_cache_from_dict(name, data.get("cache") or {}),
    region=data.get("region", "us-east-1"),
    owner=data.get("owner"),
    removal_policy=removal_policy,
  )


def _cache_from_dict(name: str, data: Any) -> CacheSettings:
  if not isinstance(data, dict):
    raise InvalidArgumentError(f"Website {name!r} cache settings must be a mapping")
  known = {f.name for f in fields(CacheSettings)}
  for key in data:
    if key not in known:
      raise InvalidArgumentError(f"Website {name!r} has unknown cache setting {key!r}")
  return CacheSettings(**data)
