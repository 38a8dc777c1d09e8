"""CDK stack for a single static website."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from static_website.cdk_constructs import StaticWebsite
from static_website.config import WebsiteConfig
from static_website.domain import ZoneLookup


class StaticWebsiteStack(cdk.Stack):
  """Stack for a single static website."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    website_config: WebsiteConfig,
    zone_lookup: ZoneLookup | None = None,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    self.website = StaticWebsite(
      self,
      website_config.name,
      content=website_config.content,
      base_path=website_config.base_path,
      domain=website_config.domain,
      cache=website_config.cache,
      zone_lookup=zone_lookup,
      removal_policy=website_config.removal_policy,
    )

    # Tag resources with ownership info
    cdk.Tags.of(self).add("Project", "static-website")
    cdk.Tags.of(self).add("Website", website_config.name)
    if website_config.owner:
      cdk.Tags.of(self).add("Owner", website_config.owner)
