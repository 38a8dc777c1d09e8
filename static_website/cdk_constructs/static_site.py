"""Main composite construct for a static website."""

import logging
from pathlib import Path

from aws_cdk import CfnOutput, RemovalPolicy, Tags
from constructs import Construct

from static_website.config import CacheSettings, ContentArgs, DomainArgs
from static_website.content import ContentObject, plan_content
from static_website.domain import ZoneLookup, split_domain
from static_website.errors import InvalidContentPathError

from .content_sync import ContentSync
from .distribution import CloudFrontDistribution, build_error_responses
from .dns import AliasRecord
from .storage import ContentBucket, LogsBucket

logger = logging.getLogger(__name__)


def resolve_content_root(base_path: Path | str, content: ContentArgs) -> Path:
  """Resolve and validate the content directory of a website."""
  root = Path(base_path) / content.path_to_content
  if not root.exists():
    raise InvalidContentPathError(f"Website contents path {str(root)!r} does not exist")
  if not root.is_dir():
    raise InvalidContentPathError(f"Website contents path {str(root)!r} is not a directory")
  return root


class StaticWebsite(Construct):
  """Static website using Amazon S3, CloudFront, and Route 53.

  Creates, in order:
  - S3 content bucket, publicly readable and served as a website
  - One content object per file of the content directory
  - Private S3 bucket for CloudFront request logs
  - CloudFront distribution in front of the content bucket
  - (Optional) Route 53 alias record for the target domain

  All inputs are validated before any resource is added to the tree.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    content: ContentArgs,
    base_path: Path | str,
    domain: DomainArgs | None = None,
    cache: CacheSettings | None = None,
    zone_lookup: ZoneLookup | None = None,
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    content_root = resolve_content_root(base_path, content)
    build_error_responses(content.custom_404_path)
    if domain is not None:
      split_domain(domain.target_domain)
    self.content_objects: tuple[ContentObject, ...] = plan_content(content_root)
    logger.info("Composing static website %s from %s", id, content_root)

    # Content bucket, populated with one object per file
    self.content = ContentBucket(self, f"{id}-content", removal_policy=removal_policy)
    self.content_bucket = self.content.bucket
    self.content_sync = ContentSync(
      self.content,
      f"{id}-sync",
      bucket=self.content_bucket,
      content_root=content_root,
      objects=self.content_objects,
    )

    # Request logs, queryable later with Athena
    self.logs = LogsBucket(self, f"{id}-logs", removal_policy=removal_policy)
    self.logs_bucket = self.logs.bucket

    self.cdn = CloudFrontDistribution(
      self,
      f"{id}-cdn",
      content_bucket=self.content_bucket,
      logs_bucket=self.logs_bucket,
      content=content,
      domain=domain,
      cache=cache,
      log_prefix=f"{id}/",
    )
    self.distribution = self.cdn.distribution

    self.alias_record: AliasRecord | None = None
    if domain is not None:
      self.alias_record = AliasRecord(
        self,
        domain.target_domain,
        target_domain=domain.target_domain,
        distribution=self.distribution,
        zone_lookup=zone_lookup,
      )

    Tags.of(self).add("StaticWebsite", id)

    # Outputs
    CfnOutput(
      self,
      "ContentBucketName",
      value=self.content_bucket.bucket_name,
      description="S3 content bucket name",
    )
    CfnOutput(
      self,
      "DistributionId",
      value=self.distribution.distribution_id,
      description="CloudFront distribution ID",
    )
    CfnOutput(
      self,
      "DistributionDomainName",
      value=self.distribution.distribution_domain_name,
      description="CloudFront distribution domain name",
    )
    if domain is not None:
      CfnOutput(
        self,
        "TargetDomain",
        value=domain.target_domain,
        description="Domain aliased to the distribution",
      )
