"""CDK constructs for static website infrastructure."""

from .content_sync import ContentSync
from .distribution import CloudFrontDistribution
from .dns import AliasRecord
from .static_site import StaticWebsite
from .storage import ContentBucket, LogsBucket

__all__ = [
  "AliasRecord",
  "CloudFrontDistribution",
  "ContentBucket",
  "ContentSync",
  "LogsBucket",
  "StaticWebsite",
]
