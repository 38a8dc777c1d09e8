"""S3 buckets for website content and CloudFront request logs."""

from aws_cdk import RemovalPolicy
from aws_cdk import aws_s3 as s3
from constructs import Construct


class ContentBucket(Construct):
  """S3 bucket configured for static website hosting.

  Contents are publicly readable, just like the resulting website. S3 serves
  the bucket as a website so requests for "foo/" resolve to "foo/index.html".
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    self.bucket = s3.Bucket(
      self,
      "Bucket",
      website_index_document="index.html",
      website_error_document="404.html",
      access_control=s3.BucketAccessControl.PUBLIC_READ,
      # Object ACLs are needed for public-read content objects
      object_ownership=s3.ObjectOwnership.OBJECT_WRITER,
      public_read_access=True,
      block_public_access=s3.BlockPublicAccess(
        block_public_acls=False,
        ignore_public_acls=False,
        block_public_policy=False,
        restrict_public_buckets=False,
      ),
      removal_policy=removal_policy,
      auto_delete_objects=removal_policy == RemovalPolicy.DESTROY,
    )


class LogsBucket(Construct):
  """Private S3 bucket receiving CloudFront request logs."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    self.bucket = s3.Bucket(
      self,
      "Bucket",
      access_control=s3.BucketAccessControl.PRIVATE,
      # CloudFront standard logging writes objects through ACLs
      object_ownership=s3.ObjectOwnership.OBJECT_WRITER,
      block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
      removal_policy=removal_policy,
      auto_delete_objects=removal_policy == RemovalPolicy.DESTROY,
    )
