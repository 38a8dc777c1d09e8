"""Synchronization of a local content directory into the content bucket."""

from collections.abc import Sequence
from pathlib import Path, PurePosixPath

from aws_cdk import Annotations, SymlinkFollowMode
from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3_deploy
from constructs import Construct

from static_website.content import ContentObject


def sync_filter(key: str) -> str:
  """Escape a bucket key so the sync filter matches it literally."""
  escaped = []
  for char in key:
    escaped.append(f"[{char}]" if char in "*?[" else char)
  return "".join(escaped)


def content_type_filters(objects: Sequence[ContentObject]) -> dict[str, list[str]]:
  """Map each known content type to the sync filters selecting its objects.

  A file extension whose objects all share one content type is selected by a
  single "*<extension>" pattern. Objects of any other extension are selected
  by their escaped key. Extensions match case-sensitively, so ".HTML" and
  ".html" get separate patterns.
  """
  types_by_suffix: dict[str, set[str | None]] = {}
  for obj in objects:
    types_by_suffix.setdefault(PurePosixPath(obj.key).suffix, set()).add(obj.content_type)

  filters: dict[str, set[str]] = {}
  for obj in objects:
    if obj.content_type is None:
      continue
    suffix = PurePosixPath(obj.key).suffix
    if suffix and types_by_suffix[suffix] == {obj.content_type}:
      pattern = "*" + sync_filter(suffix)
    else:
      pattern = sync_filter(obj.key)
    filters.setdefault(obj.content_type, set()).add(pattern)

  return {content_type: sorted(patterns) for content_type, patterns in sorted(filters.items())}


class ContentSync(Construct):
  """Uploads planned content objects with their content type and ACL.

  Objects sharing a content type are uploaded by one BucketDeployment, which
  also prunes stale keys its filters select. Objects without a known content
  type go through a catch-all deployment that prunes everything else.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    content_root: Path,
    objects: Sequence[ContentObject],
  ) -> None:
    super().__init__(scope, id)

    self.deployments: list[s3_deploy.BucketDeployment] = []
    if not objects:
      Annotations.of(self).add_warning_v2(
        "static-website:empty-content",
        f"Content directory {content_root} contains no files",
      )
      return

    typed_filters: list[str] = []
    for content_type, patterns in content_type_filters(objects).items():
      typed_filters.extend(patterns)
      self.deployments.append(
        s3_deploy.BucketDeployment(
          self,
          content_type.replace("/", "-"),
          sources=[self._source(content_root)],
          destination_bucket=bucket,
          exclude=["*"],
          include=patterns,
          content_type=content_type,
          access_control=s3.BucketAccessControl.PUBLIC_READ,
          prune=True,
        )
      )

    # Unknown content types, plus removal of stale objects
    self.deployments.append(
      s3_deploy.BucketDeployment(
        self,
        "Untyped",
        sources=[self._source(content_root)],
        destination_bucket=bucket,
        exclude=typed_filters or None,
        access_control=s3.BucketAccessControl.PUBLIC_READ,
        prune=True,
      )
    )

  @staticmethod
  def _source(content_root: Path) -> s3_deploy.ISource:
    # Symlinks are followed, as the content crawler does
    return s3_deploy.Source.asset(
      str(content_root),
      follow_symlinks=SymlinkFollowMode.ALWAYS,
    )
