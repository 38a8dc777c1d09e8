"""Content directory crawling and object planning."""

import logging
import mimetypes
import os
import stat
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from static_website.errors import InvalidContentPathError

logger = logging.getLogger(__name__)

PUBLIC_READ = "public-read"


@dataclass(frozen=True)
class ContentObject:
  """A single file of the website, as it should appear in the content bucket."""

  key: str
  source: Path
  content_type: str | None
  acl: str = PUBLIC_READ


def crawl_directory(root: Path | str, visit: Callable[[Path], None]) -> None:
  """Call visit for every regular file below root.

  Directories are expanded from an explicit stack rather than by recursion.
  Symlinked files and directories are followed. A dangling symlink, or one
  leading back to an ancestor directory, raises InvalidContentPathError.
  Entries of a directory are visited in name order.
  """
  root = Path(root)
  # Each pending directory carries the (device, inode) identities of its ancestors
  pending: list[tuple[Path, frozenset[tuple[int, int]]]] = [(root, frozenset())]

  while pending:
    directory, ancestors = pending.pop()
    info = directory.stat()
    identity = (info.st_dev, info.st_ino)
    if identity in ancestors:
      raise InvalidContentPathError(f"Symlink cycle at {str(directory)!r}")
    lineage = ancestors | {identity}

    with os.scandir(directory) as it:
      entries = sorted(it, key=lambda e: e.name)

    subdirectories: list[Path] = []
    for entry in entries:
      path = directory / entry.name
      try:
        mode = entry.stat().st_mode
      except FileNotFoundError as e:
        raise InvalidContentPathError(f"Dangling symlink at {str(path)!r}") from e
      if stat.S_ISDIR(mode):
        subdirectories.append(path)
      elif stat.S_ISREG(mode):
        logger.debug("Visiting %s", path)
        visit(path)
      else:
        logger.warning("Skipping %s, not a regular file", path)

    # Reversed so the first subdirectory is expanded first
    pending.extend((path, lineage) for path in reversed(subdirectories))


def guess_content_type(path: Path | str) -> str | None:
  """Return the MIME type for a file path, or None when unknown."""
  content_type, _ = mimetypes.guess_type(str(path), strict=False)
  return content_type


def relative_key(root: Path, path: Path) -> str:
  """Return the bucket key for a file below root, using "/" separators."""
  return path.relative_to(root).as_posix()


def plan_content(root: Path | str) -> tuple[ContentObject, ...]:
  """Describe one public-read content object per file below root.

  File contents are never read here, only referenced by path.
  """
  root = Path(root)
  objects: list[ContentObject] = []

  def add(path: Path) -> None:
    objects.append(
      ContentObject(
        key=relative_key(root, path),
        source=path,
        content_type=guess_content_type(path),
      )
    )

  crawl_directory(root, add)
  logger.info("Planned %d content objects from %s", len(objects), root)
  return tuple(objects)

