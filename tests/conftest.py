"""Pytest fixtures for static website tests."""

from pathlib import Path

import aws_cdk as cdk
import pytest


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App for testing."""
  return cdk.App()


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack for testing."""
  return cdk.Stack(app, "TestStack", env=cdk.Environment(region="us-east-1"))


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
  """Create a content tree with a page and a nested image."""
  www = tmp_path / "www"
  (www / "img").mkdir(parents=True)
  (www / "index.html").write_text("<h1>Hello</h1>\n")
  (www / "img" / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n")
  return www


class FakeZoneLookup:
  """Zone lookup returning fixed zone ids and recording requested names."""

  def __init__(self, zones: dict[str, str]) -> None:
    self.zones = zones
    self.calls: list[str] = []

  def __call__(self, zone_name: str) -> str | None:
    self.calls.append(zone_name)
    return self.zones.get(zone_name)


@pytest.fixture
def zone_lookup() -> FakeZoneLookup:
  """Zone lookup knowing the example.com zone, with and without trailing dot."""
  return FakeZoneLookup({"example.com.": "Z123EXAMPLE", "example.com": "Z123EXAMPLE"})
