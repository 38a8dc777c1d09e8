#!/usr/bin/env python3
"""CDK application entry point for static website infrastructure."""

import logging
import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk
import boto3

from static_website.config import Config
from static_website.stacks.site_stack import StaticWebsiteStack


def get_account_id() -> str:
  """Get AWS account ID from current credentials."""
  sts = boto3.client("sts")
  return str(sts.get_caller_identity()["Account"])


def main() -> None:
  """Create CDK app with a stack for each configured website."""
  logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
  app = cdk.App()

  # Load configuration
  config_path = app.node.try_get_context("config") or "websites.yaml"
  config = Config.from_yaml(Path(config_path))

  # Get account ID from credentials
  account_id = get_account_id()

  for website in config.websites:
    StaticWebsiteStack(
      app,
      f"StaticWebsite-{website.name}",
      website_config=website,
      env=cdk.Environment(
        account=account_id,
        region=website.region,
      ),
      description=f"Static website infrastructure for {website.name}",
    )

  app.synth()


if __name__ == "__main__":
  main()
