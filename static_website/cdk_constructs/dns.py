"""Route 53 alias record pointing a domain at the distribution."""

from typing import cast

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from constructs import Construct

from static_website.domain import ZoneLookup, split_domain
from static_website.errors import ZoneNotFoundError


class AliasRecord(Construct):
  """A record on the target domain aliasing the CloudFront distribution.

  The record goes into the hosted zone of the parent domain: "www.example.com"
  creates "www" in "example.com", "example.com" creates the zone apex record.

  Without zone_lookup the parent zone is resolved by the CDK context provider,
  which needs an environment-bound stack and caches results in cdk.context.json.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    target_domain: str,
    distribution: cloudfront.IDistribution,
    zone_lookup: ZoneLookup | None = None,
  ) -> None:
    super().__init__(scope, id)

    self.domain_parts = split_domain(target_domain)
    parent_domain = self.domain_parts.parent_domain
    zone_name = parent_domain.rstrip(".")

    if zone_lookup is None:
      self.hosted_zone = route53.HostedZone.from_lookup(
        self,
        "HostedZone",
        domain_name=zone_name,
      )
    else:
      hosted_zone_id = zone_lookup(parent_domain)
      if not hosted_zone_id:
        raise ZoneNotFoundError(
          f"No hosted zone found for {parent_domain!r} (target domain {target_domain!r})"
        )
      self.hosted_zone = route53.HostedZone.from_hosted_zone_attributes(
        self,
        "HostedZone",
        hosted_zone_id=hosted_zone_id,
        zone_name=zone_name,
      )

    self.record = route53.ARecord(
      self,
      "Record",
      zone=self.hosted_zone,
      record_name=self.domain_parts.subdomain or None,
      target=route53.RecordTarget.from_alias(targets.CloudFrontTarget(distribution)),
    )
    # CloudFrontTarget does not expose target health evaluation
    cfn_record = cast(route53.CfnRecordSet, self.record.node.default_child)
    cfn_record.add_property_override("AliasTarget.EvaluateTargetHealth", True)
