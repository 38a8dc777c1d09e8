"""CloudFront distribution for static website."""

from aws_cdk import Duration
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_s3 as s3
from constructs import Construct

from static_website.config import CacheSettings, ContentArgs, DomainArgs
from static_website.errors import InvalidArgumentError


def build_error_responses(custom_404_path: str | None) -> list[cloudfront.ErrorResponse]:
  """Return the custom error responses for an optional 404 page."""
  if not custom_404_path:
    return []
  # Friendlier than CloudFront's "The parameter ResponsePagePath is invalid."
  if not custom_404_path.startswith("/"):
    raise InvalidArgumentError(
      f"custom_404_path must be prefixed with a slash, got {custom_404_path!r}"
    )
  return [
    cloudfront.ErrorResponse(
      http_status=404,
      response_http_status=404,
      response_page_path=custom_404_path,
    )
  ]


class CloudFrontDistribution(Construct):
  """CloudFront distribution with S3 static website origin.

  Speeds up delivery by caching content in edge locations. When domain is
  given, the distribution answers on the target domain with the supplied
  certificate; otherwise it is reachable only on its cloudfront.net name.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    content_bucket: s3.IBucket,
    logs_bucket: s3.IBucket,
    content: ContentArgs,
    domain: DomainArgs | None = None,
    cache: CacheSettings | None = None,
    log_prefix: str = "",
  ) -> None:
    super().__init__(scope, id)

    cache = cache or CacheSettings()
    error_responses = build_error_responses(content.custom_404_path)

    # S3 website endpoints do not support HTTPS
    origin = origins.S3StaticWebsiteOrigin(
      content_bucket,
      protocol_policy=cloudfront.OriginProtocolPolicy.HTTP_ONLY,
      http_port=80,
      https_port=443,
      origin_ssl_protocols=[cloudfront.OriginSslPolicy.TLS_V1_2],
    )

    self.cache_policy = cloudfront.CachePolicy(
      self,
      "CachePolicy",
      comment="Static website content",
      min_ttl=Duration.seconds(cache.min_ttl),
      default_ttl=Duration.seconds(cache.default_ttl),
      max_ttl=Duration.seconds(cache.max_ttl),
      cookie_behavior=(
        cloudfront.CacheCookieBehavior.all()
        if cache.forward_cookies
        else cloudfront.CacheCookieBehavior.none()
      ),
      query_string_behavior=(
        cloudfront.CacheQueryStringBehavior.all()
        if cache.forward_query_string
        else cloudfront.CacheQueryStringBehavior.none()
      ),
      header_behavior=cloudfront.CacheHeaderBehavior.none(),
    )

    if domain is None:
      certificate = None
      domain_names = None
      minimum_protocol_version = None
    else:
      certificate = acm.Certificate.from_certificate_arn(
        self, "Certificate", domain.acm_certificate_arn
      )
      domain_names = [domain.target_domain]
      minimum_protocol_version = cloudfront.SecurityPolicyProtocol.TLS_V1_2_2021

    self.distribution = cloudfront.Distribution(
      self,
      "Distribution",
      default_behavior=cloudfront.BehaviorOptions(
        origin=origin,
        viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
        allowed_methods=cloudfront.AllowedMethods.ALLOW_GET_HEAD_OPTIONS,
        cached_methods=cloudfront.CachedMethods.CACHE_GET_HEAD_OPTIONS,
        cache_policy=self.cache_policy,
      ),
      default_root_object="index.html",
      error_responses=error_responses or None,
      domain_names=domain_names,
      certificate=certificate,
      ssl_support_method=cloudfront.SSLMethod.SNI if certificate else None,
      minimum_protocol_version=minimum_protocol_version,
      enable_logging=True,
      log_bucket=logs_bucket,
      log_includes_cookies=False,
      log_file_prefix=log_prefix or None,
      # PriceClass_100 is the least broad, and also the least expensive
      price_class=cloudfront.PriceClass.PRICE_CLASS_100,
    )
