import logging

import boto3
from botocore.config import Config

logger = logging.getLogger(__name__)

# per-call deadline for every AWS request
CLIENT_CONFIG = Config(connect_timeout=5, read_timeout=10, retries={"max_attempts": 3})


def build_client(service: str, settings):
    client_kwargs = {
        "region_name": settings.aws_region,
        "config": CLIENT_CONFIG,
    }
    # Only include endpoint_url if it's provided (for local testing)
    if settings.aws_endpoint_url:
        client_kwargs["endpoint_url"] = settings.aws_endpoint_url
    return boto3.client(service, **client_kwargs)


class S3Storage:
    """Object storage for book posters and PDF contents."""

    def __init__(self, client, bucket: str, url_ttl_seconds: int = 600):
        self.client = client
        self.bucket = bucket
        self.url_ttl_seconds = url_ttl_seconds

    def save_file(self, key: str, content_type: str, fileobj) -> str:
        self.client.put_object(
            Bucket=self.bucket,
            Key=key,
            Body=fileobj,
            ContentType=content_type,
        )
        logger.debug("uploaded object %s (%s)", key, content_type)
        return key

    def presigned_url(self, key: str) -> str:
        return self.client.generate_presigned_url(
            "get_object",
            Params={"Bucket": self.bucket, "Key": key},
            ExpiresIn=self.url_ttl_seconds
        )

    def delete_file(self, key: str) -> None:
        self.client.delete_object(Bucket=self.bucket, Key=key)
