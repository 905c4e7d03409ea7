"""Boto3 client factory.

If AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY are set, use them;
otherwise use the default boto3 credential provider (SSO, role, etc.).
"""

import os
from typing import Any

from botocore.config import Config

from lavender_stays.config import settings


def get_boto3_client_kwargs(service: str = "s3") -> dict[str, Any]:
    """Return kwargs for boto3.client() so that explicit credentials are used only when set.

    Args:
        service: Service name for boto3 (e.g. 's3').

    Returns:
        Dict with at least 'region_name' and a retry/timeout 'config'. May include
        'endpoint_url', 'aws_access_key_id' and 'aws_secret_access_key'.
    """
    kwargs: dict[str, Any] = {
        "region_name": settings.aws.region,
        "config": Config(
            retries={"max_attempts": settings.aws.max_retries, "mode": "standard"},
            connect_timeout=settings.aws.request_timeout,
            read_timeout=settings.aws.request_timeout,
        ),
    }
    if settings.aws.endpoint_url:
        kwargs["endpoint_url"] = settings.aws.endpoint_url
    access_key = os.environ.get("AWS_ACCESS_KEY_ID", "").strip()
    secret_key = os.environ.get("AWS_SECRET_ACCESS_KEY", "").strip()
    if access_key and secret_key:
        kwargs["aws_access_key_id"] = access_key
        kwargs["aws_secret_access_key"] = secret_key
    return kwargs
