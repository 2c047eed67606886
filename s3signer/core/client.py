"""S3 client construction for signing."""

import logging
from collections.abc import AsyncGenerator
from contextlib import AsyncExitStack, asynccontextmanager

from aiobotocore.client import AioBaseClient
from aiobotocore.session import get_session
from boto3.session import Session
from botocore.client import BaseClient
from botocore.config import Config

from s3signer.core.exceptions import S3ConnectionError
from s3signer.core.settings import S3SignerSettings

logger = logging.getLogger(__name__)


def adjust_endpoint_url(
    endpoint_url: str | None, bucket_name: str | None
) -> str | None:
    """Adjust endpoint URL for path-style addressing if needed.

    Args:
        endpoint_url: The S3 endpoint URL
        bucket_name: The S3 bucket name

    Returns:
        Adjusted endpoint URL or None
    """
    if not endpoint_url:
        return None
    if bucket_name and f"{bucket_name}." in endpoint_url:
        return endpoint_url.replace(f"{bucket_name}.", "")
    return endpoint_url


def build_client_config(settings: S3SignerSettings) -> Config:
    """Build the botocore config used for signing clients.

    Presigned URLs are always SigV4 and path-style so that custom
    endpoints such as LocalStack or MinIO accept them.
    """
    return Config(
        signature_version="s3v4",
        s3={"addressing_style": "path"},
        retries={
            "max_attempts": settings.aws_retry_attempts,
            "mode": "standard",
        },
    )


def _client_kwargs(settings: S3SignerSettings) -> dict:
    return {
        "region_name": settings.aws_default_region,
        "aws_access_key_id": settings.aws_access_key_id,
        "aws_secret_access_key": settings.aws_secret_access_key,
        "endpoint_url": adjust_endpoint_url(settings.aws_url, settings.aws_bucket_name),
        "config": build_client_config(settings),
    }


def create_s3_client(settings: S3SignerSettings) -> BaseClient:
    """Create a synchronous boto3 S3 client.

    ``generate_presigned_url`` on this client computes signatures locally,
    so it is safe to call from async request handlers.

    Raises:
        S3ConnectionError: If client creation fails
    """
    kwargs = _client_kwargs(settings)
    try:
        client = Session().client("s3", **kwargs)
    except Exception as e:
        raise S3ConnectionError(
            message=f"Failed to create sync S3 client: {e}",
            original_error=e,
            endpoint=kwargs["endpoint_url"],
        ) from e
    logger.debug(f"Created S3 client for region {settings.aws_default_region}")
    return client


@asynccontextmanager
async def async_s3_client(settings: S3SignerSettings) -> AsyncGenerator[AioBaseClient, None]:
    """Get an aiobotocore S3 client within a context manager.

    Only client creation errors are wrapped; errors raised while the
    client is in use propagate unchanged.

    Yields:
        An aiobotocore S3 client

    Raises:
        S3ConnectionError: If client creation fails
    """
    kwargs = _client_kwargs(settings)
    async with AsyncExitStack() as stack:
        try:
            client = await stack.enter_async_context(
                get_session().create_client("s3", **kwargs)
            )
        except Exception as e:
            raise S3ConnectionError(
                message=f"Failed to create async S3 client: {e}",
                original_error=e,
                endpoint=kwargs["endpoint_url"],
            ) from e
        yield client
