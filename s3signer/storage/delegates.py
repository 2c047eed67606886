"""Signing delegates.

A signing delegate is any callable taking a :class:`SigningIntent` or
:class:`ReadIntent` and returning an awaitable that resolves to a signed
URL string. Handlers only ever see this uniform async interface, whether
the backend is a boto3 client, an aiobotocore client, or a custom function.
"""

import inspect
import logging
from typing import Any, Awaitable, Callable, Union

from s3signer.storage.models import ReadIntent, SigningIntent

logger = logging.getLogger(__name__)

Intent = Union[SigningIntent, ReadIntent]
SigningDelegate = Callable[[Intent], Awaitable[str]]


def ensure_async(func: Callable[[Intent], Any]) -> SigningDelegate:
    """Wrap a sync or async signing function as an async delegate.

    Args:
        func: Callable returning either a URL or an awaitable of a URL

    Returns:
        An async callable with the signing delegate signature
    """
    if inspect.iscoroutinefunction(func):
        return func

    async def delegate(intent: Intent) -> str:
        result = func(intent)
        if inspect.isawaitable(result):
            result = await result
        return result

    return delegate


class S3SigningDelegate:
    """Signing delegate backed by an S3 client.

    Works with both boto3 clients (where ``generate_presigned_url`` is a
    plain method) and aiobotocore clients (where it is a coroutine).
    Signing is computed locally from the client's credentials, so no
    request is sent to S3.

    Example:
        client = boto3.client("s3")
        delegate = S3SigningDelegate(client)
        url = await delegate(intent)
    """

    def __init__(self, s3_client):
        """Initialize the delegate.

        Args:
            s3_client: boto3 or aiobotocore S3 client
        """
        self.s3_client = s3_client

    async def __call__(self, intent: Intent) -> str:
        """Produce a signed URL for the intent.

        Args:
            intent: What kind of access is being granted

        Returns:
            The presigned URL

        Raises:
            Whatever the underlying client raises, unchanged.
        """
        kwargs: dict[str, Any] = {"Params": intent.to_params()}
        if intent.expires_in_seconds is not None:
            kwargs["ExpiresIn"] = intent.expires_in_seconds

        logger.debug(f"Signing {intent.operation} for s3://{intent.bucket}/{intent.key}")
        url = self.s3_client.generate_presigned_url(ClientMethod=intent.operation, **kwargs)
        if inspect.isawaitable(url):
            url = await url
        return url
