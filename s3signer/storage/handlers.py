"""Sign and redirect request handlers.

These handlers hold the whole request-shaping logic and are independent of
the web framework: the FastAPI router in :mod:`s3signer.fastapi.router`
only extracts query parameters and turns results into responses.
"""

import inspect
import logging
from typing import Any, Mapping

from s3signer.core.config import S3SignerConfig, require_config
from s3signer.core.exceptions import MissingParameterError
from s3signer.storage.keys import (
    build_object_key,
    check_key,
    content_disposition_header,
    randomize_filename,
    resolve_disposition,
)
from s3signer.storage.models import ReadIntent, SigningIntent, SignResult

logger = logging.getLogger(__name__)


class SignRequestHandler:
    """Issue presigned upload URLs.

    Validates the request parameters, derives the object key, runs the
    optional custom validator and delegates signing. Validation failures
    raise :class:`~s3signer.core.exceptions.S3ValidationError` subclasses
    before anything is signed; validator and signing errors propagate
    unchanged.

    Example:
        handler = SignRequestHandler(config)
        result = await handler(request, {
            "fileName": "photo.jpg",
            "contentType": "image/jpeg",
            "contentDisposition": "auto",
        })
        result.signed_url
    """

    def __init__(self, config: S3SignerConfig | None):
        """Initialize the handler.

        Args:
            config: Signer configuration

        Raises:
            S3ConfigurationError: If no configuration is supplied
        """
        self.config = require_config(config)

    def build_intent(self, query: Mapping[str, Any]) -> tuple[str, SigningIntent]:
        """Validate the query and build the write intent for it.

        Returns:
            The stored filename and the signing intent

        Raises:
            MissingParameterError: If a required parameter is absent
            KeyRejectedError: If the key does not match the configured pattern
        """
        filename = query.get("fileName") or query.get("objectName")
        if not filename:
            raise MissingParameterError(
                "Either objectName or fileName is required as a query parameter",
                fields=["objectName", "fileName"],
            )
        content_type = query.get("contentType")
        if not content_type:
            raise MissingParameterError(
                "contentType is a required query parameter",
                fields=["contentType"],
            )

        if self.config.randomize_filename:
            filename = randomize_filename(filename)
        key = build_object_key(filename, self.config.key_prefix)
        logger.debug(f"Derived key {key!r} for filename {filename!r}")
        check_key(key, self.config.key_regexp)

        header = None
        disposition = resolve_disposition(query.get("contentDisposition"), content_type)
        if disposition:
            header = content_disposition_header(disposition, filename)

        intent = SigningIntent(
            bucket=self.config.bucket,
            key=key,
            expires_in_seconds=self.config.expires,
            content_type=content_type,
            access_control=self.config.acl,
            content_disposition=header,
        )
        return filename, intent

    async def __call__(self, request: Any, query: Mapping[str, Any]) -> SignResult:
        """Handle a sign request.

        Args:
            request: The inbound request, passed through to the validator
            query: Query parameters (objectName, fileName, contentType,
                contentDisposition)

        Returns:
            The response body

        Raises:
            MissingParameterError: If a required parameter is absent
            KeyRejectedError: If the key does not match the configured pattern
        """
        filename, intent = self.build_intent(query)

        if self.config.validate_request is not None:
            outcome = self.config.validate_request(request, intent)
            if inspect.isawaitable(outcome):
                await outcome

        signed_url = await self.config.signer(intent)

        headers = None
        if intent.content_disposition:
            headers = {"Content-Disposition": intent.content_disposition}

        public_url = None
        if self.config.enable_redirect:
            public_url = f"{self.config.uploads_path}/{filename}"

        return SignResult(
            filename=filename,
            key=intent.key,
            signed_url=signed_url,
            public_url=public_url,
            headers=headers,
        )


class RedirectHandler:
    """Resolve object keys to temporary read URLs.

    Only wired into the router when ``enable_redirect`` is set. Keys are
    not checked against ``key_regexp``.
    """

    def __init__(self, config: S3SignerConfig | None):
        self.config = require_config(config)

    async def __call__(self, key: str) -> str:
        """Return a signed GET URL for the key."""
        intent = ReadIntent(bucket=self.config.bucket, key=key)
        return await self.config.signer(intent)
