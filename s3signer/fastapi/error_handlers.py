"""FastAPI error handlers for s3signer exceptions.

This module converts s3signer exceptions into JSON responses. Errors raised
by a custom request validator or by the signing backend are deliberately
not handled here, so they keep whatever status the framework gives them.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from s3signer.core.exceptions import (
    S3ConfigurationError,
    S3ConnectionError,
    S3SignerError,
    S3ValidationError,
)

logger = logging.getLogger(__name__)


async def s3signer_exception_handler(
    request: Request,
    exc: S3SignerError
) -> JSONResponse:
    """Handle s3signer exceptions with helpful error messages.

    Args:
        request: The FastAPI request
        exc: The s3signer exception

    Returns:
        JSONResponse with error details
    """
    if isinstance(exc, S3ValidationError):
        status_code = exc.status_code
        error_type = exc.error_type
    elif isinstance(exc, S3ConnectionError):
        status_code = 503
        error_type = "service_unavailable"
    elif isinstance(exc, S3ConfigurationError):
        status_code = 500
        error_type = "configuration_error"
    else:
        status_code = 500
        error_type = "internal_error"

    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")

    content = {
        "error": error_type,
        "message": exc.message,
    }
    if exc.hint:
        content["hint"] = exc.hint
    if isinstance(exc, S3ValidationError) and exc.field:
        content["field"] = exc.field

    return JSONResponse(status_code=status_code, content=content)


def register_error_handlers(app: FastAPI) -> None:
    """Register the s3signer error handlers with a FastAPI app.

    Args:
        app: The FastAPI application
    """
    app.add_exception_handler(S3SignerError, s3signer_exception_handler)
