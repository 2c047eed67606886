"""HTTP endpoints for issuing presigned URLs."""

import logging

from fastapi import APIRouter, Query, Request
from fastapi.responses import RedirectResponse

from s3signer.core.config import S3SignerConfig, require_config
from s3signer.storage.handlers import RedirectHandler, SignRequestHandler
from s3signer.storage.models import SignResult

logger = logging.getLogger(__name__)


def create_s3_router(config: S3SignerConfig | None) -> APIRouter:
    """Create the router serving ``/sign`` and, optionally, ``/uploads/{key}``.

    Args:
        config: Signer configuration

    Returns:
        An APIRouter mounted under ``config.prefix``

    Raises:
        S3ConfigurationError: If no configuration is supplied

    Example:
        app = FastAPI()
        register_error_handlers(app)
        app.include_router(create_s3_router(config))
    """
    config = require_config(config)
    sign_handler = SignRequestHandler(config)
    router = APIRouter(prefix=config.prefix, tags=["s3"])

    if config.enable_redirect:
        redirect_handler = RedirectHandler(config)

        @router.get("/uploads/{key:path}", response_class=RedirectResponse)
        async def temp_redirect(key: str) -> RedirectResponse:
            """Redirect to a temporary signed URL giving GET access to an upload."""
            return RedirectResponse(await redirect_handler(key), status_code=302)

    @router.get(
        "/sign",
        response_model=SignResult,
        response_model_exclude_none=True,
    )
    async def sign(
        request: Request,
        object_name: str | None = Query(None, alias="objectName"),
        file_name: str | None = Query(None, alias="fileName"),
        content_type: str | None = Query(None, alias="contentType"),
        content_disposition: str | None = Query(None, alias="contentDisposition"),
    ) -> SignResult:
        """Return a signed URL giving temporary PUT access to an object."""
        return await sign_handler(
            request,
            {
                "objectName": object_name,
                "fileName": file_name,
                "contentType": content_type,
                "contentDisposition": content_disposition,
            },
        )

    logger.debug(
        f"Mounted s3 routes under {config.prefix!r} "
        f"(redirect {'enabled' if config.enable_redirect else 'disabled'})"
    )
    return router
