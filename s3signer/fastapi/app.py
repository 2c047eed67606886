"""Application factory for a standalone signing service."""

import logging

from fastapi import FastAPI

from s3signer.core.client import create_s3_client
from s3signer.core.settings import S3SignerSettings
from s3signer.fastapi.error_handlers import register_error_handlers
from s3signer.fastapi.router import create_s3_router

logger = logging.getLogger(__name__)


def create_s3signer_app(
    settings: S3SignerSettings | None = None,
    s3_client=None,
    title: str | None = None,
    **config_overrides,
) -> FastAPI:
    """Create a FastAPI app serving the signing endpoints.

    The configuration is validated here, so a missing bucket or signing
    backend fails at startup instead of on the first request.

    Args:
        settings: Settings to use (loaded from the environment if omitted)
        s3_client: S3 client for signing (created from settings if omitted
            and no custom ``get_signed_url`` is given)
        title: API title
        **config_overrides: Extra S3SignerConfig fields, e.g.
            ``validate_request`` or ``get_signed_url``

    Returns:
        The configured FastAPI application
    """
    settings = settings or S3SignerSettings()
    if s3_client is None and "get_signed_url" not in config_overrides:
        s3_client = create_s3_client(settings)
    config = settings.to_config(s3_client=s3_client, **config_overrides)

    app = FastAPI(title=title or settings.app_name, debug=settings.debug)
    app.state.settings = settings
    app.state.signer_config = config

    register_error_handlers(app)
    app.include_router(create_s3_router(config))

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "service": settings.app_name, "bucket": config.bucket}

    logger.info(f"{settings.app_name} signing for bucket {config.bucket!r} under {config.prefix!r}")
    return app
