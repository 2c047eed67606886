"""s3signer: presigned S3 upload URLs for FastAPI applications."""

__version__ = "0.1.0"

# Core components
from s3signer.core.config import S3SignerConfig, require_config
from s3signer.core.exceptions import (
    KeyRejectedError,
    MissingBucketError,
    MissingParameterError,
    MissingSignerError,
    S3ConfigurationError,
    S3ConnectionError,
    S3SignerError,
    S3ValidationError,
)
from s3signer.core.settings import S3SignerSettings

# Signing components
from s3signer.storage import (
    ReadIntent,
    S3SigningDelegate,
    SigningDelegate,
    SigningIntent,
    SignResult,
    ensure_async,
)
from s3signer.storage.handlers import RedirectHandler, SignRequestHandler

# FastAPI components
from s3signer.fastapi import create_s3_router, create_s3signer_app, register_error_handlers

__all__ = [
    # Version
    "__version__",
    # Core
    "S3SignerConfig",
    "S3SignerSettings",
    "require_config",
    "S3SignerError",
    "S3ConfigurationError",
    "MissingBucketError",
    "MissingSignerError",
    "S3ConnectionError",
    "S3ValidationError",
    "MissingParameterError",
    "KeyRejectedError",
    # Signing
    "SigningIntent",
    "ReadIntent",
    "SignResult",
    "SigningDelegate",
    "S3SigningDelegate",
    "ensure_async",
    "SignRequestHandler",
    "RedirectHandler",
    # FastAPI
    "create_s3_router",
    "create_s3signer_app",
    "register_error_handlers",
]
