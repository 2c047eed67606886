"""FastAPI integration for s3signer."""

from s3signer.fastapi.app import create_s3signer_app
from s3signer.fastapi.error_handlers import register_error_handlers
from s3signer.fastapi.router import create_s3_router

__all__ = ["create_s3_router", "create_s3signer_app", "register_error_handlers"]
