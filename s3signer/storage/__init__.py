"""Signing domain for s3signer.

This module provides the signing intents, the signing delegate contract and
the helpers used to derive object keys and Content-Disposition headers.
The request handlers live in :mod:`s3signer.storage.handlers`.
"""

from s3signer.storage.delegates import S3SigningDelegate, SigningDelegate, ensure_async
from s3signer.storage.models import ReadIntent, SigningIntent, SignResult

__all__ = [
    "ReadIntent",
    "S3SigningDelegate",
    "SigningDelegate",
    "SigningIntent",
    "SignResult",
    "ensure_async",
]
