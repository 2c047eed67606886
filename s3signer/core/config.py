"""Signer configuration."""

import re
from dataclasses import dataclass, field
from typing import Any, Callable

from s3signer.core.exceptions import (
    MissingBucketError,
    MissingSignerError,
    S3ConfigurationError,
)
from s3signer.storage.delegates import S3SigningDelegate, SigningDelegate, ensure_async
from s3signer.storage.keys import compile_key_pattern

DEFAULT_EXPIRES = 60
DEFAULT_ACL = "private"
DEFAULT_PREFIX = "/s3"

RequestValidator = Callable[[Any, Any], Any]


@dataclass(frozen=True)
class S3SignerConfig:
    """Configuration shared by the sign and redirect handlers.

    Validated once at construction; immutable afterwards.

    Attributes:
        bucket: Bucket that signed URLs grant access to
        s3_client: boto3 or aiobotocore S3 client used for signing
        get_signed_url: Custom signing function (sync or async) taking an
            intent and returning a URL; takes precedence over ``s3_client``
        validate_request: Optional ``(request, intent)`` hook run before
            signing; may be sync or async. It aborts the request by raising;
            under FastAPI, raise ``HTTPException`` to choose the status code
        key_prefix: Prefix joined to every generated key
        key_regexp: Pattern (string or compiled) that keys must match
        randomize_filename: Prepend a UUID token to every filename
        expires: Signed upload URL validity in seconds
        acl: Canned ACL applied to uploads
        enable_redirect: Register the ``/uploads/{key}`` redirect endpoint
        prefix: Route prefix for the HTTP endpoints; normalized to a single
            leading slash and no trailing slash (``"s3/"`` becomes ``"/s3"``)

    Example:
        config = S3SignerConfig(
            bucket="my-bucket",
            s3_client=boto3.client("s3"),
            key_prefix="uploads/",
            randomize_filename=True,
        )
    """

    bucket: str | None = None
    s3_client: Any = None
    get_signed_url: Callable | None = None
    validate_request: RequestValidator | None = None
    key_prefix: str | None = None
    key_regexp: str | re.Pattern | None = None
    randomize_filename: bool = False
    expires: int = DEFAULT_EXPIRES
    acl: str = DEFAULT_ACL
    enable_redirect: bool = False
    prefix: str = DEFAULT_PREFIX
    signer: SigningDelegate = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.bucket:
            raise MissingBucketError()
        if self.s3_client is None and self.get_signed_url is None:
            raise MissingSignerError()

        object.__setattr__(self, "key_regexp", compile_key_pattern(self.key_regexp))
        stripped = self.prefix.strip("/")
        object.__setattr__(self, "prefix", f"/{stripped}" if stripped else "")
        if self.get_signed_url is not None:
            signer = ensure_async(self.get_signed_url)
        else:
            signer = S3SigningDelegate(self.s3_client)
        object.__setattr__(self, "signer", signer)

    @property
    def uploads_path(self) -> str:
        """Path prefix under which uploads are served by the redirect endpoint."""
        return f"{self.prefix}/uploads"


def require_config(config: S3SignerConfig | None) -> S3SignerConfig:
    """Return the config, failing fast if none was supplied.

    Raises:
        S3ConfigurationError: If config is None
    """
    if config is None:
        raise S3ConfigurationError("configuration is required")
    if not isinstance(config, S3SignerConfig):
        raise S3ConfigurationError(
            f"expected S3SignerConfig, got {type(config).__name__}"
        )
    return config
