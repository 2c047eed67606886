"""Object key and Content-Disposition helpers."""

import logging
import posixpath
import re
import uuid

from s3signer.core.exceptions import KeyRejectedError, S3ConfigurationError

logger = logging.getLogger(__name__)

AUTO_DISPOSITION = "auto"


def randomize_filename(filename: str) -> str:
    """Prefix a filename with a fresh UUID token.

    The original name is kept as a suffix so the stored object stays
    recognizable, e.g. ``"3f2c..._report.pdf"``.
    """
    return f"{uuid.uuid4()}_{filename}"


def build_object_key(filename: str, key_prefix: str | None = None) -> str:
    """Join an optional prefix and a filename into an object key.

    A single trailing slash on the prefix is ignored, so ``"uploads"`` and
    ``"uploads/"`` produce the same key.

    Args:
        filename: The stored filename
        key_prefix: Optional key prefix

    Returns:
        The object key
    """
    if not key_prefix:
        return filename
    prefix = key_prefix[:-1] if key_prefix.endswith("/") else key_prefix
    return f"{prefix}/{filename}"


def compile_key_pattern(key_regexp: str | re.Pattern | None) -> re.Pattern | None:
    """Normalize a pattern source string or compiled pattern.

    Raises:
        S3ConfigurationError: If the pattern source does not compile
    """
    if key_regexp is None or isinstance(key_regexp, re.Pattern):
        return key_regexp
    try:
        return re.compile(key_regexp)
    except re.error as e:
        raise S3ConfigurationError(
            f"invalid key_regexp: {e}", missing_fields=["key_regexp"]
        ) from e


def check_key(key: str, pattern: re.Pattern | None) -> None:
    """Reject keys that do not match the configured pattern.

    Matching is unanchored: the pattern may match anywhere in the key.

    Raises:
        KeyRejectedError: If the key does not match
    """
    if pattern is not None and not pattern.search(key):
        logger.warning(f"Rejected key {key!r}: does not match {pattern.pattern!r}")
        raise KeyRejectedError(key, pattern.pattern)


def resolve_disposition(directive, content_type: str) -> str | None:
    """Turn a contentDisposition directive into a disposition token.

    Args:
        directive: ``"auto"``, an explicit token such as ``"inline"``, or a
            falsy value for no disposition
        content_type: MIME type of the upload

    Returns:
        The disposition token, or None when no header should be produced
    """
    if not directive:
        return None
    if directive == AUTO_DISPOSITION:
        return "inline" if content_type.startswith("image/") else "attachment"
    return str(directive)


def content_disposition_header(disposition: str, filename: str) -> str:
    """Build a Content-Disposition value naming the file's basename."""
    name = posixpath.basename(filename.rstrip("/")) or filename
    return f'{disposition}; filename="{name}"'
