"""Environment-driven settings for s3signer."""

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from s3signer.core.config import DEFAULT_ACL, DEFAULT_EXPIRES, DEFAULT_PREFIX, S3SignerConfig


class S3SignerSettings(BaseSettings):
    """Settings loaded from the environment or a ``.env`` file.

    Only the deployment wiring reads these; the handlers themselves take an
    :class:`S3SignerConfig` built via :meth:`to_config`.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # AWS
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None
    aws_default_region: str = "us-east-1"
    aws_url: str | None = Field(default=None, description="Custom endpoint, e.g. LocalStack")
    aws_bucket_name: str | None = None
    aws_retry_attempts: int = 3

    # Signing
    s3_key_prefix: str | None = None
    s3_key_regexp: str | None = None
    s3_randomize_filename: bool = False
    s3_url_expires: int = Field(default=DEFAULT_EXPIRES, gt=0)
    s3_default_acl: str = DEFAULT_ACL
    s3_enable_redirect: bool = False
    s3_route_prefix: str = DEFAULT_PREFIX

    # App
    app_name: str = "s3signer"
    debug: bool = False
    log_level: str = "INFO"

    def to_config(self, s3_client=None, **overrides: Any) -> S3SignerConfig:
        """Build a signer configuration from these settings.

        Args:
            s3_client: S3 client used for signing
            **overrides: Fields passed straight to S3SignerConfig, e.g. a
                custom ``get_signed_url`` or ``validate_request``

        Returns:
            A validated, immutable S3SignerConfig

        Raises:
            S3ConfigurationError: If the resulting configuration is invalid
        """
        options = {
            "bucket": self.aws_bucket_name,
            "s3_client": s3_client,
            "key_prefix": self.s3_key_prefix,
            "key_regexp": self.s3_key_regexp,
            "randomize_filename": self.s3_randomize_filename,
            "expires": self.s3_url_expires,
            "acl": self.s3_default_acl,
            "enable_redirect": self.s3_enable_redirect,
            "prefix": self.s3_route_prefix,
        }
        options.update(overrides)
        return S3SignerConfig(**options)

    def masked(self) -> dict[str, Any]:
        """Return the settings as a dict with secrets hidden."""
        data = self.model_dump()
        for name in ("aws_access_key_id", "aws_secret_access_key"):
            if data.get(name):
                data[name] = "****"
        return data
