"""Testing utilities for s3signer applications."""

from s3signer.core.config import S3SignerConfig
from s3signer.core.settings import S3SignerSettings
from s3signer.testing.mocks import MockS3Client


def create_test_settings(
    bucket_name: str = "test-bucket",
    **overrides
) -> S3SignerSettings:
    """Create s3signer settings for testing.

    Args:
        bucket_name: The S3 bucket name for tests
        **overrides: Additional settings to override

    Returns:
        S3SignerSettings instance configured for testing
    """
    return S3SignerSettings(
        _env_file=None,
        aws_bucket_name=bucket_name,
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
        aws_default_region="us-east-1",
        aws_url="http://localhost:4566",
        debug=True,
        **overrides,
    )


def create_test_config(
    s3_client: MockS3Client | None = None,
    bucket: str = "test-bucket",
    **overrides
) -> S3SignerConfig:
    """Create a signer configuration backed by a mock client.

    Args:
        s3_client: Mock client (a fresh MockS3Client if omitted)
        bucket: Bucket name
        **overrides: Additional S3SignerConfig fields

    Returns:
        S3SignerConfig instance
    """
    if s3_client is None and "get_signed_url" not in overrides:
        s3_client = MockS3Client()
    return S3SignerConfig(bucket=bucket, s3_client=s3_client, **overrides)
