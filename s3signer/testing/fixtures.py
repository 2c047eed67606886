"""Pytest fixtures for s3signer testing.

To use these fixtures, add to your conftest.py:

    pytest_plugins = ["s3signer.testing.fixtures"]
"""

import pytest
from fastapi.testclient import TestClient

from s3signer.core.settings import S3SignerSettings
from s3signer.fastapi.app import create_s3signer_app
from s3signer.testing.mocks import MockS3Client
from s3signer.testing.utils import create_test_settings


@pytest.fixture
def s3_test_bucket() -> str:
    """Provide test bucket name."""
    return "test-bucket"


@pytest.fixture
def s3signer_settings(s3_test_bucket: str) -> S3SignerSettings:
    """Provide test settings for s3signer.

    Returns:
        S3SignerSettings instance configured for testing
    """
    return create_test_settings(bucket_name=s3_test_bucket)


@pytest.fixture
def mock_s3() -> MockS3Client:
    """Provide a mock signing client.

    Returns:
        MockS3Client instance
    """
    s3 = MockS3Client()
    yield s3
    s3.clear()


@pytest.fixture
def s3signer_test_app(s3signer_settings: S3SignerSettings, mock_s3: MockS3Client):
    """Provide a test client for an s3signer app backed by the mock client.

    Yields:
        FastAPI TestClient
    """
    app = create_s3signer_app(settings=s3signer_settings, s3_client=mock_s3)
    with TestClient(app) as client:
        yield client
