"""Testing utilities for s3signer applications.

Usage in conftest.py:
    from s3signer.testing import MockS3Client, create_test_config

    @pytest.fixture
    def config():
        return create_test_config(MockS3Client())

Or use provided fixtures directly:
    pytest_plugins = ["s3signer.testing.fixtures"]
"""

from s3signer.testing.mocks import MockS3Client, mock_s3_client
from s3signer.testing.utils import create_test_config, create_test_settings

__all__ = [
    "MockS3Client",
    "mock_s3_client",
    "create_test_config",
    "create_test_settings",
]
