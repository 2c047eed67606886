"""Shared fixtures for the s3signer test suite."""

pytest_plugins = ["s3signer.testing.fixtures"]
