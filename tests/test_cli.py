"""Tests for the s3signer CLI."""

import json
from contextlib import asynccontextmanager

import pytest
from click.testing import CliRunner

from s3signer import cli as cli_module
from s3signer.testing.mocks import MockS3Client


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.setenv("AWS_BUCKET_NAME", "cli-bucket")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    return CliRunner()


@pytest.fixture
def mock_client(monkeypatch):
    s3 = MockS3Client(asynchronous=True)

    @asynccontextmanager
    async def fake_client(settings):
        yield s3

    monkeypatch.setattr(cli_module, "async_s3_client", fake_client)
    return s3


class TestCli:
    """Tests for CLI commands."""

    def test_sign(self, runner, mock_client):
        result = runner.invoke(
            cli_module.cli,
            ["sign", "photo.jpg", "--content-type", "image/jpeg", "--content-disposition", "auto"],
        )

        assert result.exit_code == 0, result.output
        body = json.loads(result.output)
        assert body["key"] == "photo.jpg"
        assert body["headers"]["Content-Disposition"] == 'inline; filename="photo.jpg"'
        assert mock_client.last_call["Params"]["Bucket"] == "cli-bucket"

    def test_sign_rejected_key(self, runner, mock_client, monkeypatch):
        monkeypatch.setenv("S3_KEY_REGEXP", "^uploads/")

        result = runner.invoke(cli_module.cli, ["sign", "photo.jpg", "--content-type", "image/jpeg"])

        assert result.exit_code != 0
        assert "Key does not match the regexp" in result.output
        assert mock_client.call_count == 0

    def test_sign_invalid_key_regexp(self, runner, mock_client, monkeypatch):
        monkeypatch.setenv("S3_KEY_REGEXP", "(")

        result = runner.invoke(cli_module.cli, ["sign", "photo.jpg", "--content-type", "image/jpeg"])

        assert result.exit_code == 1
        assert "invalid key_regexp" in result.output
        assert mock_client.call_count == 0

    def test_url(self, runner, mock_client):
        result = runner.invoke(cli_module.cli, ["url", "uploads/photo.jpg"])

        assert result.exit_code == 0, result.output
        assert "method=get_object" in result.output

    def test_config_masks_secrets(self, runner):
        result = runner.invoke(cli_module.cli, ["config"])

        assert result.exit_code == 0, result.output
        settings = json.loads(result.output)
        assert settings["aws_bucket_name"] == "cli-bucket"
        assert settings["aws_secret_access_key"] == "****"
