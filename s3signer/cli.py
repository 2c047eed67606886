"""s3signer CLI tool."""

import asyncio
import json
import logging

import click

from s3signer.core.client import async_s3_client
from s3signer.core.exceptions import S3SignerError
from s3signer.core.settings import S3SignerSettings
from s3signer.storage.handlers import RedirectHandler, SignRequestHandler


@click.group()
@click.option("--log-level", default=None, help="Logging level (defaults to LOG_LEVEL)")
@click.pass_context
def cli(ctx, log_level):
    """s3signer CLI - Issue presigned S3 URLs."""
    settings = S3SignerSettings()
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = settings


@cli.command()
@click.option("--host", default="127.0.0.1", help="Host to bind")
@click.option("--port", default=8000, type=int, help="Port to bind")
@click.option("--reload", is_flag=True, help="Reload on code changes")
@click.pass_obj
def serve(settings, host, port, reload):
    """Run the signing service."""
    import uvicorn

    if not settings.aws_bucket_name:
        raise click.ClickException("AWS_BUCKET_NAME is not set")

    click.echo(f"Serving signed URLs for bucket {settings.aws_bucket_name} on {host}:{port}")
    uvicorn.run(
        "s3signer.fastapi.app:create_s3signer_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


async def _sign(settings: S3SignerSettings, query: dict) -> dict:
    async with async_s3_client(settings) as client:
        handler = SignRequestHandler(settings.to_config(s3_client=client))
        result = await handler(None, query)
    return result.to_body()


async def _read_url(settings: S3SignerSettings, key: str) -> str:
    async with async_s3_client(settings) as client:
        handler = RedirectHandler(settings.to_config(s3_client=client))
        return await handler(key)


@cli.command()
@click.argument("filename")
@click.option("--content-type", required=True, help="MIME type of the upload")
@click.option(
    "--content-disposition",
    default=None,
    help="'auto', 'inline', 'attachment' or another disposition token",
)
@click.pass_obj
def sign(settings, filename, content_type, content_disposition):
    """Print a presigned upload URL for FILENAME."""
    query = {
        "fileName": filename,
        "contentType": content_type,
        "contentDisposition": content_disposition,
    }
    try:
        body = asyncio.run(_sign(settings, query))
    except S3SignerError as e:
        raise click.ClickException(str(e))
    click.echo(json.dumps(body, indent=2))


@cli.command()
@click.argument("key")
@click.pass_obj
def url(settings, key):
    """Print a temporary read URL for KEY."""
    try:
        signed = asyncio.run(_read_url(settings, key))
    except S3SignerError as e:
        raise click.ClickException(str(e))
    click.echo(signed)


@cli.command()
@click.pass_obj
def config(settings):
    """Show the effective settings."""
    click.echo(json.dumps(settings.masked(), indent=2))


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
