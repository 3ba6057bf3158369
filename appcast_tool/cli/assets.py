"""
Asset commands for appcast-tool.

Download an asset from, or upload a file to, a release of the configured
source.
"""

import asyncio
import sys
from pathlib import Path
from typing import Optional

import click

from ..protocols import SourceProvider
from ..utils import setup_logging
from ..utils.error_handling import handle_error
from ..utils.logging_utils import format_file_size, log_operation_complete, log_operation_start
from .common import build_source


async def _download(source: SourceProvider, version: str, name: str) -> bytes:
    try:
        return await source.download_asset(version, name)
    finally:
        await source.aclose()


async def _upload(source: SourceProvider, version: str, name: str, data: bytes) -> None:
    try:
        await source.upload_asset(version, name, data)
    finally:
        await source.aclose()


@click.command()
@click.argument("version")
@click.argument("name")
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Output file (default: NAME)")
@click.pass_context
def download(ctx: click.Context, version: str, name: str, output: Optional[str]) -> None:
    """Download asset NAME of release VERSION."""
    setup_logging(ctx.obj["debug"])
    log_operation_start("download", version=version, asset=name)

    try:
        data = asyncio.run(_download(build_source(ctx.obj["config"]), version, name))
        path = Path(output or name)
        path.write_bytes(data)
    except Exception as e:  # pylint: disable=broad-except
        handle_error(e, "asset download")
        sys.exit(1)

    log_operation_complete("download", asset=name, size=format_file_size(len(data)))
    click.echo(f"Saved {name} ({format_file_size(len(data))}) to {path}")


@click.command()
@click.argument("version")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--name", help="Asset name (default: the file name)")
@click.pass_context
def upload(ctx: click.Context, version: str, file: str, name: Optional[str]) -> None:
    """Attach FILE to release VERSION."""
    setup_logging(ctx.obj["debug"])
    path = Path(file)
    asset_name = name or path.name
    log_operation_start("upload", version=version, asset=asset_name)

    try:
        data = path.read_bytes()
        asyncio.run(_upload(build_source(ctx.obj["config"]), version, asset_name, data))
    except Exception as e:  # pylint: disable=broad-except
        handle_error(e, "asset upload")
        sys.exit(1)

    log_operation_complete("upload", asset=asset_name, size=format_file_size(len(data)))
    click.echo(f"Uploaded {asset_name} to {version}")


__all__ = ["download", "upload"]
