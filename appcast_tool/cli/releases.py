"""
Releases command for appcast-tool.

Lists the releases of the configured source with their assets.
"""

import asyncio
import sys

import click

from ..models.release import ReleaseListing
from ..protocols import SourceProvider
from ..utils import setup_logging
from ..utils.error_handling import handle_error
from ..utils.logging_utils import format_file_size, log_listing_summary
from .common import build_source


async def _list(source: SourceProvider) -> ReleaseListing:
    try:
        return await source.list_releases()
    finally:
        await source.aclose()


@click.command()
@click.option("--version", "version", help="Only show this release")
@click.pass_context
def releases(ctx: click.Context, version: str) -> None:
    """List releases and assets of the configured source."""
    setup_logging(ctx.obj["debug"])

    try:
        listing = asyncio.run(_list(build_source(ctx.obj["config"])))
    except Exception as e:  # pylint: disable=broad-except
        handle_error(e, "listing releases")
        sys.exit(1)

    log_listing_summary(listing)

    for release in listing.releases:
        if version and release.version != version:
            continue
        click.echo(f"{release.version}  {release.name}  {release.date.isoformat()}")
        for asset in release.assets:
            click.echo(f"    {asset.name}  {format_file_size(asset.size)}")

    for warning in listing.warnings:
        click.echo(f"warning: {warning.version}/{warning.asset}: {warning.message}", err=True)


__all__ = ["releases"]
