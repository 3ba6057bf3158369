"""
Unified CLI entry point for appcast-tool using Click.

This module provides the main CLI group and shared options.
"""

import sys
from typing import Optional

import click

from . import assets, public_key, releases, validate
from .._version import __version__


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="appcast-tool")
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to the configuration file (default: ./appcast.toml)",
)
@click.option(
    "-d",
    "--debug",
    count=True,
    help="Increase verbosity (use -d for INFO, -dd for DEBUG, -ddd for DEBUG with HTTP logs)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], debug: int) -> None:
    """Appcast Tool - Republish release artifacts as package repositories."""
    # Store shared options in context for subcommands to access
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["debug"] = debug


# Register subcommands
cli.add_command(validate.validate)
cli.add_command(releases.releases)
cli.add_command(assets.download)
cli.add_command(assets.upload)
cli.add_command(public_key.public_key)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()  # pylint: disable=no-value-for-parameter  # Click handles parameters
    except KeyboardInterrupt:
        click.echo("\n\nOperation cancelled by user", err=True)
        sys.exit(130)


__all__ = ["cli", "main"]
