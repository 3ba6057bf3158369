"""
Validate command for appcast-tool.

Assembles the pipe from the configuration file and reports which
integrations are enabled.
"""

import asyncio
import sys

import click

from ..models.pipe import Pipe
from ..utils import setup_logging
from ..utils.error_handling import handle_error
from .common import assemble_pipe


@click.command()
@click.pass_context
def validate(ctx: click.Context) -> None:
    """Check the configuration and show the enabled integrations."""
    setup_logging(ctx.obj["debug"])

    try:
        pipe = assemble_pipe(ctx.obj["config"])
    except Exception as e:  # pylint: disable=broad-except
        handle_error(e, "configuration validation")
        sys.exit(1)

    try:
        _report(pipe)
    finally:
        asyncio.run(pipe.aclose())


def _report(pipe: Pipe) -> None:
    if not pipe.enabled:
        click.echo("Configuration is valid, no integrations enabled")
        return

    click.echo("Configuration is valid")
    for name in pipe.enabled:
        integration = getattr(pipe, name)
        details = f"target={integration.target!r}"
        if integration.version:
            details += f", version={integration.version}"
        if integration.prerelease:
            details += ", prerelease"
        click.echo(f"  {name}: {details}")


__all__ = ["validate"]
