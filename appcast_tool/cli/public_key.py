"""
Public key command for appcast-tool.

Prints the public half of an integration's signing key, which clients
need to verify the published repository.
"""

import asyncio
import sys

import click

from ..models.pipe import Pipe
from ..utils import public_key_pem, setup_logging
from ..utils.error_handling import handle_error, log_and_exit
from .common import assemble_pipe


@click.command("public-key")
@click.option(
    "--integration",
    type=click.Choice(["apk", "sparkle"]),
    default="apk",
    show_default=True,
    help="Integration whose key to print",
)
@click.pass_context
def public_key(ctx: click.Context, integration: str) -> None:
    """Print the PEM public key used by an integration."""
    setup_logging(ctx.obj["debug"])

    try:
        pipe = assemble_pipe(ctx.obj["config"])
    except Exception as e:  # pylint: disable=broad-except
        handle_error(e, "configuration validation")
        sys.exit(1)

    try:
        _print_key(pipe, integration)
    finally:
        asyncio.run(pipe.aclose())


def _print_key(pipe: Pipe, integration: str) -> None:
    config = getattr(pipe, integration)
    if config is None:
        log_and_exit(f"Integration {integration} is not enabled")

    key = config.rsa_key if integration == "apk" else config.ed25519_key
    if key is None:
        log_and_exit(f"Integration {integration} has no signing key")

    if integration == "apk":
        click.echo(f"# {config.key_name}")
    click.echo(public_key_pem(key).decode(), nl=False)


__all__ = ["public_key"]
