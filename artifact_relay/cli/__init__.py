"""
Unified CLI entry point for artifact relay operations using Click.

This module provides the main CLI group and shared options.
"""

import sys
from typing import Optional

import click

from . import cache, invoke
from .._version import __version__
from ..utils.constants import EXIT_USER_INTERRUPT


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="artifact-relay")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a TOML file whose [relay] section overrides environment settings",
)
@click.option(
    "-d",
    "--debug",
    count=True,
    help="Increase verbosity (use -d for INFO, -dd for DEBUG, -ddd for DEBUG with HTTP and AWS SDK logs)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], debug: int) -> None:
    """Artifact Relay - Copy release artifacts into an object store and report the outcome."""
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["debug"] = debug


cli.add_command(invoke.invoke)
cli.add_command(cache.clear_cache)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()  # pylint: disable=no-value-for-parameter  # Click handles parameters
    except KeyboardInterrupt:
        click.echo("\n\nOperation cancelled by user", err=True)
        sys.exit(EXIT_USER_INTERRUPT)


__all__ = ["cli", "main"]
