"""
Cache maintenance command for Artifact Relay CLI.

Deleting a cached credential file is the remedy for a corrupted cache: the
next invocation fetches it again.
"""

import sys
from typing import Optional

import click

from ..exceptions import CacheIOError
from ..services.credential_cache import CredentialCache
from ..utils import setup_logging
from ..utils.constants import EXIT_GENERAL_ERROR
from .common import load_config


@click.command("clear-cache")
@click.option("--key", "cache_key", help="Cache key to invalidate (default: the configured credential cache key)")
@click.option(
    "--cache-dir",
    type=click.Path(file_okay=False),
    help="Credential cache directory (default: the configured directory)",
)
@click.pass_context
def clear_cache(ctx: click.Context, cache_key: Optional[str], cache_dir: Optional[str]) -> None:
    """Delete a cached credential file."""
    setup_logging(ctx.obj["debug"])
    config = load_config(ctx.obj["config"], cache_dir=cache_dir)

    key = cache_key or config.credential_cache_key
    cache = CredentialCache(config.cache_dir)
    try:
        removed = cache.invalidate(key)
    except CacheIOError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_GENERAL_ERROR)

    if removed:
        click.echo(f"Removed cached credentials for {key}")
    else:
        click.echo(f"No cached credentials for {key}")


__all__ = ["clear_cache"]
