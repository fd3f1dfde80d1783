"""
Invoke command for Artifact Relay CLI.

This module runs one relay invocation locally, from an event file or from
command-line options.
"""

import json
import logging
import sys
from typing import Any, Dict, Optional

import click

from ..handler import run_invocation
from ..utils import setup_logging
from ..utils.constants import EXIT_GENERAL_ERROR, EXIT_SUCCESS, HTTP_STATUS_OK
from ..utils.error_handling import handle_generic_error
from .common import load_config


@click.command()
@click.option(
    "--event",
    "event_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a JSON trigger event (SNS notification or bare message). Mutually exclusive with --source-url.",
)
@click.option("--source-url", help="URL of the artifact to relay")
@click.option("--correlation-id", help="Correlation id for the invocation (generated if omitted)")
@click.option("--destination-key", help="Destination key (requires the fixed key strategy)")
@click.option(
    "--key-strategy",
    type=click.Choice(["generated", "fixed"]),
    help="Destination key strategy (overrides DESTINATION_KEY_STRATEGY)",
)
@click.pass_context
def invoke(  # pylint: disable=too-many-positional-arguments
    ctx: click.Context,
    event_path: Optional[str],
    source_url: Optional[str],
    correlation_id: Optional[str],
    destination_key: Optional[str],
    key_strategy: Optional[str],
) -> None:
    """Run one relay invocation and print the result."""
    setup_logging(ctx.obj["debug"], use_wrapping=True)

    if event_path and (source_url or correlation_id or destination_key):
        click.echo("Error: Cannot combine --event with --source-url, --correlation-id or --destination-key", err=True)
        sys.exit(EXIT_GENERAL_ERROR)

    config = load_config(ctx.obj["config"], destination_key_strategy=key_strategy)

    if event_path:
        try:
            with open(event_path, "r", encoding="utf-8") as f:
                event = json.load(f)
        except (OSError, ValueError) as e:
            click.echo(f"Error: Cannot read event file {event_path}: {e}", err=True)
            sys.exit(EXIT_GENERAL_ERROR)
    else:
        event = _event_from_options(source_url, correlation_id, destination_key)

    try:
        response = run_invocation(event, config)
    except Exception as e:  # pylint: disable=broad-exception-caught
        handle_generic_error(e, "relay invocation")
        sys.exit(EXIT_GENERAL_ERROR)

    click.echo(json.dumps(response, indent=2))
    if response["statusCode"] != HTTP_STATUS_OK:
        logging.error("Relay invocation failed")
        sys.exit(EXIT_GENERAL_ERROR)
    sys.exit(EXIT_SUCCESS)


def _event_from_options(
    source_url: Optional[str], correlation_id: Optional[str], destination_key: Optional[str]
) -> Dict[str, Any]:
    event: Dict[str, Any] = {}
    if source_url:
        event["sourceUrl"] = source_url
    if correlation_id:
        event["correlationId"] = correlation_id
    if destination_key:
        event["destinationKey"] = destination_key
    return event


__all__ = ["invoke"]
