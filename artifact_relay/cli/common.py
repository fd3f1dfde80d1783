"""Helpers shared by CLI commands."""

import sys
from typing import Any, Dict, Optional

import click

from ..exceptions import ConfigurationError
from ..models.config import RelayConfig
from ..utils.config_manager import ConfigManager
from ..utils.constants import EXIT_GENERAL_ERROR


def load_config(config_path: Optional[str], **overrides: Any) -> RelayConfig:
    """
    Build the relay configuration for a CLI command.

    Precedence: command-line options, then the TOML [relay] section, then the environment.
    Exits with an error message if the configuration is invalid.
    """
    values: Dict[str, Any] = {}
    try:
        if config_path:
            values.update(ConfigManager(config_path).get_section())
        values.update({k: v for k, v in overrides.items() if v is not None})
        return RelayConfig.from_env(overrides=values)
    except (ConfigurationError, FileNotFoundError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_GENERAL_ERROR)


__all__ = ["load_config"]
