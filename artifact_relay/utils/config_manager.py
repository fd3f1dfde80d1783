"""
Configuration file utilities.

The relay is configured from the environment; for local runs the CLI can
overlay values from a TOML file. This module loads that file.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

# Section of the TOML file holding relay settings
RELAY_SECTION = "relay"


class ConfigManager:
    """
    Manages configuration file loading and access.

    The file is read lazily on first access and cached afterwards.
    """

    def __init__(self, config_path: str) -> None:
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to configuration file
        """
        self.config_path = Path(config_path).expanduser()
        self._config: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from file.

        Returns:
            Dictionary containing configuration data

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is invalid
        """
        if self._config is not None:
            return self._config

        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, "rb") as f:
                self._config = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in configuration file {self.config_path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Failed to load configuration from {self.config_path}: {e}") from e

        logging.debug("Loaded configuration from %s", self.config_path)
        return self._config

    def get_section(self, section: str = RELAY_SECTION) -> Dict[str, Any]:
        """
        Get an entire configuration section.

        Args:
            section: Section name (default: "relay")

        Returns:
            Dictionary containing section data, or empty dict if section not found
        """
        value = self.load().get(section, {})
        return value if isinstance(value, dict) else {}


__all__ = ["ConfigManager", "RELAY_SECTION"]
