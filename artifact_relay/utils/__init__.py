"""
Utility modules for artifact relay operations.
"""

from .logger import setup_logging, WrappingFormatter, verbosity_from_level_name
from .session import create_session
from .keys import artifact_name_from_url, cache_file_name, generate_destination_key, parse_object_uri, safe_file_name
from .config_manager import ConfigManager

from . import constants
from . import error_handling

__all__ = [
    "setup_logging",
    "WrappingFormatter",
    "verbosity_from_level_name",
    "create_session",
    "artifact_name_from_url",
    "generate_destination_key",
    "parse_object_uri",
    "safe_file_name",
    "cache_file_name",
    "ConfigManager",
    "constants",
    "error_handling",
]
