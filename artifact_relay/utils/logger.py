"""
Logging configuration and utilities for the artifact relay package.

This module provides logging setup, custom formatters, and logging utilities
to ensure consistent and readable logging across the package.
"""

import logging
from typing import Optional

from .constants import LOG_LEVEL_VERBOSITY

# ============================================================================
# Logging Configuration Constants
# ============================================================================

# Default width for log message wrapping
DEFAULT_LOG_WIDTH = 120

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Third-party loggers that are noisy below maximum verbosity
CLIENT_LIBRARY_LOGGERS = ("httpx", "httpcore", "botocore", "boto3", "urllib3")

# ============================================================================
# Custom Formatters
# ============================================================================


class WrappingFormatter(logging.Formatter):
    """
    Custom formatter that wraps long log messages for better readability.

    This formatter extends the standard logging formatter to handle
    long messages by wrapping them at a specified width.
    """

    def __init__(
        self, fmt: Optional[str] = None, datefmt: Optional[str] = None, width: int = DEFAULT_LOG_WIDTH
    ) -> None:
        """
        Initialize the wrapping formatter.

        Args:
            fmt: Format string for log messages
            datefmt: Date format string
            width: Maximum width for log message wrapping
        """
        super().__init__(fmt, datefmt)
        self.width = width

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record with line wrapping.

        Args:
            record: Log record to format

        Returns:
            Formatted log message with wrapping
        """
        formatted = super().format(record)

        if len(formatted) > self.width:
            lines = []
            current_line = ""

            for word in formatted.split():
                if len(current_line + " " + word) <= self.width:
                    current_line += (" " + word) if current_line else word
                else:
                    if current_line:
                        lines.append(current_line)
                    current_line = word

            if current_line:
                lines.append(current_line)

            formatted = "\n".join(lines)

        return formatted


# ============================================================================
# Logging Setup Functions
# ============================================================================


def setup_logging(verbosity: int = 0, use_wrapping: bool = False) -> None:
    """
    Setup logging configuration with multi-level verbosity.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG, 3+=DEBUG with client library logs)
        use_wrapping: If True, use wrapping formatter for long messages

    Verbosity Levels:
        0 (default): WARNING - Only warnings and errors
        1 (-d):      INFO - One line per relay step
        2 (-dd):     DEBUG - Detailed information and tracebacks
        3+ (-ddd):   DEBUG - Maximum verbosity including HTTP and AWS SDK logs

    Example:
        >>> setup_logging(1)  # INFO level
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    root_logger = logging.getLogger()
    if use_wrapping:
        formatter = WrappingFormatter(fmt=LOG_FORMAT, width=DEFAULT_LOG_WIDTH)
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)

        root_logger.handlers.clear()
        root_logger.addHandler(handler)
        root_logger.setLevel(level)
    elif root_logger.handlers:
        # Function runtimes install their own handler before our code runs
        root_logger.setLevel(level)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT)

    client_level = logging.DEBUG if verbosity >= 3 else logging.WARNING
    for name in CLIENT_LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(client_level)


def verbosity_from_level_name(level_name: Optional[str]) -> int:
    """
    Translate a LOG_LEVEL style name into a setup_logging verbosity.

    Args:
        level_name: Level name such as "INFO" (case-insensitive); None means WARNING

    Returns:
        Verbosity count understood by setup_logging
    """
    if not level_name:
        return 0
    return LOG_LEVEL_VERBOSITY.get(level_name.strip().upper(), 0)


__all__ = [
    "WrappingFormatter",
    "setup_logging",
    "verbosity_from_level_name",
]
