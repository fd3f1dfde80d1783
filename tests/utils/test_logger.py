"""
Tests for logging utilities.

This module tests logging setup and the wrapping formatter.
"""

import logging

import pytest

from artifact_relay.utils import WrappingFormatter, setup_logging, verbosity_from_level_name


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Test setup_logging verbosity levels."""

    @pytest.mark.parametrize(
        "verbosity,level",
        [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (3, logging.DEBUG)],
    )
    def test_levels(self, restore_root_logger, verbosity, level):
        """Each verbosity maps to a root level."""
        setup_logging(verbosity)
        assert restore_root_logger.level == level

    def test_client_libraries_quiet_by_default(self, restore_root_logger):
        """HTTP and AWS SDK loggers stay at WARNING below maximum verbosity."""
        setup_logging(2)
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("botocore").level == logging.WARNING

    def test_client_libraries_verbose(self, restore_root_logger):
        """Maximum verbosity enables client library logs."""
        setup_logging(3)
        assert logging.getLogger("httpx").level == logging.DEBUG
        assert logging.getLogger("boto3").level == logging.DEBUG
        setup_logging(0)

    def test_wrapping_handler(self, restore_root_logger):
        """use_wrapping installs a single handler with the wrapping formatter."""
        setup_logging(1, use_wrapping=True)
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0].formatter, WrappingFormatter)


class TestWrappingFormatter:
    """Test WrappingFormatter."""

    def test_long_message_wrapped(self):
        """Long messages are split across lines."""
        formatter = WrappingFormatter(fmt="%(message)s", width=20)
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "word " * 20, None, None)

        lines = formatter.format(record).split("\n")

        assert len(lines) > 1
        assert all(len(line) <= 20 for line in lines)

    def test_short_message_unchanged(self):
        """Short messages are left alone."""
        formatter = WrappingFormatter(fmt="%(message)s", width=80)
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "short", None, None)
        assert formatter.format(record) == "short"


class TestVerbosityFromLevelName:
    """Test LOG_LEVEL translation."""

    @pytest.mark.parametrize(
        "name,expected",
        [(None, 0), ("", 0), ("warning", 0), ("INFO", 1), ("debug", 2), ("TRACE", 3), ("bogus", 0)],
    )
    def test_names(self, name, expected):
        """Level names map to verbosity counts."""
        assert verbosity_from_level_name(name) == expected
