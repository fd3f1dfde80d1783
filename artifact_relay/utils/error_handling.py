"""
Error handling utilities for standardized error logging and handling.

This module provides reusable error handling patterns shared by the
relay steps, the serverless handler and the CLI.
"""

import json
import logging
import traceback
from typing import Any, Optional

import httpx

from .constants import (
    HTTP_CLIENT_ERROR_MAX,
    HTTP_CLIENT_ERROR_MIN,
    HTTP_SERVER_ERROR_MAX,
    HTTP_SERVER_ERROR_MIN,
)


def describe_status(status: Optional[int]) -> str:
    """
    Describe an HTTP status code class for log messages.

    Args:
        status: HTTP status code, or None for transport-level failures

    Returns:
        Short description such as "Resource not found" or "Server error"
    """
    if status is None:
        return "Transport error"
    if status == 401:
        return "Authentication failed"
    if status == 403:
        return "Access denied"
    if status == 404:
        return "Resource not found"
    if HTTP_CLIENT_ERROR_MIN <= status <= HTTP_CLIENT_ERROR_MAX:
        return "Client error"
    if HTTP_SERVER_ERROR_MIN <= status <= HTTP_SERVER_ERROR_MAX:
        return "Server error"
    return "Unexpected response"


def handle_http_error(error: httpx.HTTPError, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle HTTP errors with standardized logging.

    Args:
        error: The HTTP error to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    status = error.response.status_code if isinstance(error, httpx.HTTPStatusError) else None
    logging.error("%s during %s: %s", describe_status(status), operation, error)

    if log_traceback:
        logging.debug("Traceback: %s", traceback.format_exc())


def handle_generic_error(error: Exception, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle generic errors with standardized logging.

    Args:
        error: The exception to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    logging.error("Error during %s: %s", operation, error)

    if log_traceback:
        logging.debug("Traceback: %s", traceback.format_exc())


def try_parse_json(content: str, operation: str, *, default: Optional[Any] = None, raise_on_error: bool = True) -> Any:
    """
    Attempt to parse JSON content with error handling.

    Args:
        content: JSON string to parse
        operation: Description of operation for error messages
        default: Default value to return on error (if raise_on_error is False)
        raise_on_error: If True, raise exception on parse error

    Returns:
        Parsed JSON data or default value

    Raises:
        ValueError: If parsing fails and raise_on_error is True
    """
    try:
        return json.loads(content)
    except (TypeError, ValueError) as e:
        logging.error("Failed to parse JSON during %s: %s", operation, e)

        if raise_on_error:
            raise ValueError(f"Invalid JSON during {operation}: {e}") from e

        return default


__all__ = [
    "describe_status",
    "handle_http_error",
    "handle_generic_error",
    "try_parse_json",
]
