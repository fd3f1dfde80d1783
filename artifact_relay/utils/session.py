"""
Session utilities for artifact relay HTTP traffic.

This module provides utilities for creating and configuring HTTP clients
with connection pooling and timeouts.
"""

import logging

import httpx
from httpx import HTTPTransport

from .constants import DEFAULT_CONNECT_TIMEOUT, DEFAULT_HTTP_TIMEOUT


def create_session(timeout: float = DEFAULT_HTTP_TIMEOUT, max_connections: int = 10, retries: int = 0) -> httpx.Client:
    """
    Create an httpx client with connection pooling and timeouts.

    Args:
        timeout: Total timeout in seconds (default: DEFAULT_HTTP_TIMEOUT)
        max_connections: Maximum number of connections in the pool (default: 10)
        retries: Connection retries performed by the transport (default: 0,
            each relay step makes a single attempt)

    Returns:
        Configured httpx.Client object with:
        - Connection pooling
        - Timeout configuration
        - Redirect following (release download links usually redirect)

    Example:
        >>> client = create_session()
        >>> response = client.get("https://example.test/release.zip")
    """
    limits = httpx.Limits(
        max_connections=max_connections,
        max_keepalive_connections=max(1, max_connections // 2),
    )

    timeout_config = httpx.Timeout(timeout, connect=DEFAULT_CONNECT_TIMEOUT)

    transport = HTTPTransport(limits=limits, retries=retries)

    logging.debug("Creating HTTP client (timeout=%ss, retries=%d)", timeout, retries)
    return httpx.Client(
        transport=transport,
        timeout=timeout_config,
        follow_redirects=True,
    )


__all__ = ["create_session"]
