"""
Tests for session utilities.

This module tests HTTP client creation and configuration.
"""

import httpx

from artifact_relay.utils import create_session


class TestCreateSession:
    """Test create_session."""

    def test_defaults(self):
        """Clients follow redirects with a long total and short connect timeout."""
        session = create_session()

        assert isinstance(session, httpx.Client)
        assert session.follow_redirects
        assert session.timeout.read == 300.0
        assert session.timeout.connect == 10.0
        assert not session.is_closed
        session.close()

    def test_custom_timeout(self):
        """The total timeout is configurable."""
        session = create_session(timeout=30.0)
        assert session.timeout.read == 30.0
        session.close()

    def test_request_through_session(self, httpx_mock):
        """Requests go through the configured transport."""
        httpx_mock.get("https://example.test/ping").mock(return_value=httpx.Response(200, text="pong"))

        with create_session() as session:
            assert session.get("https://example.test/ping").text == "pong"
