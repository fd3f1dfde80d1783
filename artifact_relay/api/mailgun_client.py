"""
Mailgun client for outcome notifications.

This module sends plain-text email through the Mailgun HTTP API.
"""

# Standard library imports
import logging
from typing import Optional

# Third-party imports
import httpx

# Local imports
from ..utils.constants import MAILGUN_API_BASE_URL
from ..utils.session import create_session


class MailgunClient:
    """Email sender using the Mailgun messages endpoint."""

    def __init__(
        self,
        api_key: str,
        domain: str,
        session: Optional[httpx.Client] = None,
        base_url: str = MAILGUN_API_BASE_URL,
        timeout: float = 30.0,
    ) -> None:
        """Initialize the Mailgun client.

        Args:
            api_key: Mailgun API key
            domain: Sending domain registered with Mailgun
            session: Optional httpx client (one is created when None)
            base_url: API base URL (EU accounts use https://api.eu.mailgun.net/v3)
            timeout: Request timeout in seconds for a created session
        """
        self._api_key = api_key
        self.domain = domain
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else create_session(timeout=timeout)

    @property
    def messages_url(self) -> str:
        """URL of the messages endpoint for the sending domain."""
        return f"{self.base_url}/{self.domain}/messages"

    def send(self, sender: str, recipient: str, subject: str, body: str) -> str:
        """Send a plain-text email.

        Args:
            sender: From header value
            recipient: Recipient address
            subject: Subject line
            body: Plain-text body

        Returns:
            Mailgun message id

        Raises:
            httpx.HTTPError: If the request fails or Mailgun rejects the message
        """
        logging.info("Sending email via Mailgun domain %s", self.domain)
        response = self.session.post(
            self.messages_url,
            auth=("api", self._api_key),
            data={"from": sender, "to": recipient, "subject": subject, "text": body},
        )
        response.raise_for_status()
        message_id = response.json().get("id", "")
        logging.debug("Mailgun accepted message %s", message_id)
        return message_id

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()


__all__ = ["MailgunClient"]
