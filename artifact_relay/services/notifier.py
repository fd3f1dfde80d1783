"""
Outcome notifications.

Notification is best-effort: a delivery failure surfaces as NotifyFailed
and never changes the outcome of the transfer being reported.
"""

import logging
from typing import Optional, Tuple

from ..exceptions import NotifyFailed
from ..models.outcome import TransferOutcome
from ..models.request import TransferRequest
from ..protocols import EmailSender
from ..utils.constants import NOTIFY_SENDER_NAME, NOTIFY_SUBJECT_FAILURE, NOTIFY_SUBJECT_SUCCESS


def compose_message(outcome: TransferOutcome, source_url: str) -> Tuple[str, str]:
    """
    Render the subject and body describing an outcome.

    Args:
        outcome: Transfer outcome
        source_url: Artifact origin (may be empty if no request could be built)

    Returns:
        Tuple of (subject, body)
    """
    if outcome.succeeded:
        body = (
            "The download of the release is complete and stored in the destination bucket. "
            f"Access it here: {outcome.destination_reference}"
        )
        return NOTIFY_SUBJECT_SUCCESS, body

    origin = f" from {source_url}" if source_url else ""
    body = f"The download of the release{origin} failed.\n\nError: {outcome.error_message}"
    return NOTIFY_SUBJECT_FAILURE, body


class Notifier:
    """Sends one email per invocation describing the outcome."""

    def __init__(self, sender: EmailSender, from_address: str, sender_name: str = NOTIFY_SENDER_NAME) -> None:
        """
        Initialize the notifier.

        Args:
            sender: Email delivery provider
            from_address: Sender address
            sender_name: Display name for the From header
        """
        self._sender = sender
        self.from_header = f"{sender_name} <{from_address}>" if sender_name else from_address

    def notify(self, recipient: str, subject: str, body: str) -> str:
        """
        Send a notification.

        Returns:
            Provider acknowledgement (message id)

        Raises:
            NotifyFailed: If delivery fails
        """
        logging.info("Sending notification '%s'", subject)
        try:
            return self._sender.send(self.from_header, recipient, subject, body)
        except Exception as e:
            raise NotifyFailed(recipient, e) from e

    def notify_outcome(self, recipient: str, outcome: TransferOutcome, request: Optional[TransferRequest]) -> str:
        """Send the notification describing an outcome."""
        subject, body = compose_message(outcome, request.source_url if request else "")
        return self.notify(recipient, subject, body)

    def close(self) -> None:
        """Release the email provider's resources, if it holds any."""
        close = getattr(self._sender, "close", None)
        if callable(close):
            close()


__all__ = ["Notifier", "compose_message"]
