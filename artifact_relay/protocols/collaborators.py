"""
Protocols for the external collaborators of the relay.

Each protocol names one capability the orchestrator consumes. Concrete
adapters live in artifact_relay.api; tests substitute in-memory fakes.
"""

from typing import Any, Dict, Optional, Protocol, Union


class SecretStore(Protocol):
    """Key-value secret store."""

    def get(self, secret_id: str) -> Optional[str]:
        """
        Return the plaintext value of a secret.

        Args:
            secret_id: Secret identifier (name or ARN)

        Returns:
            Plaintext value, or None if the store holds no value
        """
        ...


class ObjectStore(Protocol):
    """Bucket/key object store."""

    def get_object(self, bucket: str, key: str) -> bytes:
        """Return the content of an object."""
        ...

    def put_object(self, bucket: str, key: str, body: Union[bytes, str]) -> str:
        """Write an object from memory and return its reference."""
        ...

    def put_file(self, bucket: str, key: str, path: str, content_type: Optional[str] = None) -> str:
        """Stream a local file into an object and return its reference."""
        ...


class EmailSender(Protocol):
    """Email delivery provider."""

    def send(self, sender: str, recipient: str, subject: str, body: str) -> str:
        """
        Send one plain-text email.

        Returns:
            Provider message id (acknowledgement)
        """
        ...


class AuditStore(Protocol):
    """Append-only audit store."""

    def put(self, item: Dict[str, Any]) -> None:
        """Append one record."""
        ...


__all__ = ["SecretStore", "ObjectStore", "EmailSender", "AuditStore"]
