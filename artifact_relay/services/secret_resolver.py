"""
Secret resolution service.

This module wraps a SecretStore so every way a secret can be missing
surfaces as SecretUnavailable.
"""

import logging
from typing import Any

from ..exceptions import RelayError, SecretUnavailable
from ..protocols import SecretStore
from ..utils.error_handling import try_parse_json


class SecretResolver:
    """Resolves named secrets to plaintext. Performs a single attempt per call."""

    def __init__(self, store: SecretStore) -> None:
        self._store = store

    def resolve(self, secret_id: str) -> str:
        """
        Resolve a secret to its plaintext value.

        Args:
            secret_id: Secret identifier

        Returns:
            Plaintext value

        Raises:
            SecretUnavailable: If the store has no value, denies access or fails
        """
        logging.debug("Resolving secret %s", secret_id)
        try:
            value = self._store.get(secret_id)
        except SecretUnavailable:
            raise
        except RelayError as e:
            raise SecretUnavailable(secret_id, str(e)) from e
        except Exception as e:
            raise SecretUnavailable(secret_id, f"{type(e).__name__}: {e}") from e

        if value is None or value == "":
            raise SecretUnavailable(secret_id, "no value returned")
        return value

    def resolve_json(self, secret_id: str) -> Any:
        """
        Resolve a JSON-encoded secret.

        Raises:
            SecretUnavailable: If the secret is missing or is not valid JSON
        """
        raw = self.resolve(secret_id)
        try:
            return try_parse_json(raw, f"secret {secret_id} parsing")
        except ValueError as e:
            raise SecretUnavailable(secret_id, "value is not valid JSON") from e

    def resolve_text(self, secret_id: str) -> str:
        """
        Resolve a secret that may be stored either raw or as a JSON string.

        Values such as '"my-bucket"' are unwrapped to 'my-bucket'.
        """
        raw = self.resolve(secret_id)
        if raw.startswith('"') and raw.endswith('"'):
            parsed = try_parse_json(raw, f"secret {secret_id} parsing", default=raw, raise_on_error=False)
            if isinstance(parsed, str):
                return parsed
        return raw


__all__ = ["SecretResolver"]
