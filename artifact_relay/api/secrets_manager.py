"""
AWS Secrets Manager adapter.

Secret values are never logged, only their identifiers.
"""

import logging
from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..exceptions import SecretUnavailable


class SecretsManagerStore:
    """Secret store backed by AWS Secrets Manager."""

    def __init__(self, region_name: Optional[str] = None, client: Optional[Any] = None) -> None:
        """
        Initialize the secret store.

        Args:
            region_name: AWS region (boto3 default chain when None)
            client: Pre-built secretsmanager client (mainly for tests)
        """
        self._client = client if client is not None else boto3.client("secretsmanager", region_name=region_name)

    def get(self, secret_id: str) -> Optional[str]:
        """
        Fetch the plaintext value of a secret.

        Binary secrets are decoded as UTF-8.

        Args:
            secret_id: Secret name or ARN

        Returns:
            Secret value, or None if the secret holds no value

        Raises:
            SecretUnavailable: If the secret does not exist or access is denied
        """
        logging.debug("Fetching secret %s", secret_id)
        try:
            response = self._client.get_secret_value(SecretId=secret_id)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "ClientError")
            raise SecretUnavailable(secret_id, code) from e
        except BotoCoreError as e:
            raise SecretUnavailable(secret_id, str(e)) from e

        if response.get("SecretString") is not None:
            return response["SecretString"]

        binary = response.get("SecretBinary")
        if binary is None:
            return None
        try:
            return binary.decode("utf-8") if isinstance(binary, bytes) else str(binary)
        except UnicodeDecodeError as e:
            raise SecretUnavailable(secret_id, "binary secret is not valid UTF-8") from e


__all__ = ["SecretsManagerStore"]
