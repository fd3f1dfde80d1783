"""
Adapters for the external services used by the relay.

This package provides concrete implementations of the capability
protocols: secret storage, object storage, email delivery and audit storage.
"""

from .secrets_manager import SecretsManagerStore
from .object_store import S3ObjectStore
from .mailgun_client import MailgunClient
from .audit_table import DynamoDBAuditStore

__all__ = [
    "SecretsManagerStore",
    "S3ObjectStore",
    "MailgunClient",
    "DynamoDBAuditStore",
]
