"""
Service layer for artifact relay operations.

This package provides the relay components and the orchestrator that
sequences them for one invocation.
"""

from .secret_resolver import SecretResolver
from .credential_cache import CredentialCache, secret_fetcher, object_fetcher
from .artifact_fetcher import ArtifactFetcher
from .uploader import ObjectStoreUploader
from .notifier import Notifier, compose_message
from .audit_logger import AuditLogger
from .orchestrator import TransferOrchestrator, RelayState

__all__ = [
    "SecretResolver",
    "CredentialCache",
    "secret_fetcher",
    "object_fetcher",
    "ArtifactFetcher",
    "ObjectStoreUploader",
    "Notifier",
    "compose_message",
    "AuditLogger",
    "TransferOrchestrator",
    "RelayState",
]
