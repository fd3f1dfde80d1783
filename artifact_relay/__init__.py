"""
Artifact Relay - event-triggered release artifact transfer.

This package downloads a release artifact, uploads it to a destination
object store, notifies a recipient by email and records an audit entry for
every invocation.
"""

from ._version import __version__

from .exceptions import (
    RelayError,
    ConfigurationError,
    InvalidTrigger,
    SecretUnavailable,
    CredentialFetchFailed,
    CacheIOError,
    FetchFailed,
    UploadFailed,
    NotifyFailed,
    AuditWriteFailed,
)
from .models import RelayConfig, TransferRequest, TransferOutcome, InvocationResult, AuditRecord
from .services import TransferOrchestrator, RelayState
from .handler import handler, build_orchestrator
from .cli import main as cli_main, cli as cli_group

__all__ = [
    "__version__",
    "RelayError",
    "ConfigurationError",
    "InvalidTrigger",
    "SecretUnavailable",
    "CredentialFetchFailed",
    "CacheIOError",
    "FetchFailed",
    "UploadFailed",
    "NotifyFailed",
    "AuditWriteFailed",
    "RelayConfig",
    "TransferRequest",
    "TransferOutcome",
    "InvocationResult",
    "AuditRecord",
    "TransferOrchestrator",
    "RelayState",
    "handler",
    "build_orchestrator",
    "cli_main",
    "cli_group",
]
