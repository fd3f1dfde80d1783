"""
Pydantic models for artifact-relay.

This package contains all Pydantic models used in the application:
- base: Shared base model
- config: Validated relay configuration
- request: Transfer requests built from trigger events
- outcome: Transfer outcome and caller-facing result
- audit: Audit records
- artifacts: Fetched artifacts, credential cache entries and resolved secrets
"""

from .base import RelayBaseModel
from .config import RelayConfig
from .request import TransferRequest
from .outcome import TransferStatus, TransferOutcome, InvocationResult
from .audit import AuditRecord
from .artifacts import FetchedArtifact, CredentialCacheEntry, ResolvedSecrets

__all__ = [
    "RelayBaseModel",
    "RelayConfig",
    "TransferRequest",
    "TransferStatus",
    "TransferOutcome",
    "InvocationResult",
    "AuditRecord",
    "FetchedArtifact",
    "CredentialCacheEntry",
    "ResolvedSecrets",
]
