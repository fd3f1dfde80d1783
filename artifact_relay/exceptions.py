"""
Exception hierarchy for artifact relay operations.

Every failure the relay distinguishes has its own type so the orchestrator
can decide, per step, whether the failure aborts the transfer or is only
recorded. All of them derive from RelayError.
"""

from typing import Optional


class RelayError(Exception):
    """Base class for all artifact relay errors."""


class ConfigurationError(RelayError):
    """Raised at startup when required configuration is missing or invalid."""


class InvalidTrigger(RelayError):
    """Raised when a trigger event cannot be turned into a transfer request."""


class SecretUnavailable(RelayError):
    """Raised when the secret store returns no value or denies access.

    Attributes:
        secret_id: Identifier of the secret that could not be resolved
    """

    def __init__(self, secret_id: str, reason: str = "") -> None:
        self.secret_id = secret_id
        self.reason = reason
        message = f"Secret {secret_id} is unavailable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CredentialFetchFailed(RelayError):
    """Raised when the fetch function behind a credential cache slot fails.

    Attributes:
        cache_key: Cache slot that was being populated
    """

    def __init__(self, cache_key: str, cause: BaseException) -> None:
        self.cache_key = cache_key
        self.cause = cause
        super().__init__(f"Failed to fetch credentials for cache key {cache_key}: {cause}")


class CacheIOError(RelayError):
    """Raised when the local credential cache cannot be read or written.

    Attributes:
        path: Local path involved in the failed operation
    """

    def __init__(self, path: str, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Credential cache I/O error at {path}: {cause}")


class FetchFailed(RelayError):
    """Raised when the source artifact cannot be downloaded.

    Attributes:
        status: HTTP status code, or None for transport-level failures
        reason: Reason phrase or transport error description
        url: Source URL that failed
    """

    def __init__(self, status: Optional[int], reason: str, url: str = "") -> None:
        self.status = status
        self.reason = reason
        self.url = url
        target = f" {url}" if url else ""
        if status is None:
            message = f"Failed to fetch{target}: {reason}"
        else:
            message = f"Failed to fetch{target}: {status} {reason}".rstrip()
        super().__init__(message)


class UploadFailed(RelayError):
    """Raised when the artifact cannot be written to the destination store."""

    def __init__(self, bucket: str, key: str, cause: BaseException) -> None:
        self.bucket = bucket
        self.key = key
        self.cause = cause
        super().__init__(f"Failed to upload to {bucket}/{key}: {cause}")


class NotifyFailed(RelayError):
    """Raised when the outcome notification cannot be delivered."""

    def __init__(self, recipient: str, cause: BaseException) -> None:
        self.recipient = recipient
        self.cause = cause
        super().__init__(f"Failed to send notification: {cause}")


class AuditWriteFailed(RelayError):
    """Raised when the audit record cannot be appended."""

    def __init__(self, record_id: str, cause: BaseException) -> None:
        self.record_id = record_id
        self.cause = cause
        super().__init__(f"Failed to write audit record {record_id}: {cause}")


__all__ = [
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
]
