"""
Audit logging.

Appends one record per invocation. Records are never queried,
deduplicated, updated or deleted by the relay.
"""

import logging

from ..exceptions import AuditWriteFailed
from ..models.audit import AuditRecord
from ..protocols import AuditStore


class AuditLogger:
    """Writes audit records to an append-only store."""

    def __init__(self, store: AuditStore) -> None:
        self._store = store

    def record(self, entry: AuditRecord) -> None:
        """
        Append an audit record.

        Raises:
            AuditWriteFailed: If the store rejects the write
        """
        logging.info("Recording audit entry %s (status=%s)", entry.id, entry.status)
        try:
            self._store.put(entry.to_item())
        except Exception as e:
            raise AuditWriteFailed(entry.id, e) from e


__all__ = ["AuditLogger"]
