"""Audit record model."""

import time
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import ConfigDict, Field

from .base import RelayBaseModel


def new_record_id() -> str:
    """Generate an audit record id unique per invocation."""
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:12]}"


class AuditRecord(RelayBaseModel):
    """
    One append-only audit entry per invocation.

    Attributes:
        id: Record identifier, unique per invocation
        email: Notification recipient the outcome was reported to
        status: "Success" or "Error"
        detail: Destination reference on success, error message on failure
        timestamp: When the record was created (UTC)
        correlation_id: Correlation id of the transfer request, if one was derived
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_record_id, min_length=1)
    email: str
    status: str
    detail: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    correlation_id: Optional[str] = None

    def to_item(self) -> Dict[str, Any]:
        """Render the record with the audit store attribute names."""
        item: Dict[str, Any] = {
            "RequestId": self.id,
            "UserEmail": self.email,
            "Status": self.status,
            "Info": self.detail,
            "Timestamp": self.timestamp.isoformat(),
        }
        if self.correlation_id:
            item["CorrelationId"] = self.correlation_id
        return item


__all__ = ["AuditRecord", "new_record_id"]
