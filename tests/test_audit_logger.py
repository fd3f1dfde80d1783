"""Tests for AuditLogger."""

import pytest

from artifact_relay.exceptions import AuditWriteFailed
from artifact_relay.models import AuditRecord
from artifact_relay.services import AuditLogger

from conftest import FakeAuditStore


class TestAuditLogger:
    """Test AuditLogger."""

    def test_record_appends_item(self):
        """record() stores the rendered item."""
        store = FakeAuditStore()
        record = AuditRecord(email="releases@example.test", status="Success", detail="ok", correlation_id="c-1")

        AuditLogger(store).record(record)

        assert len(store.items) == 1
        item = store.items[0]
        assert item["RequestId"] == record.id
        assert item["Status"] == "Success"
        assert item["UserEmail"] == "releases@example.test"
        assert item["CorrelationId"] == "c-1"

    def test_records_are_appended_not_replaced(self):
        """Each record is a new entry."""
        store = FakeAuditStore()
        logger = AuditLogger(store)
        logger.record(AuditRecord(email="a@example.test", status="Success", detail="1"))
        logger.record(AuditRecord(email="a@example.test", status="Error", detail="2"))
        assert [item["Info"] for item in store.items] == ["1", "2"]

    def test_record_failure(self):
        """Store errors become AuditWriteFailed."""
        record = AuditRecord(email="a@example.test", status="Error", detail="x")
        with pytest.raises(AuditWriteFailed) as exc_info:
            AuditLogger(FakeAuditStore(error=RuntimeError("throttled"))).record(record)
        assert exc_info.value.record_id == record.id
