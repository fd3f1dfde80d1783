"""DynamoDB adapter for the audit store."""

import logging
from typing import Any, Dict, Optional

import boto3


class DynamoDBAuditStore:
    """Append-only audit store backed by a DynamoDB table."""

    def __init__(self, table_name: str, region_name: Optional[str] = None, resource: Optional[Any] = None) -> None:
        """
        Initialize the audit store.

        Args:
            table_name: Name of the audit table
            region_name: AWS region (boto3 default chain when None)
            resource: Pre-built dynamodb resource (mainly for tests)
        """
        dynamodb = resource if resource is not None else boto3.resource("dynamodb", region_name=region_name)
        self.table_name = table_name
        self._table = dynamodb.Table(table_name)

    def put(self, item: Dict[str, Any]) -> None:
        """Append one record to the table."""
        logging.debug("Writing audit item to %s", self.table_name)
        self._table.put_item(Item=item)


__all__ = ["DynamoDBAuditStore"]
