"""Outcome and result models for relay invocations."""

import json
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import Field

from ..utils.constants import (
    AUDIT_STATUS_ERROR,
    AUDIT_STATUS_SUCCESS,
    HTTP_STATUS_OK,
    HTTP_STATUS_SERVER_ERROR,
    RESULT_MESSAGE_FAILURE,
    RESULT_MESSAGE_SUCCESS,
)
from .base import RelayBaseModel


class TransferStatus(str, Enum):
    """Coarse status of a transfer."""

    SUCCESS = "Success"
    FAILURE = "Failure"


class TransferOutcome(RelayBaseModel):
    """
    Outcome of the transfer steps of one invocation.

    Attributes:
        status: Success or Failure
        destination_reference: Resolvable locator of the uploaded artifact (success only)
        error_message: Human-readable failure description (failure only)
    """

    status: TransferStatus
    destination_reference: Optional[str] = None
    error_message: Optional[str] = None

    @classmethod
    def success(cls, destination_reference: str) -> "TransferOutcome":
        """Outcome of a completed transfer."""
        return cls(status=TransferStatus.SUCCESS, destination_reference=destination_reference)

    @classmethod
    def failure(cls, error_message: str) -> "TransferOutcome":
        """Outcome of a failed transfer."""
        return cls(status=TransferStatus.FAILURE, error_message=error_message)

    @property
    def succeeded(self) -> bool:
        """Whether the transfer completed."""
        return self.status is TransferStatus.SUCCESS

    @property
    def audit_status(self) -> str:
        """Status string stored in audit records."""
        return AUDIT_STATUS_SUCCESS if self.succeeded else AUDIT_STATUS_ERROR

    def to_result(self) -> "InvocationResult":
        """Translate the outcome into the caller-facing result."""
        if self.succeeded:
            return InvocationResult(status_code=HTTP_STATUS_OK, message=RESULT_MESSAGE_SUCCESS)
        return InvocationResult(
            status_code=HTTP_STATUS_SERVER_ERROR,
            message=RESULT_MESSAGE_FAILURE,
            error_detail=self.error_message,
        )


class InvocationResult(RelayBaseModel):
    """
    Structured result returned to the invoker.

    Attributes:
        status_code: 200 on success, 500 on failure
        message: Human-readable summary
        error_detail: Failure description, if any
    """

    status_code: int = Field(ge=100, le=599)
    message: str
    error_detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        """Whether the invocation succeeded."""
        return self.status_code == HTTP_STATUS_OK

    def to_response(self) -> Dict[str, Any]:
        """
        Render the function response mapping.

        Returns:
            {"statusCode": ..., "body": "<json>"}, the body holding the message and error
        """
        body: Dict[str, Any] = {"message": self.message}
        if self.error_detail is not None:
            body["error"] = self.error_detail
        return {"statusCode": self.status_code, "body": json.dumps(body)}


__all__ = ["TransferStatus", "TransferOutcome", "InvocationResult"]
