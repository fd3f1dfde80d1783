"""Transfer request model and trigger event parsing."""

import json
import logging
import uuid
from typing import Any, Dict, Mapping, Optional

from pydantic import ConfigDict, Field, ValidationError, field_validator

from ..exceptions import InvalidTrigger
from ..utils.constants import REMOTE_URL_SCHEMES
from ..utils.error_handling import try_parse_json
from ..utils.keys import generate_destination_key
from .base import RelayBaseModel
from .config import RelayConfig

# Message fields naming the artifact origin, in order of preference
SOURCE_URL_FIELDS = ("sourceUrl", "githubReleaseUrl")


class TransferRequest(RelayBaseModel):
    """
    One transfer, derived from a trigger event.

    Attributes:
        correlation_id: Identifier tying logs, notification and audit record together
        source_url: URL of the artifact to download
        destination_bucket: Bucket receiving the artifact
        destination_key: Key of the uploaded object
    """

    model_config = ConfigDict(frozen=True)

    correlation_id: str = Field(min_length=1)
    source_url: str
    destination_bucket: str = Field(min_length=1)
    destination_key: str = Field(min_length=1)

    @field_validator("source_url")
    @classmethod
    def validate_source_url(cls, v: str) -> str:
        """Validate that the source is an HTTP(S) URL."""
        if not v.startswith(REMOTE_URL_SCHEMES):
            raise ValueError(f"source_url must be an http(s) URL: {v}")
        return v

    @classmethod
    def from_event(cls, event: Mapping[str, Any], config: RelayConfig) -> "TransferRequest":
        """
        Build a transfer request from a trigger event.

        Accepts either an SNS notification (message JSON in
        Records[0].Sns.Message) or the bare message object.

        Args:
            event: Trigger event
            config: Relay configuration providing defaults

        Returns:
            Immutable TransferRequest

        Raises:
            InvalidTrigger: If the event carries no usable source URL or is malformed
        """
        message, envelope_id = _unwrap_message(event)

        source_url = next((message[f] for f in SOURCE_URL_FIELDS if message.get(f)), None) or config.source_url
        if not source_url:
            raise InvalidTrigger("Trigger message has no sourceUrl and no default source is configured")

        correlation_id = str(message.get("correlationId") or envelope_id or uuid.uuid4())

        if config.uses_fixed_keys:
            destination_key = message.get("destinationKey") or config.destination_key
            if not destination_key:
                raise InvalidTrigger("Fixed destination key strategy requires a destinationKey")
        else:
            if message.get("destinationKey"):
                logging.warning("Ignoring destinationKey from trigger: generated keys are configured")
            destination_key = generate_destination_key(source_url)

        try:
            return cls(
                correlation_id=correlation_id,
                source_url=source_url,
                destination_bucket=config.destination_bucket,
                destination_key=destination_key,
            )
        except ValidationError as e:
            raise InvalidTrigger(f"Invalid trigger message: {e}") from e


def _unwrap_message(event: Mapping[str, Any]) -> tuple[Dict[str, Any], Optional[str]]:
    """Return (message, envelope message id) for an SNS-wrapped or bare event."""
    if not isinstance(event, Mapping):
        raise InvalidTrigger(f"Trigger event must be an object, got {type(event).__name__}")

    records = event.get("Records")
    if not records:
        return dict(event), None

    try:
        sns = records[0]["Sns"]
        raw_message = sns["Message"]
    except (KeyError, IndexError, TypeError) as e:
        raise InvalidTrigger(f"Trigger event has no SNS message: {e}") from e

    if isinstance(raw_message, (str, bytes)):
        try:
            message = try_parse_json(raw_message, "trigger message parsing")
        except ValueError as e:
            raise InvalidTrigger(str(e)) from e
    else:
        message = raw_message

    if not isinstance(message, dict):
        raise InvalidTrigger(f"Trigger message must be a JSON object, got {json.dumps(message)[:100]}")
    return message, sns.get("MessageId")


__all__ = ["TransferRequest", "SOURCE_URL_FIELDS"]
