"""Base models for artifact relay."""

from pydantic import BaseModel, ConfigDict


class RelayBaseModel(BaseModel):
    """Base model for all artifact relay models."""

    model_config = ConfigDict(
        extra="forbid",  # Don't allow extra fields
        frozen=False,  # Allow modification (can be changed per model)
        validate_assignment=True,  # Validate on attribute assignment
    )


__all__ = ["RelayBaseModel"]
