"""Base models for appcast-tool."""

from pydantic import BaseModel, ConfigDict


class AppcastBaseModel(BaseModel):
    """Base model for all appcast-tool domain models."""

    model_config = ConfigDict(
        extra="forbid",  # Don't allow extra fields
        frozen=True,  # Snapshots are never mutated after construction
    )


__all__ = ["AppcastBaseModel"]
