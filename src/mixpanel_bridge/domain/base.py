"""Core base classes for bridge models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable model base with strict validation."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_assignment=True)
