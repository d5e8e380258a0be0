"""
Pydantic schemas for user-scoped documents.

Records are immutable snapshots of what the store returned; they are not
bound to the underlying row.
"""

from copy import deepcopy
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DocumentRecord(BaseModel):
    """A single document read from the caller's namespace."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Document id inside its collection")
    data: Mapping[str, Any] = Field(default_factory=dict, description="Document fields (read-only)")

    @field_validator("data", mode="after")
    @classmethod
    def _snapshot(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        # Detached from the caller's dict and closed to item assignment
        return MappingProxyType(deepcopy(dict(value)))
