"""Nominal marker base class for Pydantic-based domain models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Nominal marker for Pydantic-based domain and configuration models."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    def __repr__(self) -> str:
        """Provide a concise, one-line summary of the object."""
        class_name = self.__class__.__name__
        for attr in ("status", "name"):
            attr_value = getattr(self, attr, None)
            if isinstance(attr_value, Enum):
                attr_value = attr_value.value
            if attr_value is not None:
                return f'<{class_name} {attr}="{attr_value}">'
        return f"<{class_name}>"
