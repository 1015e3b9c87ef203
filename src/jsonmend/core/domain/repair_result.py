from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import ConfigDict

from jsonmend.core.common.exceptions import JsonRepairError
from jsonmend.core.domain.model_bases import DomainModel


class RepairStatus(str, Enum):
    """Outcome of a single repair call."""

    UNCHANGED = "unchanged"
    REPAIRED = "repaired"
    FAILED = "failed"


class RepairResult(DomainModel):
    """Result of running the repair engine over one input text.

    ``text`` is strictly valid JSON whenever ``status`` is not ``FAILED``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    status: RepairStatus
    original: str
    text: str | None = None
    error: JsonRepairError | None = None
    applied_rules: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status is not RepairStatus.FAILED

    @property
    def changed(self) -> bool:
        return self.status is RepairStatus.REPAIRED


class LoadedDocument(DomainModel):
    """A parsed JSON document together with the text it was parsed from."""

    value: Any
    text: str
    repaired: bool
    advisory: str | None = None
    source: str | None = None
