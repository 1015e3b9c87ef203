"""Bookkeeping of which configuration source supplied each setting."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ParameterSource(Enum):
    """Configuration sources, lowest precedence first."""

    DEFAULT = "default"
    CONFIG_FILE = "config"
    ENVIRONMENT = "environment"
    CLI = "cli"


@dataclass(frozen=True)
class SourceRecord:
    value: Any
    source: ParameterSource
    origin: str | None = None


class ParameterResolution:
    """Remember every value assigned to a dotted setting name, in order."""

    def __init__(self) -> None:
        self._records: dict[str, list[SourceRecord]] = {}

    def record(
        self,
        name: str,
        value: Any,
        source: ParameterSource,
        *,
        origin: str | None = None,
    ) -> None:
        self._records.setdefault(name, []).append(SourceRecord(value, source, origin))

    def source_of(self, name: str) -> SourceRecord | None:
        """Return the record that set ``name`` last, or None for defaults."""
        records = self._records.get(name)
        return records[-1] if records else None

    def latest_by_source(self, source: ParameterSource) -> dict[str, SourceRecord]:
        """Settings whose most recent assignment came from ``source``."""
        return {
            name: records[-1]
            for name, records in self._records.items()
            if records[-1].source is source
        }

    def log(self, logger: logging.Logger, config: Any) -> None:
        """Log each effective setting of ``config`` with where it came from."""
        for name, value in sorted(flatten_config(config).items()):
            entry = self.source_of(name)
            if entry is None:
                label = ParameterSource.DEFAULT.value
            else:
                label = entry.source.value
                if entry.origin:
                    label = f"{label} {entry.origin}"
            logger.debug("Loaded parameter %s = %r (%s)", name, value, label)


def flatten_config(config: Any) -> dict[str, Any]:
    """Map a model or nested dict to ``{"section.key": value}``."""
    data = config.model_dump(mode="json") if hasattr(config, "model_dump") else config
    if not isinstance(data, dict):
        raise TypeError("Unsupported configuration object type")

    flat: dict[str, Any] = {}
    pending: list[tuple[str, Any]] = list(data.items())
    while pending:
        key, value = pending.pop()
        if isinstance(value, dict):
            pending.extend((f"{key}.{child}", v) for child, v in value.items())
        else:
            flat[key] = value
    return flat
