"""Process-local counters describing repair outcomes."""

from __future__ import annotations

import threading
from collections import Counter

REPAIR_UNCHANGED = "repair.unchanged"
REPAIR_REPAIRED = "repair.repaired"
REPAIR_FAILED_EMPTY = "repair.failed.empty"
REPAIR_FAILED_UNREPAIRABLE = "repair.failed.unrepairable"

_lock = threading.Lock()
_counters: Counter[str] = Counter()


def inc(name: str, by: int = 1) -> None:
    with _lock:
        _counters[name] += by


def get(name: str) -> int:
    with _lock:
        return _counters[name]


def snapshot() -> dict[str, int]:
    with _lock:
        return dict(_counters)


def reset() -> None:
    with _lock:
        _counters.clear()
