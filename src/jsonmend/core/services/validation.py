"""Strict JSON parsing used as the fast path and the final gate of a repair."""

from __future__ import annotations

import json
from typing import Any

from jsonmend.core.common.exceptions import UnrepairableInputError
from jsonmend.core.common.logging_utils import preview


def _reject_constant(name: str) -> Any:
    # json.loads accepts NaN/Infinity unless told otherwise
    raise ValueError(f"Non-standard JSON constant: {name}")


def strict_loads(text: str) -> Any:
    """Parse ``text`` as standard JSON, rejecting ``NaN`` and ``Infinity``."""
    return json.loads(text, parse_constant=_reject_constant)


def is_valid(text: str) -> bool:
    """Return True when ``text`` parses as strict JSON. Never raises."""
    try:
        strict_loads(text)
    except (ValueError, RecursionError):
        return False
    return True


def finalize(text: str) -> str:
    """Return ``text`` if it parses as strict JSON.

    Raises:
        UnrepairableInputError: carrying the parser's diagnostic as ``detail``
    """
    try:
        strict_loads(text)
    except (ValueError, RecursionError) as e:
        raise UnrepairableInputError(
            detail=str(e),
            details={
                "error_type": type(e).__name__,
                "content_preview": preview(text),
            },
        ) from e
    return text
