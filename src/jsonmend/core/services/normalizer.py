from __future__ import annotations

import re

BYTE_ORDER_MARK = "\ufeff"

_CONTROL_RUN = re.compile(r"[\x00-\x1f]+")
# BOMs count as outer whitespace once the leading one is gone
_OUTER_SPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def trim(text: str) -> str:
    """Strip outer whitespace and byte-order marks."""
    return _OUTER_SPACE.sub("", text)


def normalize(text: str) -> str:
    """Strip a leading BOM, collapse control-character runs to a space and trim."""
    if text.startswith(BYTE_ORDER_MARK):
        text = text[1:]
    return trim(_CONTROL_RUN.sub(" ", text))
