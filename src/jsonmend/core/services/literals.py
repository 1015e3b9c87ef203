"""
Helpers for telling quoted literals apart from structural text.

Rewrite rules use these to leave the contents of string literals alone, so a
colon, comma or bracket inside a value is never mistaken for syntax.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator

_REQUOTE_ESCAPES = re.compile(r'\\(.)|"', re.DOTALL)


def find_literal_end(text: str, start: int, quote: str = '"') -> int:
    """Return the index just past the literal opened at ``start``.

    Backslash escapes are honoured. An unterminated literal runs to the end of
    ``text``.
    """
    i = start + 1
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\":
            i += 2
        elif ch == quote:
            return i + 1
        else:
            i += 1
    return n


def find_closing_quote(text: str, start: int, quote: str = "'") -> int:
    """Return the index of the quote closing the literal opened at ``start``.

    Returns -1 when the literal is never closed or ends in a dangling backslash.
    """
    i = start + 1
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\":
            if i + 1 >= n:
                return -1
            i += 2
        elif ch == quote:
            return i
        else:
            i += 1
    return -1


def iter_segments(text: str) -> Iterator[tuple[str, bool]]:
    """Yield ``(segment, is_literal)`` pairs covering ``text`` in order.

    Literal segments are double-quoted spans including their quotes.
    """
    start = 0
    i = 0
    n = len(text)
    while i < n:
        if text[i] == '"':
            if i > start:
                yield text[start:i], False
            end = find_literal_end(text, i)
            yield text[i:end], True
            start = i = end
        else:
            i += 1
    if start < n:
        yield text[start:], False


def rewrite_outside_literals(
    text: str, rewrite: Callable[[str], str], *, literal_aware: bool = True
) -> str:
    """Apply ``rewrite`` to every run of ``text`` outside double-quoted literals.

    With ``literal_aware`` off the whole buffer is rewritten in one pass.
    """
    if not literal_aware:
        return rewrite(text)
    return "".join(
        segment if is_literal else rewrite(segment)
        for segment, is_literal in iter_segments(text)
    )


def _requote_escape(match: re.Match[str]) -> str:
    if match.group(0) == '"':
        return '\\"'
    if match.group(1) == "'":
        return "'"
    return match.group(0)


def requote(body: str) -> str:
    """Turn the body of a single-quoted literal into a double-quoted literal."""
    return '"' + _REQUOTE_ESCAPES.sub(_requote_escape, body) + '"'
