"""
Structural delimiter repair.

``balance`` walks the buffer once with a stack of expected closers. Orphan
and mismatched closers are dropped and whatever is still open at the end is
closed. Openers are never inserted and no other character is touched.
"""

from __future__ import annotations

_CLOSER_FOR = {"{": "}", "[": "]"}
_CLOSERS = frozenset(_CLOSER_FOR.values())


def balance(text: str, *, literal_aware: bool = False) -> str:
    """Return ``text`` with well-formed ``{}``/``[]`` nesting.

    With ``literal_aware`` off every bracket counts, including brackets inside
    string literals, so a value such as ``"["`` is treated as an opener.
    """
    stack: list[str] = []
    out: list[str] = []
    in_literal = False
    escaped = False

    for ch in text:
        if in_literal:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_literal = False
            continue

        if ch == '"' and literal_aware:
            in_literal = True
            out.append(ch)
        elif ch in _CLOSER_FOR:
            stack.append(_CLOSER_FOR[ch])
            out.append(ch)
        elif ch in _CLOSERS:
            # orphan (empty stack) and mismatched closers are dropped
            if stack and stack[-1] == ch:
                stack.pop()
                out.append(ch)
        else:
            out.append(ch)

    out.extend(reversed(stack))
    return "".join(out)


def has_top_level_sequence(text: str) -> bool:
    """Return True when a comma separates values at nesting depth zero."""
    depth = 0
    in_literal = False
    escaped = False
    for ch in text:
        if in_literal:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_literal = False
        elif ch == '"':
            in_literal = True
        elif ch in _CLOSER_FOR:
            depth += 1
        elif ch in _CLOSERS:
            depth -= 1
        elif ch == "," and depth == 0:
            return True
    return False


def wrap_top_level_sequence(text: str) -> str:
    """Wrap comma-separated top-level values, e.g. ``{..},{..}``, in an array."""
    if has_top_level_sequence(text):
        return f"[{text}]"
    return text
