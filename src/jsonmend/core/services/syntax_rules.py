"""
Ordered textual corrections for JSON-like input.

Each rule rewrites the whole buffer and is a no-op when its pattern is
absent. Later rules assume earlier ones already ran, so the order of
``SYNTAX_RULES`` is fixed. Rules other than quote normalization only touch
text outside double-quoted literals unless ``literal_aware`` is turned off.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable

from jsonmend.core.services.literals import (
    find_closing_quote,
    find_literal_end,
    requote,
    rewrite_outside_literals,
)

SyntaxRuleFunc = Callable[..., str]

_IDENT = r"[a-zA-Z_$][a-zA-Z0-9_$]*"

_UNQUOTED_KEY = re.compile(rf"([{{,]\s*)({_IDENT})\s*:", re.ASCII)
_TRAILING_COMMA = re.compile(r",(\s*[}\]])", re.ASCII)
_ADJACENT_STRUCTURES = re.compile(r"([}\]])\s*([{\[])", re.ASCII)
# undefined/NaN/Infinity are left for repair_special_literals
_BAREWORD_VALUE = re.compile(
    rf":(\s*)(?!(?:undefined|NaN|Infinity)\b)({_IDENT})\b(?!\s*[{{\[\-0-9])",
    re.ASCII,
)
_UNDEFINED_OR_NAN = re.compile(r":(\s*)(?:undefined|NaN)\b", re.ASCII)
_INFINITY = re.compile(r":(\s*)(-?)Infinity\b", re.ASCII)
_NUMBER_VALUE = re.compile(
    r":(\s*)(-?\d+\.?\d*(?:e[+-]?\d+)?)", re.ASCII | re.IGNORECASE
)
_INTEGER = re.compile(r"-?\d+", re.ASCII)

# Integral values below this magnitude print without an exponent
_EXPONENT_THRESHOLD = 1e21


def normalize_quotes(text: str, *, literal_aware: bool = True) -> str:
    """Rewrite single-quoted literals as double-quoted literals.

    Double quotes inside a converted literal are escaped and ``\\'`` becomes a
    plain apostrophe. A single quote that is never closed is left as is.
    """
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == '"' and literal_aware:
            end = find_literal_end(text, i)
            out.append(text[i:end])
            i = end
        elif ch == "'":
            end = find_closing_quote(text, i)
            if end == -1:
                out.append(ch)
                i += 1
            else:
                out.append(requote(text[i + 1 : end]))
                i = end + 1
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def quote_keys(text: str, *, literal_aware: bool = True) -> str:
    """Wrap identifiers followed by a colon after ``{`` or ``,`` in double quotes."""
    return rewrite_outside_literals(
        text,
        lambda segment: _UNQUOTED_KEY.sub(r'\1"\2":', segment),
        literal_aware=literal_aware,
    )


def remove_trailing_commas(text: str, *, literal_aware: bool = True) -> str:
    """Drop commas that directly precede a closing ``}`` or ``]``."""
    return rewrite_outside_literals(
        text,
        lambda segment: _TRAILING_COMMA.sub(r"\1", segment),
        literal_aware=literal_aware,
    )


def insert_missing_commas(text: str, *, literal_aware: bool = True) -> str:
    """Insert a comma between a closing delimiter and a following opener."""
    return rewrite_outside_literals(
        text,
        lambda segment: _ADJACENT_STRUCTURES.sub(r"\1,\2", segment),
        literal_aware=literal_aware,
    )


def quote_bareword_values(text: str, *, literal_aware: bool = True) -> str:
    """Quote bare identifiers appearing as values after a colon.

    ``true``, ``false`` and ``null`` are quoted like any other identifier, so
    ``{a: true,}`` comes out as ``{"a":"true"}``.
    """
    return rewrite_outside_literals(
        text,
        lambda segment: _BAREWORD_VALUE.sub(r':"\2"', segment),
        literal_aware=literal_aware,
    )


def _repair_special_segment(segment: str) -> str:
    segment = _UNDEFINED_OR_NAN.sub(":null", segment)
    return _INFINITY.sub(r':\1"\2Infinity"', segment)


def repair_special_literals(text: str, *, literal_aware: bool = True) -> str:
    """Map ``undefined``/``NaN`` to ``null`` and ``Infinity`` to a string."""
    return rewrite_outside_literals(
        text, _repair_special_segment, literal_aware=literal_aware
    )


def canonical_number(literal: str) -> str:
    """Return the canonical JSON spelling of a numeric literal, or ``null``."""
    literal = literal.strip()
    try:
        if _INTEGER.fullmatch(literal):
            return str(int(literal))
        value = float(literal)
    except ValueError:
        return "null"
    if not math.isfinite(value):
        return "null"
    if value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
        return str(int(value))
    return repr(value)


def reserialize_numbers(text: str, *, literal_aware: bool = True) -> str:
    """Re-emit numbers following a colon in canonical form."""
    return rewrite_outside_literals(
        text,
        lambda segment: _NUMBER_VALUE.sub(
            lambda m: ":" + canonical_number(m.group(2)), segment
        ),
        literal_aware=literal_aware,
    )


SYNTAX_RULES: tuple[tuple[str, SyntaxRuleFunc], ...] = (
    ("normalize_quotes", normalize_quotes),
    ("quote_keys", quote_keys),
    ("remove_trailing_commas", remove_trailing_commas),
    ("insert_missing_commas", insert_missing_commas),
    ("quote_bareword_values", quote_bareword_values),
    ("repair_special_literals", repair_special_literals),
    ("reserialize_numbers", reserialize_numbers),
)


def apply_syntax_rules(text: str, *, literal_aware: bool = True) -> str:
    """Run every correction rule over ``text`` in order."""
    for _name, rule in SYNTAX_RULES:
        text = rule(text, literal_aware=literal_aware)
    return text
