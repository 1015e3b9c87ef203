from __future__ import annotations

import pytest

from jsonmend.core.services.normalizer import normalize, trim


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ('\ufeff{"a":1}', '{"a":1}'),
        ("\t\n[1]\r\n", "[1]"),
        ("a\x00\x01\x1fb", "a b"),
        ("{\n  'a': 1\n}", "{   'a': 1 }"),
        ("   ", ""),
    ],
)
def test_normalize(raw: str, expected: str) -> None:
    assert normalize(raw) == expected


def test_normalize_trims_repeated_and_trailing_boms() -> None:
    assert normalize("\ufeff\ufeff[1]") == "[1]"
    assert normalize("\ufeff \ufeff[1] \ufeff") == "[1]"


def test_normalize_keeps_bom_inside_text() -> None:
    assert normalize("[\ufeff1]") == "[\ufeff1]"


def test_trim_matches_blank_input() -> None:
    assert trim(" \ufeff\n\ufeff ") == ""
    assert trim("\ufeff a \ufeff") == "a"


def test_normalize_leaves_delete_character_alone() -> None:
    assert normalize("a\x7fb") == "a\x7fb"
