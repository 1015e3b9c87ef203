from __future__ import annotations

import pytest

from jsonmend.core.services.syntax_rules import (
    SYNTAX_RULES,
    apply_syntax_rules,
    canonical_number,
    insert_missing_commas,
    normalize_quotes,
    quote_bareword_values,
    quote_keys,
    remove_trailing_commas,
    repair_special_literals,
    reserialize_numbers,
)


def test_rules_run_in_fixed_order() -> None:
    assert [name for name, _ in SYNTAX_RULES] == [
        "normalize_quotes",
        "quote_keys",
        "remove_trailing_commas",
        "insert_missing_commas",
        "quote_bareword_values",
        "repair_special_literals",
        "reserialize_numbers",
    ]


@pytest.mark.parametrize("name_and_rule", SYNTAX_RULES, ids=lambda r: r[0])
def test_rules_are_noops_without_their_pattern(name_and_rule) -> None:
    _, rule = name_and_rule
    text = '{"a": "b", "c": [true, false, null]}'

    assert rule(text) == text
    assert rule("") == ""


class TestNormalizeQuotes:
    def test_single_quoted_literals_become_double_quoted(self) -> None:
        assert normalize_quotes("{'a':'b'}") == '{"a":"b"}'

    def test_double_quotes_in_body_are_escaped(self) -> None:
        assert normalize_quotes("{'a':'say \"hi\"'}") == '{"a":"say \\"hi\\""}'

    def test_escaped_apostrophe_is_unescaped(self) -> None:
        assert normalize_quotes(r"{'it\'s': 1}") == '{"it\'s": 1}'

    def test_unclosed_single_quote_is_left_alone(self) -> None:
        assert normalize_quotes("{'a: 1}") == "{'a: 1}"

    def test_apostrophe_inside_double_quoted_literal_is_kept(self) -> None:
        text = '{"msg": "it\'s", \'k\': 1}'

        assert normalize_quotes(text) == '{"msg": "it\'s", "k": 1}'


class TestQuoteKeys:
    def test_unquoted_key(self) -> None:
        assert quote_keys("{a:1}") == '{"a":1}'

    def test_keys_after_brace_and_comma_with_whitespace(self) -> None:
        assert quote_keys("{ a : 1, $b_2: 2}") == '{ "a": 1, "$b_2": 2}'

    def test_identifier_must_not_start_with_digit(self) -> None:
        assert quote_keys("{1a: 1}") == "{1a: 1}"

    def test_key_must_follow_brace_or_comma(self) -> None:
        assert quote_keys("[a: 1]") == "[a: 1]"

    def test_key_like_text_inside_literal_is_left_alone(self) -> None:
        text = '{"x": "{a: 1}"}'

        assert quote_keys(text) == text
        assert quote_keys(text, literal_aware=False) == '{"x": "{"a": 1}"}'


class TestRemoveTrailingCommas:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("[1,2,]", "[1,2]"),
            ("[1, 2, ]", "[1, 2 ]"),
            ('{"a": 1,}', '{"a": 1}'),
            ("[1,,]", "[1,]"),
        ],
    )
    def test_trailing_comma_removed(self, text: str, expected: str) -> None:
        assert remove_trailing_commas(text) == expected

    def test_comma_inside_literal_is_kept(self) -> None:
        assert remove_trailing_commas('["a,]"]') == '["a,]"]'


class TestInsertMissingCommas:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("}{", "},{"),
            ("} {", "},{"),
            ("][", "],["),
            ("}[", "},["),
            ("]{", "],{"),
        ],
    )
    def test_all_adjacent_structure_pairs(self, text: str, expected: str) -> None:
        assert insert_missing_commas(text) == expected

    def test_adjacent_objects_in_array(self) -> None:
        assert insert_missing_commas('[{"a":1}{"b":2}]') == '[{"a":1},{"b":2}]'

    def test_brackets_inside_literal_are_left_alone(self) -> None:
        assert insert_missing_commas('["}{"]') == '["}{"]'


class TestQuoteBarewordValues:
    def test_bareword_value_quoted_and_whitespace_dropped(self) -> None:
        assert quote_bareword_values('{"a": foo}') == '{"a":"foo"}'

    @pytest.mark.parametrize(
        "text",
        [
            '{"a": foo-bar}',
            '{"a": foo {}}',
            '{"a": foo [1]}',
            '{"a": foo 1}',
            '{"a": "b"}',
            '{"a": 12}',
        ],
    )
    def test_bareword_followed_by_structure_sign_or_digit_is_left_alone(
        self, text: str
    ) -> None:
        assert quote_bareword_values(text) == text

    @pytest.mark.parametrize("literal", ["true", "false", "null"])
    def test_boolean_and_null_literals_are_quoted_too(self, literal: str) -> None:
        # Known quirk: legitimate literals become strings once repair kicks in.
        assert quote_bareword_values(f'{{"a": {literal}}}') == f'{{"a":"{literal}"}}'

    @pytest.mark.parametrize("literal", ["undefined", "NaN", "Infinity"])
    def test_special_literals_are_left_for_special_literal_repair(
        self, literal: str
    ) -> None:
        text = f'{{"a": {literal}}}'

        assert quote_bareword_values(text) == text

    def test_identifier_merely_starting_with_special_literal_is_quoted(self) -> None:
        assert quote_bareword_values('{"a": undefinedValue}') == '{"a":"undefinedValue"}'

    def test_colon_inside_literal_is_ignored(self) -> None:
        text = '{"note": "time: later"}'

        assert quote_bareword_values(text) == text
        assert (
            quote_bareword_values(text, literal_aware=False)
            == '{"note": "time:"later""}'
        )


class TestRepairSpecialLiterals:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ('{"a":undefined}', '{"a":null}'),
            ('{"a": undefined}', '{"a":null}'),
            ('{"a":NaN}', '{"a":null}'),
            ('{"a":Infinity}', '{"a":"Infinity"}'),
            ('{"a": Infinity}', '{"a": "Infinity"}'),
            ('{"a": -Infinity}', '{"a": "-Infinity"}'),
        ],
    )
    def test_special_literals(self, text: str, expected: str) -> None:
        assert repair_special_literals(text) == expected

    def test_longer_identifier_is_not_touched(self) -> None:
        assert repair_special_literals('{"a": Infinityx}') == '{"a": Infinityx}'

    def test_special_literal_inside_string_is_kept(self) -> None:
        assert repair_special_literals('{"a": "x:NaN"}') == '{"a": "x:NaN"}'


class TestNumbers:
    @pytest.mark.parametrize(
        ("literal", "expected"),
        [
            ("1", "1"),
            (" 12 ", "12"),
            ("-0", "0"),
            ("007", "7"),
            ("1.0", "1"),
            ("1.", "1"),
            ("0.1", "0.1"),
            ("-1.5e3", "-1500"),
            ("1E2", "100"),
            ("1e20", "100000000000000000000"),
            ("1e21", "1e+21"),
            ("2.5e-7", "2.5e-07"),
            ("12345678901234567890123", "12345678901234567890123"),
            ("1e400", "null"),
            ("abc", "null"),
        ],
    )
    def test_canonical_number(self, literal: str, expected: str) -> None:
        assert canonical_number(literal) == expected

    def test_numbers_after_colon_are_reserialized(self) -> None:
        assert (
            reserialize_numbers('{"a": 1.50, "b":1e3, "c": -0}')
            == '{"a":1.5, "b":1000, "c":0}'
        )

    def test_numbers_without_colon_are_left_alone(self) -> None:
        assert reserialize_numbers("[1.50, 007]") == "[1.50, 007]"

    def test_numbers_inside_literals_are_left_alone(self) -> None:
        assert reserialize_numbers('{"a": "x: 1.50"}') == '{"a": "x: 1.50"}'


def test_apply_syntax_rules_runs_whole_chain() -> None:
    text = "{a: 'x', b: [1, 2,], c: undefined}"

    assert apply_syntax_rules(text) == '{"a": "x", "b": [1, 2], "c":null}'
