"""
Unit tests for sqlmerge.core.escaping (value escaper).
"""

from decimal import Decimal

import pytest

from sqlmerge.core.escaping import escape_value, quote_string


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, "NULL"),
        (True, "TRUE"),
        (False, "FALSE"),
        (0, "0"),
        (123, "123"),
        (-7, "-7"),
        (1.5, "1.5"),
        (Decimal("10.25"), "10.25"),
    ],
)
def test_unquoted_literals(value: object, expected: str) -> None:
    assert escape_value(value) == expected


def test_string_is_single_quoted() -> None:
    assert escape_value("784") == "'784'"


def test_single_quotes_are_doubled() -> None:
    assert escape_value("O'Reilly") == "'O''Reilly'"


def test_double_quotes_and_backticks_are_untouched() -> None:
    assert escape_value('say "hi" `now`') == "'say \"hi\" `now`'"


@pytest.mark.parametrize(
    "value,expected",
    [
        (float("inf"), "'inf'"),
        (float("-inf"), "'-inf'"),
        (float("nan"), "'nan'"),
        (Decimal("NaN"), "'NaN'"),
    ],
)
def test_non_finite_numbers_are_quoted(value: object, expected: str) -> None:
    assert escape_value(value) == expected


def test_containers_use_json_text() -> None:
    assert escape_value([1, "a"]) == "'[1, \"a\"]'"
    assert escape_value({"k": "it's"}) == "'{\"k\": \"it''s\"}'"


def test_other_objects_use_str() -> None:
    class Token:
        def __str__(self) -> str:
            return "tok'en"

    assert escape_value(Token()) == "'tok''en'"


def test_quote_string_empty() -> None:
    assert quote_string("") == "''"
