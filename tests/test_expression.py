"""Tests for the start value parser."""

from __future__ import annotations

import pytest

import expression
from expression import Expression, InvalidInput, LineParseError


@pytest.mark.parametrize(
    "text, expected",
    [
        ("27", 27),
        ("  27\n", 27),
        ("+8", 8),
        ("2^10", 1024),
        ("2^10-1", 1023),
        (" 3^4-1 ", 80),
        ("2^1-1", 1),
        ("7^0", 1),
    ],
)
def test_parse_accepts_literals_and_power_expressions(text: str, expected: int) -> None:
    assert expression.parse(text) == expected


@pytest.mark.parametrize("text", ["0", "-5", "abc", "2^10-2000", "", "2^0-1", "2^", "2^10-", "1.5", "2**10", "2^10x"])
def test_parse_rejects_invalid_input(text: str) -> None:
    with pytest.raises(InvalidInput):
        expression.parse(text)


def test_invalid_input_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        expression.parse("nope")


def test_parse_is_exact_for_huge_exponents() -> None:
    value = expression.parse("2^199-1")

    assert value == (1 << 199) - 1
    assert value.bit_length() == 199


def test_parse_expression_extracts_components() -> None:
    assert expression.parse_expression("2^199-1") == Expression(2, 199, 1)
    assert expression.parse_expression("2^199") == Expression(2, 199, 0)
    assert expression.parse_expression("42") == Expression(42)


def test_parse_positive_rejects_non_positive_and_garbage() -> None:
    assert expression.parse_positive(" 16 ") == 16
    for text in ("0", "-3", "xx", "", "2^3"):
        with pytest.raises(LineParseError):
            expression.parse_positive(text)


def test_parse_has_no_size_bound_by_default() -> None:
    text = "1" * 5000

    assert expression.parse(text) == int(text)
    assert expression.parse_positive(text) == int(text)


def test_parse_respects_max_digits() -> None:
    assert expression.parse("2^10", max_digits=4) == 1024

    with pytest.raises(InvalidInput):
        expression.parse("2^10", max_digits=3)
    with pytest.raises(InvalidInput):
        expression.parse("2^5000-1", max_digits=1000)
