"""Tests for add(), tokenize() and parse_numbers()."""

import pytest

from stringcalc.calculator import add, breakdown, parse_numbers, tokenize
from stringcalc.config import CalculatorConfig
from stringcalc.errors import (
    CalculatorError,
    InvalidTokenError,
    MalformedHeaderError,
    NegativeNumberError,
)


# --- Default delimiters ---

def test_empty_string_is_zero():
    assert add("") == 0


def test_single_number():
    assert add("1") == 1


def test_two_numbers():
    assert add("1,5") == 6


def test_newline_and_comma_interchangeable():
    assert add("1\n2,3") == 6


def test_consecutive_delimiters_yield_no_empty_tokens():
    assert add("1,\n2,,3") == 6


def test_surrounding_whitespace_tolerated():
    assert add(" 1 , 2 ") == 3


# --- Custom delimiters ---

def test_custom_single_delimiter():
    assert add("//;\n1;2") == 3


def test_metacharacter_delimiter_is_literal():
    assert add("//|\n1|2|3") == 6
    assert add("//.\n1.2.3") == 6


def test_bracketed_long_delimiter():
    assert add("//[***]\n1***2***3") == 6


def test_multiple_delimiters():
    assert add("//[*][%]\n1*2%3") == 6


def test_multiple_long_delimiters():
    assert add("//[**][%%]\n1**2%%3") == 6


def test_newline_still_a_delimiter_with_header():
    assert add("//;\n1;2\n3") == 6


def test_comma_not_a_delimiter_with_header():
    with pytest.raises(InvalidTokenError) as exc:
        add("//;\n1,2")
    assert exc.value.token == "1,2"


def test_header_with_empty_body():
    assert add("//;\n") == 0


# --- Values above 1000 ---

def test_values_above_1000_ignored():
    assert add("2,1001") == 2


def test_values_above_1000_ignored_with_header():
    assert add("//;\n1;1001;3") == 4


def test_1000_is_still_added():
    assert add("1000,1001") == 1000


# --- Negatives ---

def test_negative_number_raises():
    with pytest.raises(NegativeNumberError, match="-2"):
        add("//;\n1;-2;3")


def test_all_negatives_reported_in_order():
    with pytest.raises(NegativeNumberError) as exc:
        add("-4,1,-2,-9")
    assert exc.value.negatives == [-4, -2, -9]
    assert str(exc.value) == "negative numbers not allowed: -4, -2, -9"


def test_negative_beats_large_value():
    with pytest.raises(NegativeNumberError):
        add("-1,2000")


def test_negative_zero_is_not_negative():
    assert add("-0,5") == 5


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        add("1,-1")


# --- Invalid tokens ---

@pytest.mark.parametrize("text", ["1,abc", "1,+2", "1,1_000", "1,2.5", "1, ", "1,１"])
def test_invalid_token_raises(text):
    with pytest.raises(InvalidTokenError):
        add(text)


# --- Malformed headers ---

@pytest.mark.parametrize("text", ["//;", "//\n1,2", "//[*\n1*2", "//[]\n1", "//[*]x\n1*2"])
def test_malformed_header_raises(text):
    with pytest.raises(MalformedHeaderError):
        add(text)


# --- Properties ---

def test_add_is_idempotent():
    text = "//[*][%]\n1*2%3,"
    with pytest.raises(CalculatorError):
        add(text)
    with pytest.raises(CalculatorError):
        add(text)
    assert add("1\n2,3") == add("1\n2,3") == 6


@pytest.mark.parametrize(
    "values, header, sep",
    [
        ([0, 1, 2, 3], "", ","),
        ([1000, 999, 1], "", "\n"),
        ([7, 8, 9, 10], "//;\n", ";"),
        ([5, 500, 50], "//[abc]\n", "abc"),
    ],
)
def test_sum_matches_arithmetic_sum(values, header, sep):
    assert add(header + sep.join(str(v) for v in values)) == sum(values)


# --- Configuration ---

def test_custom_max_value():
    assert add("5,11", CalculatorConfig(max_value=10)) == 5


def test_custom_default_delimiter():
    config = CalculatorConfig(default_delimiter=";")
    assert add("1;2\n3", config) == 6
    with pytest.raises(InvalidTokenError):
        add("1,2", config)


# --- breakdown() ---

def test_breakdown_keeps_intermediate_values():
    bd = breakdown("//;\n1;1001;3")
    assert bd.delimiters == (";", "\n")
    assert bd.tokens == ["1", "1001", "3"]
    assert bd.numbers == [1, 1001, 3]
    assert bd.included == [1, 3]
    assert bd.ignored == [1001]
    assert bd.total == 4


def test_breakdown_empty_input():
    bd = breakdown("")
    assert bd.tokens == []
    assert bd.total == 0


# --- tokenize() / parse_numbers() ---

def test_tokenize_longest_delimiter_wins():
    assert tokenize("1**2*3", ["*", "**"]) == ["1", "2", "3"]


def test_tokenize_no_delimiters_in_body():
    assert tokenize("42", [","]) == ["42"]


def test_tokenize_empty_body():
    assert tokenize("", [","]) == []


def test_tokenize_requires_a_delimiter():
    with pytest.raises(ValueError):
        tokenize("1,2", [""])


def test_parse_numbers():
    assert parse_numbers(["1", " -2", "30 "]) == [1, -2, 30]


# --- Very long tokens ---

def test_huge_value_ignored():
    assert add("1," + "9" * 5000) == 1


def test_huge_negative_still_rejected():
    with pytest.raises(NegativeNumberError) as exc:
        add("1,-" + "9" * 5000)
    assert str(exc.value) == "negative numbers not allowed: -" + "9" * 5000


def test_leading_zeros_do_not_count_as_digits():
    assert add("0" * 5000 + "1,2") == 3


def test_negative_message_drops_leading_zeros():
    with pytest.raises(NegativeNumberError, match="allowed: -5$"):
        add("-0005")


def test_parse_numbers_caps_long_tokens_above_max():
    assert parse_numbers(["12345", "-12345", "00099"], max_value=100) == [101, -101, 99]
