"""Identifier Parsing — tests for numeric coercion and path identifier rules."""

import pytest

from backoffice.core.identifiers import is_number, parse_identifier, to_number


@pytest.mark.parametrize("raw, expected", [
    ("1", 1),
    ("0", 0),
    ("42.0", 42),
    ("1.5", 1.5),
    (" 7 ", 7),
    ("1e2", 100),
])
def test_parse_identifier_accepts_non_negative_finite_numbers(raw, expected):
    assert parse_identifier(raw) == expected


@pytest.mark.parametrize("raw", [
    "abc", "-1", "Infinity", "-Infinity", "inf", "nan", "", "1abc",
])
def test_parse_identifier_rejects_malformed_values(raw):
    assert parse_identifier(raw) is None


def test_whole_identifiers_become_int():
    assert isinstance(parse_identifier("3.0"), int)


@pytest.mark.parametrize("value", [True, False, None, [], {}])
def test_to_number_rejects_non_numeric_types(value):
    assert to_number(value) is None


def test_to_number_accepts_numbers_and_numeric_strings():
    assert to_number(5) == 5
    assert to_number(2.5) == 2.5
    assert to_number("12") == 12
    assert is_number("3.25")
    assert not is_number(float("inf"))


def test_integers_beyond_store_range_become_float():
    assert to_number(2 ** 64) == float(2 ** 64)
    assert isinstance(to_number(2 ** 64), float)
    assert to_number(2 ** 63 - 1) == 2 ** 63 - 1


def test_integers_too_large_for_float_are_not_numbers():
    assert to_number(10 ** 400) is None
    assert not is_number(-(10 ** 400))


def test_oversized_identifier_stays_float():
    identifier = parse_identifier("99999999999999999999")
    assert identifier == 1e20
    assert isinstance(identifier, float)
