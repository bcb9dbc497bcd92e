"""Tests for the built-in text scalar converters."""

import sys
from decimal import Decimal

import pytest

from attrconv.exceptions import FormatError, ValidationError
from attrconv.scalar_registry_helpers.textual import (
    bool_to_text,
    decimal_to_text,
    float_to_text,
    int_to_text,
    text_to_bool,
    text_to_decimal,
    text_to_float,
    text_to_int,
    text_to_timezone,
)
from attrconv.time_helpers import timezone_name


@pytest.mark.parametrize("text, expected", [("7", 7), ("-12", -12), ("7.0", 7), ("7e2", 700), ("12345678901234567890", 12345678901234567890)])
def test_text_to_int(text, expected):
    assert text_to_int(text) == expected


def test_text_to_int_rejects_fraction():
    with pytest.raises(ValidationError, match="whole number"):
        text_to_int("7.5")


@pytest.mark.parametrize("text", ["seven", "NaN", "1_0", ""])
def test_text_to_int_rejects_non_numerals(text):
    with pytest.raises(FormatError):
        text_to_int(text)


def test_int_to_text():
    assert int_to_text(-42) == "-42"


def test_float_text_round_trip_at_limits():
    for value in (0.1, -2.5, sys.float_info.max, sys.float_info.min, 5e-324):
        assert text_to_float(float_to_text(value)) == value


def test_text_to_float_overflow_becomes_infinity():
    assert text_to_float("1e400") == float("inf")


@pytest.mark.parametrize("text", ["inf", "nan", "Infinity", "0x1p3"])
def test_text_to_float_rejects_python_specials(text):
    with pytest.raises(FormatError):
        text_to_float(text)


def test_decimal_round_trip():
    assert text_to_decimal("1.50") == Decimal("1.50")
    assert decimal_to_text(Decimal("1.50")) == "1.50"


def test_decimal_rejects_non_finite():
    with pytest.raises(ValidationError):
        decimal_to_text(Decimal("NaN"))


def test_bool_text():
    assert text_to_bool(" TRUE ") is True
    assert text_to_bool("false") is False
    assert bool_to_text(False) == "false"
    with pytest.raises(FormatError):
        text_to_bool("yes")


def test_timezone_text():
    assert timezone_name(text_to_timezone("Europe/Paris")) == "Europe/Paris"
    with pytest.raises(FormatError):
        text_to_timezone("Mars/Olympus")
