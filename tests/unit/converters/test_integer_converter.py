"""Tests for the integer attribute converter."""

import numpy as np
import pytest

from attrconv import (
    AttributeValue,
    ConfigurationError,
    FormatError,
    IntegerAttributeConverter,
    UnsupportedConversionError,
    ValidationError,
)
from attrconv.converters import INT32_MAX, INT32_MIN, INT64_MAX


def test_whole_number_example(integer_converter):
    stored = integer_converter.to_attribute_value(7)
    assert stored == AttributeValue.from_number("7")
    assert stored.value == "7"
    assert integer_converter.from_attribute_value(stored) == 7


@pytest.mark.parametrize("value", [0, -1, 2**100, -(2**100)])
def test_round_trip_keeps_precision(integer_converter, value):
    assert integer_converter.from_attribute_value(integer_converter.to_attribute_value(value)) == value


def test_numpy_integer_is_accepted(integer_converter):
    assert integer_converter.to_attribute_value(np.int64(9)).value == "9"


@pytest.mark.parametrize("value", [True, 1.0, "1", None])
def test_non_integers_rejected(integer_converter, value):
    with pytest.raises(ValidationError):
        integer_converter.to_attribute_value(value)


@pytest.mark.parametrize("text", ["7.0", "7e0", "0.7e1"])
def test_integral_text_is_accepted(integer_converter, text):
    assert integer_converter.from_attribute_value(AttributeValue.from_number(text)) == 7


def test_string_variant_is_accepted(integer_converter):
    assert integer_converter.from_attribute_value(AttributeValue.from_string("-15")) == -15


def test_fractional_number_rejected(integer_converter):
    with pytest.raises(ValidationError):
        integer_converter.from_attribute_value(AttributeValue.from_number("7.5"))


def test_malformed_string_rejected(integer_converter):
    with pytest.raises(FormatError):
        integer_converter.from_attribute_value(AttributeValue.from_string("seven"))


def test_boolean_variant_rejected(integer_converter):
    with pytest.raises(UnsupportedConversionError):
        integer_converter.from_attribute_value(AttributeValue.from_boolean(False))


class TestBounds:
    def test_int32_bounds_on_write(self):
        converter = IntegerAttributeConverter.int32()
        assert converter.to_attribute_value(INT32_MAX).value == str(INT32_MAX)
        assert converter.to_attribute_value(INT32_MIN).value == str(INT32_MIN)
        with pytest.raises(ValidationError):
            converter.to_attribute_value(INT32_MAX + 1)

    def test_bounds_apply_on_read(self):
        converter = IntegerAttributeConverter.int64()
        with pytest.raises(ValidationError, match="must be <="):
            converter.from_attribute_value(AttributeValue.from_number(str(INT64_MAX + 1)))

    def test_custom_bounds(self):
        converter = IntegerAttributeConverter(minimum=0, maximum=10)
        assert (converter.minimum, converter.maximum) == (0, 10)
        with pytest.raises(ValidationError):
            converter.to_attribute_value(-1)

    def test_inverted_bounds_rejected(self):
        with pytest.raises(ConfigurationError):
            IntegerAttributeConverter(minimum=5, maximum=1)

    def test_unbounded_by_default(self, integer_converter):
        assert integer_converter.minimum is None
        assert integer_converter.maximum is None
