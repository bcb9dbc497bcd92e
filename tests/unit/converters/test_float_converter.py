"""Tests for the float attribute converter."""

import sys

import numpy as np
import pytest

from attrconv import (
    AttributeValue,
    ConversionContext,
    FloatAttributeConverter,
    FormatError,
    UnsupportedConversionError,
    ValidationError,
)


def test_type_token(float_converter):
    assert float_converter.type() is float
    assert repr(float_converter) == "FloatAttributeConverter(type=<class 'float'>)"


@pytest.mark.parametrize("value", [0.0, -0.0, 1.5, -273.15, 0.1, 1e16, sys.float_info.max, -sys.float_info.max, 5e-324])
def test_round_trip(float_converter, value):
    stored = float_converter.to_attribute_value(value)
    assert stored.type.value == "N"
    assert float_converter.from_attribute_value(stored) == value


def test_max_float_is_stored_exactly(float_converter):
    assert float_converter.to_attribute_value(sys.float_info.max) == AttributeValue.from_number("1.7976931348623157e+308")


def test_ints_and_numpy_values_are_accepted(float_converter):
    assert float_converter.to_attribute_value(3).value == "3.0"
    assert float_converter.to_attribute_value(np.float64(2.5)).value == "2.5"


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_rejected_on_write(float_converter, value):
    with pytest.raises(ValidationError):
        float_converter.to_attribute_value(value)


@pytest.mark.parametrize("value", [None, "1.5", True])
def test_non_numbers_rejected_on_write(float_converter, value):
    with pytest.raises(ValidationError):
        float_converter.to_attribute_value(value)


def test_accepts_string_and_number_variants(float_converter):
    assert float_converter.from_attribute_value(AttributeValue.from_string("42")) == 42.0
    assert float_converter.from_attribute_value(AttributeValue.from_number("42")) == 42.0


def test_out_of_range_text_rejected_on_read(float_converter):
    with pytest.raises(ValidationError):
        float_converter.from_attribute_value(AttributeValue.from_number("1e400"))


def test_non_finite_string_rejected_on_read(float_converter):
    with pytest.raises(FormatError):
        float_converter.from_attribute_value(AttributeValue.from_string("NaN"))


def test_malformed_string_rejected_on_read(float_converter):
    with pytest.raises(FormatError):
        float_converter.from_attribute_value(AttributeValue.from_string("forty-two"))


@pytest.mark.parametrize(
    "value",
    [AttributeValue.from_boolean(True), AttributeValue.from_null(), AttributeValue.from_number_set(["1"])],
)
def test_other_variants_rejected(float_converter, value):
    with pytest.raises(UnsupportedConversionError, match="into float using FloatAttributeConverter"):
        float_converter.from_attribute_value(value)


def test_errors_carry_context(float_converter):
    context = ConversionContext.for_attribute("price")
    with pytest.raises(ValidationError, match=r"\(at price\)"):
        float_converter.to_attribute_value(float("nan"), context)
    with pytest.raises(UnsupportedConversionError, match=r"\(at price\)"):
        float_converter.from_attribute_value(AttributeValue.from_null(), context)
