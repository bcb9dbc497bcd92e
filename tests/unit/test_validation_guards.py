"""Tests for the validation guard helpers."""

import sys
from datetime import datetime, timezone

import numpy as np
import pytest

from attrconv.context import ConversionContext
from attrconv.exceptions import ValidationError
from attrconv.validation_guards import (
    require,
    require_aware,
    validate_finite,
    validate_range,
    validate_whole_number,
)


def test_require_passes():
    require(True, RuntimeError("fail"))


def test_require_fails():
    with pytest.raises(ValueError):
        require(False, ValueError("bad"))


@pytest.mark.parametrize("value", [0, -3, 1.5, sys.float_info.max, -sys.float_info.max, np.float64(2.5), np.int32(4)])
def test_validate_finite_accepts(value):
    assert validate_finite(value) == float(value)


def test_validate_finite_returns_python_float():
    assert type(validate_finite(np.float32(1.5))) is float


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), np.nan, np.float64("inf")])
def test_validate_finite_rejects_non_finite(value):
    with pytest.raises(ValidationError):
        validate_finite(value)


@pytest.mark.parametrize("value", [True, "1.0", None, 1 + 2j])
def test_validate_finite_rejects_non_real(value):
    with pytest.raises(ValidationError):
        validate_finite(value)


def test_validate_finite_rejects_huge_integer():
    with pytest.raises(ValidationError, match="double-precision"):
        validate_finite(10**400)


def test_validate_finite_reports_context():
    context = ConversionContext.for_attribute("price")
    with pytest.raises(ValidationError) as excinfo:
        validate_finite(float("nan"), context=context)
    assert excinfo.value.context == "price"
    assert "(at price)" in str(excinfo.value)
    assert "NaN" in excinfo.value.constraint


def test_validate_whole_number_accepts_numpy():
    assert validate_whole_number(np.int64(12)) == 12


@pytest.mark.parametrize("value", [False, 1.0, "1", None])
def test_validate_whole_number_rejects(value):
    with pytest.raises(ValidationError):
        validate_whole_number(value)


def test_validate_range_inclusive_bounds():
    validate_range(5, minimum=5, maximum=5)
    validate_range(5)


def test_validate_range_below_minimum():
    with pytest.raises(ValidationError, match=">= 0"):
        validate_range(-1, minimum=0)


def test_validate_range_above_maximum():
    with pytest.raises(ValidationError, match="<= 10"):
        validate_range(11, maximum=10)


def test_require_aware_accepts_aware():
    value = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert require_aware(value) is value


def test_require_aware_rejects_naive():
    with pytest.raises(ValidationError, match="timezone-aware"):
        require_aware(datetime(2024, 1, 1))


def test_require_aware_rejects_non_datetime():
    with pytest.raises(ValidationError):
        require_aware("2024-01-01")
