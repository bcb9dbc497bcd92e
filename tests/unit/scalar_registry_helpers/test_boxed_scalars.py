"""Tests for the numpy scalar converters."""

import numpy as np
import pytest

from attrconv.exceptions import ValidationError
from attrconv.scalar_registry_helpers import boxed_converters, standard_converters
from attrconv.scalar_registry_helpers.boxed import float64_to_float, float_to_float64, int64_to_int, int_to_int64


def test_int64_round_trip():
    boxed = int_to_int64(2**62)
    assert isinstance(boxed, np.int64)
    assert int64_to_int(boxed) == 2**62


def test_int64_overflow():
    with pytest.raises(ValidationError, match="64-bit"):
        int_to_int64(2**63)


def test_float64_round_trip():
    assert float64_to_float(float_to_float64(0.25)) == 0.25
    assert type(float64_to_float(np.float64(0.25))) is float


def test_tables():
    assert [(c.source_type, c.target_type) for c in boxed_converters()] == [(int, np.int64), (float, np.float64)]
    assert len(standard_converters()) == 12
