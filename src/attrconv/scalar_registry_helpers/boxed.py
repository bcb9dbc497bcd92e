"""Built-in converters between Python numbers and numpy scalar types."""

from __future__ import annotations

from typing import List

import numpy as np

from ..exceptions import ValidationError
from ..scalar_registry import ScalarConverter

_INT64_INFO = np.iinfo(np.int64)


def int_to_int64(value: int) -> np.int64:
    if not _INT64_INFO.min <= value <= _INT64_INFO.max:
        raise ValidationError(value=value, constraint="must fit in a signed 64-bit integer")
    return np.int64(value)


def int64_to_int(value: np.int64) -> int:
    return int(value)


def float_to_float64(value: float) -> np.float64:
    return np.float64(value)


def float64_to_float(value: np.float64) -> float:
    return float(value)


def boxed_converters() -> List[ScalarConverter]:
    return [
        ScalarConverter(int, np.int64, int_to_int64, int64_to_int),
        ScalarConverter(float, np.float64, float_to_float64, float64_to_float),
    ]


__all__ = ["boxed_converters", "float64_to_float", "float_to_float64", "int64_to_int", "int_to_int64"]
