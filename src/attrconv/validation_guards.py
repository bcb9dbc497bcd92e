"""
Validation guard helpers applied at conversion boundaries.

Each helper focuses on a single check so converters can apply the same
constraints on the way out (domain value to attribute value) and on the way
back in, keeping rejected values from re-entering through decoding.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

import numpy as np

from .context import ConversionContext
from .exceptions import ValidationError


def _where(context: Optional[ConversionContext]) -> str:
    return context.describe() if context is not None else ""


def require(condition: bool, error: Exception) -> None:
    """Raise the provided exception when the condition fails."""
    if not condition:
        raise error


def validate_finite(value: Any, *, context: Optional[ConversionContext] = None) -> float:
    """
    Ensure a value is a finite real number and return it as ``float``.

    Args:
        value: Candidate value (``int``, ``float`` or a numpy scalar)
        context: Conversion context used in error messages

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If the value is a bool, not real, NaN, infinite, or
            an integer too large for a float
    """
    where = _where(context)
    require(
        not isinstance(value, (bool, np.bool_)) and isinstance(value, (int, float, np.integer, np.floating)),
        ValidationError(value=value, constraint="must be a real number", context=where),
    )
    try:
        numeric = float(value)
    except OverflowError as exc:
        raise ValidationError(value=value, constraint="must fit in a double-precision float", context=where) from exc

    require(not np.isnan(numeric), ValidationError(value=value, constraint="NaN is not representable", context=where))
    require(
        not np.isinf(numeric),
        ValidationError(value=value, constraint="infinite values are not representable", context=where),
    )
    return numeric


def validate_whole_number(value: Any, *, context: Optional[ConversionContext] = None) -> int:
    """Ensure a value is an integer (numpy integers included) and return it as ``int``."""
    require(
        not isinstance(value, (bool, np.bool_)) and isinstance(value, (int, np.integer)),
        ValidationError(value=value, constraint="must be a whole number", context=_where(context)),
    )
    return int(value)


def validate_range(
    value: Any,
    *,
    minimum: Optional[Any] = None,
    maximum: Optional[Any] = None,
    context: Optional[ConversionContext] = None,
) -> None:
    """Ensure a value lies within the inclusive ``[minimum, maximum]`` bounds."""
    where = _where(context)
    if minimum is not None:
        require(value >= minimum, ValidationError(value=value, constraint=f"must be >= {minimum}", context=where))
    if maximum is not None:
        require(value <= maximum, ValidationError(value=value, constraint=f"must be <= {maximum}", context=where))


def require_aware(value: Any, *, context: Optional[ConversionContext] = None) -> datetime:
    """Ensure a value is a timezone-aware datetime."""
    where = _where(context)
    require(isinstance(value, datetime), ValidationError(value=value, constraint="must be a datetime", context=where))
    require(
        value.tzinfo is not None and value.utcoffset() is not None,
        ValidationError(value=value, constraint="must be timezone-aware", context=where),
    )
    return value


__all__ = [
    "require",
    "require_aware",
    "validate_finite",
    "validate_range",
    "validate_whole_number",
]
