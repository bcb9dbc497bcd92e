"""Built-in converters between text and scalar types.

Number text follows the store's numeral syntax, so ``"NaN"``, ``"inf"`` and
``"1_000"`` are rejected even though Python's own parsers would accept them.
"""

from __future__ import annotations

from datetime import tzinfo
from decimal import Decimal
from typing import List

import pytz

from ..attribute_value_helpers import numeral_to_decimal
from ..exceptions import FormatError, ValidationError
from ..scalar_registry import ScalarConverter
from ..time_helpers.timezone import resolve_timezone, timezone_name

_TRUE_TEXT = "true"
_FALSE_TEXT = "false"


def text_to_float(text: str) -> float:
    """Parse numeral text; magnitudes beyond the float range become infinities for callers to reject."""
    numeral_to_decimal(text)
    return float(text)


def float_to_text(value: float) -> str:
    """Shortest text that parses back to the same float."""
    return repr(float(value))


def text_to_int(text: str) -> int:
    """Parse numeral text holding a whole number (``"7"``, ``"7.0"``, ``"7e2"``)."""
    parsed = numeral_to_decimal(text)
    if parsed != parsed.to_integral_value():
        raise ValidationError(value=text, constraint="must be a whole number")
    return int(parsed)


def int_to_text(value: int) -> str:
    return str(int(value))


def text_to_decimal(text: str) -> Decimal:
    return numeral_to_decimal(text)


def decimal_to_text(value: Decimal) -> str:
    if not value.is_finite():
        raise ValidationError(value=value, constraint="must be a finite decimal")
    return str(value)


def text_to_bool(text: str) -> bool:
    lowered = text.strip().lower()
    if lowered == _TRUE_TEXT:
        return True
    if lowered == _FALSE_TEXT:
        return False
    raise FormatError(f"Invalid boolean text: {text!r}", value=text)


def bool_to_text(value: bool) -> str:
    return _TRUE_TEXT if value else _FALSE_TEXT


def text_to_timezone(text: str) -> tzinfo:
    try:
        return resolve_timezone(text)
    except pytz.UnknownTimeZoneError as exc:
        raise FormatError(f"Unknown time zone identifier: {text!r}", value=text) from exc


def textual_converters() -> List[ScalarConverter]:
    return [
        ScalarConverter(str, int, text_to_int, int_to_text),
        ScalarConverter(str, float, text_to_float, float_to_text),
        ScalarConverter(str, Decimal, text_to_decimal, decimal_to_text),
        ScalarConverter(str, bool, text_to_bool, bool_to_text),
        ScalarConverter(str, tzinfo, text_to_timezone, timezone_name),
    ]


__all__ = [
    "bool_to_text",
    "decimal_to_text",
    "float_to_text",
    "int_to_text",
    "text_to_bool",
    "text_to_decimal",
    "text_to_float",
    "text_to_int",
    "text_to_timezone",
    "textual_converters",
]
