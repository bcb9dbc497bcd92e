"""Attribute value payload helpers."""

from .numerals import NUMERAL_PATTERN, is_numeral, numeral_to_decimal, require_numeral
from .payloads import (
    normalize_binary,
    normalize_binary_set,
    normalize_boolean,
    normalize_list,
    normalize_map,
    normalize_null,
    normalize_number,
    normalize_number_set,
    normalize_string,
    normalize_string_set,
)

__all__ = [
    "NUMERAL_PATTERN",
    "is_numeral",
    "normalize_binary",
    "normalize_binary_set",
    "normalize_boolean",
    "normalize_list",
    "normalize_map",
    "normalize_null",
    "normalize_number",
    "normalize_number_set",
    "normalize_string",
    "normalize_string_set",
    "numeral_to_decimal",
    "require_numeral",
]
