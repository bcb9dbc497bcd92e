"""Payload normalization for each attribute value variant.

Every normalizer takes the raw factory argument, validates its shape and
returns the immutable payload stored on the attribute value.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Tuple

from ..exceptions import FormatError
from .numerals import numeral_to_decimal, require_numeral

if TYPE_CHECKING:
    from ..attribute_value import AttributeValue

_BINARY_TYPES = (bytes, bytearray, memoryview)


def _require_not_null(variant: str, value: Any) -> None:
    if value is None:
        raise FormatError(f"{variant} payload must not be null")


def normalize_string(value: Any) -> str:
    _require_not_null("String", value)
    if not isinstance(value, str):
        raise FormatError.invalid_payload("String", value, "str")
    return value


def normalize_number(value: Any) -> str:
    _require_not_null("Number", value)
    if not isinstance(value, str):
        raise FormatError.invalid_payload("Number", value, "numeral text")
    return require_numeral(value)


def normalize_boolean(value: Any) -> bool:
    _require_not_null("Boolean", value)
    if not isinstance(value, bool):
        raise FormatError.invalid_payload("Boolean", value, "bool")
    return value


def normalize_null(value: Any) -> None:
    if value is not None:
        raise FormatError.invalid_payload("Null", value, "None")
    return None


def normalize_binary(value: Any) -> bytes:
    _require_not_null("Binary", value)
    if not isinstance(value, _BINARY_TYPES):
        raise FormatError.invalid_payload("Binary", value, "bytes")
    return bytes(value)


def _normalize_set(
    variant: str,
    values: Any,
    element: Callable[[Any], Any],
    identity: Callable[[Any], Hashable],
) -> Tuple[Any, ...]:
    _require_not_null(variant, values)
    if isinstance(values, (str, *_BINARY_TYPES, Mapping)) or not isinstance(values, Iterable):
        raise FormatError.invalid_payload(variant, values, "an iterable of elements")
    members = tuple(element(item) for item in values)
    if not members:
        raise FormatError(f"{variant} payload must not be empty")
    seen = set()
    for member in members:
        key = identity(member)
        if key in seen:
            raise FormatError(f"{variant} payload contains duplicate element {member!r}", value=member)
        seen.add(key)
    return members


def normalize_string_set(values: Any) -> Tuple[str, ...]:
    return _normalize_set("String-Set", values, normalize_string, lambda member: member)


def normalize_number_set(values: Any) -> Tuple[str, ...]:
    return _normalize_set("Number-Set", values, normalize_number, numeral_to_decimal)


def normalize_binary_set(values: Any) -> Tuple[bytes, ...]:
    return _normalize_set("Binary-Set", values, normalize_binary, lambda member: member)


def _require_attribute_value(variant: str, item: Any) -> "AttributeValue":
    from ..attribute_value import AttributeValue

    if not isinstance(item, AttributeValue):
        raise FormatError.invalid_payload(variant, item, "AttributeValue elements")
    return item


def normalize_list(values: Any) -> Tuple["AttributeValue", ...]:
    _require_not_null("List", values)
    if isinstance(values, (str, *_BINARY_TYPES, Mapping)) or not isinstance(values, Iterable):
        raise FormatError.invalid_payload("List", values, "a sequence of AttributeValue")
    return tuple(_require_attribute_value("List", item) for item in values)


def normalize_map(values: Any) -> Mapping[str, "AttributeValue"]:
    _require_not_null("Map", values)
    if not isinstance(values, Mapping):
        raise FormatError.invalid_payload("Map", values, "a mapping of str to AttributeValue")
    entries = {}
    for key, item in values.items():
        if not isinstance(key, str):
            raise FormatError(f"Map keys must be str (received {type(key).__name__}: {key!r})", value=key)
        entries[key] = _require_attribute_value("Map", item)
    return MappingProxyType(entries)


__all__ = [
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
]
