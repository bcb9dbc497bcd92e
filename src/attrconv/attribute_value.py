"""
Wire-level attribute value union.

An ``AttributeValue`` holds exactly one of the variants the key-value store can
represent. Values are immutable once constructed and are only created through
the ``from_*`` factories (direct construction runs the same validation).

Equality policy:
- Variants never compare equal across types (String "1" != Number "1").
- Numbers compare numerically: Number "1", "1.0" and "1e0" are equal and hash
  alike, while each keeps its original text as the payload.
- Sets compare as unordered collections, lists in order, maps by entries.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Dict, Hashable, Iterable, Mapping, Tuple, TypeVar

from .attribute_value_helpers import (
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
    numeral_to_decimal,
)
from .exceptions import FormatError

if TYPE_CHECKING:
    from .visitor import TypeConvertingVisitor

T = TypeVar("T")


class AttributeValueType(str, Enum):
    """Variant tags, valued with the store's wire names."""

    S = "S"
    N = "N"
    BOOL = "BOOL"
    NULL = "NULL"
    B = "B"
    SS = "SS"
    NS = "NS"
    BS = "BS"
    L = "L"
    M = "M"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    AttributeValueType.S: "String",
    AttributeValueType.N: "Number",
    AttributeValueType.BOOL: "Boolean",
    AttributeValueType.NULL: "Null",
    AttributeValueType.B: "Binary",
    AttributeValueType.SS: "String-Set",
    AttributeValueType.NS: "Number-Set",
    AttributeValueType.BS: "Binary-Set",
    AttributeValueType.L: "List",
    AttributeValueType.M: "Map",
}

_NORMALIZERS: Dict[AttributeValueType, Callable[[Any], Any]] = {
    AttributeValueType.S: normalize_string,
    AttributeValueType.N: normalize_number,
    AttributeValueType.BOOL: normalize_boolean,
    AttributeValueType.NULL: normalize_null,
    AttributeValueType.B: normalize_binary,
    AttributeValueType.SS: normalize_string_set,
    AttributeValueType.NS: normalize_number_set,
    AttributeValueType.BS: normalize_binary_set,
    AttributeValueType.L: normalize_list,
    AttributeValueType.M: normalize_map,
}


@dataclass(frozen=True, eq=False)
class AttributeValue:
    """A single attribute value as stored in the key-value store."""

    type: AttributeValueType
    value: Any = None

    def __post_init__(self) -> None:
        try:
            variant = AttributeValueType(self.type)
        except ValueError as exc:
            raise FormatError(f"Unknown attribute value type: {self.type!r}") from exc
        object.__setattr__(self, "type", variant)
        object.__setattr__(self, "value", _NORMALIZERS[variant](self.value))

    @classmethod
    def from_string(cls, value: str) -> "AttributeValue":
        return cls(AttributeValueType.S, value)

    @classmethod
    def from_number(cls, value: str) -> "AttributeValue":
        """Create a Number from base-10 numeral text such as ``"42"`` or ``"-1.5e3"``."""
        return cls(AttributeValueType.N, value)

    @classmethod
    def from_boolean(cls, value: bool) -> "AttributeValue":
        return cls(AttributeValueType.BOOL, value)

    @classmethod
    def from_null(cls) -> "AttributeValue":
        return cls(AttributeValueType.NULL, None)

    @classmethod
    def from_binary(cls, value: bytes) -> "AttributeValue":
        return cls(AttributeValueType.B, value)

    @classmethod
    def from_list(cls, values: Iterable["AttributeValue"]) -> "AttributeValue":
        return cls(AttributeValueType.L, values)

    @classmethod
    def from_map(cls, values: Mapping[str, "AttributeValue"]) -> "AttributeValue":
        return cls(AttributeValueType.M, values)

    @classmethod
    def from_string_set(cls, values: Iterable[str]) -> "AttributeValue":
        return cls(AttributeValueType.SS, values)

    @classmethod
    def from_number_set(cls, values: Iterable[str]) -> "AttributeValue":
        return cls(AttributeValueType.NS, values)

    @classmethod
    def from_binary_set(cls, values: Iterable[bytes]) -> "AttributeValue":
        return cls(AttributeValueType.BS, values)

    def is_null(self) -> bool:
        return self.type is AttributeValueType.NULL

    def convert(self, visitor: "TypeConvertingVisitor[T]") -> T:
        """Dispatch to the visitor method matching the active variant."""
        match self.type:
            case AttributeValueType.S:
                return visitor.convert_string(self.value)
            case AttributeValueType.N:
                return visitor.convert_number(self.value)
            case AttributeValueType.BOOL:
                return visitor.convert_boolean(self.value)
            case AttributeValueType.NULL:
                return visitor.convert_null()
            case AttributeValueType.B:
                return visitor.convert_bytes(self.value)
            case AttributeValueType.SS:
                return visitor.convert_set_of_strings(self.value)
            case AttributeValueType.NS:
                return visitor.convert_set_of_numbers(self.value)
            case AttributeValueType.BS:
                return visitor.convert_set_of_bytes(self.value)
            case AttributeValueType.L:
                return visitor.convert_list(self.value)
            case AttributeValueType.M:
                return visitor.convert_map(self.value)
            case _:  # pragma: no cover - enum is exhaustive
                return visitor.default_convert(self.type, self.value)

    def _equality_key(self) -> Hashable:
        match self.type:
            case AttributeValueType.N:
                return numeral_to_decimal(self.value)
            case AttributeValueType.NS:
                return frozenset(numeral_to_decimal(member) for member in self.value)
            case AttributeValueType.SS | AttributeValueType.BS:
                return frozenset(self.value)
            case AttributeValueType.M:
                return frozenset(self.value.items())
            case _:
                return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeValue):
            return NotImplemented
        return self.type is other.type and self._equality_key() == other._equality_key()

    def __hash__(self) -> int:
        return hash((self.type, self._equality_key()))

    def __repr__(self) -> str:
        payload: Any = self.value
        if self.type is AttributeValueType.M:
            payload = dict(self.value)
        elif self.type in (AttributeValueType.L, AttributeValueType.SS, AttributeValueType.NS, AttributeValueType.BS):
            payload = list(self.value)
        return f"AttributeValue({self.type.value}={payload!r})"


__all__ = ["AttributeValue", "AttributeValueType"]
