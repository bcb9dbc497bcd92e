"""
Type-dispatch visitor for attribute values.

A converter that accepts several wire encodings subclasses
``TypeConvertingVisitor`` and overrides only the variants it accepts. Every
method it leaves alone raises ``UnsupportedConversionError`` naming the source
variant and the target type, so an unexpected encoding is never coerced
silently.
"""

from __future__ import annotations

from typing import Any, Generic, Mapping, Optional, Tuple, TypeVar

from .attribute_value import AttributeValue, AttributeValueType
from .context import ConversionContext, resolve_context
from .exceptions import UnsupportedConversionError

T = TypeVar("T")


class TypeConvertingVisitor(Generic[T]):
    """
    Convert any attribute value variant into ``target_type``.

    Args:
        target_type: Domain type produced by this visitor (used in error messages)
        converter_type: Converter class that owns the visitor, if any
        context: Conversion context reported in error messages
    """

    def __init__(
        self,
        target_type: Any,
        converter_type: Optional[type] = None,
        context: Optional[ConversionContext] = None,
    ) -> None:
        self.target_type = target_type
        self.converter_type = converter_type
        self.context = resolve_context(context)

    def visit(self, attribute_value: AttributeValue) -> T:
        return attribute_value.convert(self)

    def default_convert(self, source_type: AttributeValueType, value: Any) -> T:
        """Fallback for every variant the subclass does not accept."""
        raise UnsupportedConversionError.for_variant(
            source_type.label,
            self.target_type,
            converter=self.converter_type,
            context=self.context.describe(),
        )

    def convert_string(self, value: str) -> T:
        return self.default_convert(AttributeValueType.S, value)

    def convert_number(self, value: str) -> T:
        return self.default_convert(AttributeValueType.N, value)

    def convert_boolean(self, value: bool) -> T:
        return self.default_convert(AttributeValueType.BOOL, value)

    def convert_null(self) -> T:
        return self.default_convert(AttributeValueType.NULL, None)

    def convert_bytes(self, value: bytes) -> T:
        return self.default_convert(AttributeValueType.B, value)

    def convert_set_of_strings(self, value: Tuple[str, ...]) -> T:
        return self.default_convert(AttributeValueType.SS, value)

    def convert_set_of_numbers(self, value: Tuple[str, ...]) -> T:
        return self.default_convert(AttributeValueType.NS, value)

    def convert_set_of_bytes(self, value: Tuple[bytes, ...]) -> T:
        return self.default_convert(AttributeValueType.BS, value)

    def convert_list(self, value: Tuple[AttributeValue, ...]) -> T:
        return self.default_convert(AttributeValueType.L, value)

    def convert_map(self, value: Mapping[str, AttributeValue]) -> T:
        return self.default_convert(AttributeValueType.M, value)


__all__ = ["TypeConvertingVisitor"]
