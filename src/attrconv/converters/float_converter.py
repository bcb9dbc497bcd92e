"""
Converter between ``float`` and attribute values.

Floats are stored as Number attributes using the shortest text that parses
back to the same double, so every finite float round-trips exactly, including
``sys.float_info.max``. NaN and infinities have no Number representation and
are rejected in both directions.

For whole numbers prefer ``IntegerAttributeConverter``, which keeps perfect
precision at any magnitude.
"""

from __future__ import annotations

from typing import Optional

from ..attribute_value import AttributeValue
from ..context import ConversionContext, resolve_context
from ..converter import AttributeConverter
from ..scalar_registry import ScalarConverter, standard_registry
from ..validation_guards import validate_finite
from ..visitor import TypeConvertingVisitor


class FloatAttributeConverter(AttributeConverter[float]):
    """Stores ``float`` values as Numbers; reads them from Number or String attributes."""

    __slots__ = ("_text",)

    def __init__(self) -> None:
        self._text: ScalarConverter[str, float] = standard_registry().get_converter(str, float)

    @classmethod
    def create(cls) -> "FloatAttributeConverter":
        return cls()

    def type(self) -> type:
        return float

    def to_attribute_value(self, value: float, context: Optional[ConversionContext] = None) -> AttributeValue:
        numeric = validate_finite(value, context=context)
        return AttributeValue.from_number(self._text.unconvert(numeric))

    def from_attribute_value(
        self, attribute_value: AttributeValue, context: Optional[ConversionContext] = None
    ) -> float:
        context = resolve_context(context)
        result = attribute_value.convert(_FloatVisitor(self._text, context))
        return validate_finite(result, context=context)


class _FloatVisitor(TypeConvertingVisitor[float]):
    def __init__(self, text: ScalarConverter[str, float], context: ConversionContext) -> None:
        super().__init__(float, FloatAttributeConverter, context)
        self._text = text

    def convert_string(self, value: str) -> float:
        return self._text.convert(value)

    def convert_number(self, value: str) -> float:
        return self._text.convert(value)


__all__ = ["FloatAttributeConverter"]
