"""Converter between whole numbers (``int``) and attribute values."""

from __future__ import annotations

from typing import Optional

from ..attribute_value import AttributeValue
from ..context import ConversionContext, resolve_context
from ..converter import AttributeConverter
from ..exceptions import ConfigurationError
from ..scalar_registry import ScalarConverter, standard_registry
from ..validation_guards import validate_range, validate_whole_number
from ..visitor import TypeConvertingVisitor

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class IntegerAttributeConverter(AttributeConverter[int]):
    """
    Stores whole numbers as Numbers with perfect precision.

    Number and String attributes are both accepted when reading. Integral text
    such as ``"7.0"`` or ``"7e2"`` is accepted and canonicalized; fractional
    text is rejected. Optional inclusive bounds apply in both directions.
    """

    __slots__ = ("_text", "_minimum", "_maximum")

    def __init__(self, minimum: Optional[int] = None, maximum: Optional[int] = None) -> None:
        if minimum is not None and maximum is not None and minimum > maximum:
            raise ConfigurationError.invalid_value(
                "maximum", maximum, f"Maximum must not be below minimum {minimum}"
            )
        self._text: ScalarConverter[str, int] = standard_registry().get_converter(str, int)
        self._minimum = minimum
        self._maximum = maximum

    @classmethod
    def create(cls) -> "IntegerAttributeConverter":
        return cls()

    @classmethod
    def int32(cls) -> "IntegerAttributeConverter":
        return cls(INT32_MIN, INT32_MAX)

    @classmethod
    def int64(cls) -> "IntegerAttributeConverter":
        return cls(INT64_MIN, INT64_MAX)

    @property
    def minimum(self) -> Optional[int]:
        return self._minimum

    @property
    def maximum(self) -> Optional[int]:
        return self._maximum

    def type(self) -> type:
        return int

    def _validate(self, value: object, context: Optional[ConversionContext]) -> int:
        whole = validate_whole_number(value, context=context)
        validate_range(whole, minimum=self._minimum, maximum=self._maximum, context=context)
        return whole

    def to_attribute_value(self, value: int, context: Optional[ConversionContext] = None) -> AttributeValue:
        whole = self._validate(value, context)
        return AttributeValue.from_number(self._text.unconvert(whole))

    def from_attribute_value(self, attribute_value: AttributeValue, context: Optional[ConversionContext] = None) -> int:
        context = resolve_context(context)
        result = attribute_value.convert(_IntegerVisitor(self._text, context))
        return self._validate(result, context)


class _IntegerVisitor(TypeConvertingVisitor[int]):
    def __init__(self, text: ScalarConverter[str, int], context: ConversionContext) -> None:
        super().__init__(int, IntegerAttributeConverter, context)
        self._text = text

    def convert_string(self, value: str) -> int:
        return self._text.convert(value)

    def convert_number(self, value: str) -> int:
        return self._text.convert(value)


__all__ = ["INT32_MAX", "INT32_MIN", "INT64_MAX", "INT64_MIN", "IntegerAttributeConverter"]
