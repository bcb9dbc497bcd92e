"""
Converters for lists and string-keyed maps of another converter's type.

Each element is converted by the wrapped converter with a child context
(the list index or map key), so errors name the exact nested position.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

from ..attribute_value import AttributeValue
from ..context import ConversionContext, resolve_context
from ..converter import AttributeConverter
from ..exceptions import ValidationError
from ..visitor import TypeConvertingVisitor

T = TypeVar("T")


class ListAttributeConverter(AttributeConverter[List[T]], Generic[T]):
    """Stores sequences as List attributes, converting each element with ``element_converter``."""

    __slots__ = ("_element_converter",)

    def __init__(self, element_converter: AttributeConverter[T]) -> None:
        self._element_converter = element_converter

    @classmethod
    def create(cls, element_converter: AttributeConverter[T]) -> "ListAttributeConverter[T]":
        return cls(element_converter)

    @property
    def element_converter(self) -> AttributeConverter[T]:
        return self._element_converter

    def type(self) -> Any:
        return list[self._element_converter.type()]  # type: ignore[misc]

    def to_attribute_value(self, value: List[T], context: Optional[ConversionContext] = None) -> AttributeValue:
        context = resolve_context(context)
        if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
            raise ValidationError(value=value, constraint="must be a sequence", context=context.describe())
        return AttributeValue.from_list(
            self._element_converter.to_attribute_value(item, context.child(index)) for index, item in enumerate(value)
        )

    def from_attribute_value(
        self, attribute_value: AttributeValue, context: Optional[ConversionContext] = None
    ) -> List[T]:
        context = resolve_context(context)
        return attribute_value.convert(_ListVisitor(self, context))


class _ListVisitor(TypeConvertingVisitor[List[T]]):
    def __init__(self, owner: ListAttributeConverter[T], context: ConversionContext) -> None:
        super().__init__(owner.type(), ListAttributeConverter, context)
        self._element_converter = owner.element_converter

    def convert_list(self, value: Tuple[AttributeValue, ...]) -> List[T]:
        return [
            self._element_converter.from_attribute_value(item, self.context.child(index))
            for index, item in enumerate(value)
        ]


class MapAttributeConverter(AttributeConverter[Dict[str, T]], Generic[T]):
    """Stores string-keyed mappings as Map attributes, converting each value with ``value_converter``."""

    __slots__ = ("_value_converter",)

    def __init__(self, value_converter: AttributeConverter[T]) -> None:
        self._value_converter = value_converter

    @classmethod
    def create(cls, value_converter: AttributeConverter[T]) -> "MapAttributeConverter[T]":
        return cls(value_converter)

    @property
    def value_converter(self) -> AttributeConverter[T]:
        return self._value_converter

    def type(self) -> Any:
        return dict[str, self._value_converter.type()]  # type: ignore[misc]

    def to_attribute_value(self, value: Dict[str, T], context: Optional[ConversionContext] = None) -> AttributeValue:
        context = resolve_context(context)
        if not isinstance(value, Mapping):
            raise ValidationError(value=value, constraint="must be a mapping", context=context.describe())
        entries: Dict[str, AttributeValue] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise ValidationError(value=key, constraint="map keys must be str", context=context.describe())
            entries[key] = self._value_converter.to_attribute_value(item, context.child(key))
        return AttributeValue.from_map(entries)

    def from_attribute_value(
        self, attribute_value: AttributeValue, context: Optional[ConversionContext] = None
    ) -> Dict[str, T]:
        context = resolve_context(context)
        return attribute_value.convert(_MapVisitor(self, context))


class _MapVisitor(TypeConvertingVisitor[Dict[str, T]]):
    def __init__(self, owner: MapAttributeConverter[T], context: ConversionContext) -> None:
        super().__init__(owner.type(), MapAttributeConverter, context)
        self._value_converter = owner.value_converter

    def convert_map(self, value: Mapping[str, AttributeValue]) -> Dict[str, T]:
        return {
            key: self._value_converter.from_attribute_value(item, self.context.child(key)) for key, item in value.items()
        }


__all__ = ["ListAttributeConverter", "MapAttributeConverter"]
