"""Attribute converter contract.

An attribute converter translates one domain type to and from
``AttributeValue``. Implementations are stateless after construction and may
be shared freely between threads.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from .attribute_value import AttributeValue
from .context import ConversionContext

T = TypeVar("T")


class AttributeConverter(ABC, Generic[T]):
    """
    Bidirectional translator between a domain type and ``AttributeValue``.

    Contract:
    - ``to_attribute_value`` accepts every valid domain value and raises
      ``ValidationError`` for values the store cannot represent.
    - ``from_attribute_value`` may accept several variants but applies the same
      validation before returning, so a rejected value cannot come back in.
    - ``from_attribute_value(to_attribute_value(v)) == v`` for every valid ``v``.
    """

    __slots__ = ()

    @abstractmethod
    def type(self) -> Any:
        """Return the domain type token served by this converter."""

    @abstractmethod
    def to_attribute_value(self, value: T, context: Optional[ConversionContext] = None) -> AttributeValue:
        """Convert a domain value into an attribute value."""

    @abstractmethod
    def from_attribute_value(self, attribute_value: AttributeValue, context: Optional[ConversionContext] = None) -> T:
        """Convert an attribute value into a domain value."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type={self.type()!r})"


__all__ = ["AttributeConverter"]
