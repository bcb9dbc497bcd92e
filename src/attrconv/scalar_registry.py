"""
Scalar converter registry.

Composed attribute converters need a conversion between a well-known
intermediate type (for example an aware ``datetime``) and whatever domain type
a field declares. The registry answers ``get_converter(source, target)`` from a
table of registered ``ScalarConverter`` pairs, reversing or chaining entries
when no direct pair exists.

The registry is immutable: ``with_converter`` returns a new registry, and the
standard registry is built once and cached.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Callable, Dict, Generic, Iterable, List, Mapping, Optional, Tuple, TypeVar

from .exceptions import UnsupportedTypeError

logger = logging.getLogger(__name__)

S = TypeVar("S")
T = TypeVar("T")
U = TypeVar("U")


def _identity(value: Any) -> Any:
    return value


def _type_name(candidate: Any) -> str:
    return getattr(candidate, "__qualname__", repr(candidate))


@dataclass(frozen=True)
class ScalarConverter(Generic[S, T]):
    """A pair of functions converting ``source_type`` to ``target_type`` and back."""

    source_type: Any
    target_type: Any
    forward: Callable[[S], T]
    inverse: Callable[[T], S]

    def convert(self, value: S) -> T:
        return self.forward(value)

    def unconvert(self, value: T) -> S:
        return self.inverse(value)

    def reversed(self) -> "ScalarConverter[T, S]":
        return ScalarConverter(self.target_type, self.source_type, self.inverse, self.forward)

    def then(self, other: "ScalarConverter[T, U]") -> "ScalarConverter[S, U]":
        """Chain ``self`` (S -> T) with ``other`` (T -> U) into S -> U."""
        if other.source_type != self.target_type:
            raise UnsupportedTypeError.no_path(self.target_type, other.source_type)
        first, second = self, other

        def forward(value: S) -> U:
            return second.forward(first.forward(value))

        def inverse(value: U) -> S:
            return first.inverse(second.inverse(value))

        return ScalarConverter(first.source_type, second.target_type, forward, inverse)

    @classmethod
    def identity(cls, value_type: Any) -> "ScalarConverter[S, S]":
        return cls(value_type, value_type, _identity, _identity)

    def __repr__(self) -> str:
        return f"ScalarConverter({_type_name(self.source_type)} -> {_type_name(self.target_type)})"


class ScalarConverterRegistry:
    """Immutable table of scalar converters keyed by ``(source_type, target_type)``."""

    __slots__ = ("_converters", "_edges", "_terminal_types")

    def __init__(
        self,
        converters: Iterable[ScalarConverter[Any, Any]] = (),
        *,
        terminal_types: Iterable[Any] = (str,),
    ) -> None:
        table: Dict[Tuple[Any, Any], ScalarConverter[Any, Any]] = {}
        for converter in converters:
            table.pop((converter.target_type, converter.source_type), None)
            table[(converter.source_type, converter.target_type)] = converter

        edges: Dict[Any, List[ScalarConverter[Any, Any]]] = {}
        for converter in table.values():
            edges.setdefault(converter.source_type, []).append(converter)
            edges.setdefault(converter.target_type, []).append(converter.reversed())

        self._converters: Mapping[Tuple[Any, Any], ScalarConverter[Any, Any]] = MappingProxyType(table)
        self._edges: Mapping[Any, Tuple[ScalarConverter[Any, Any], ...]] = MappingProxyType(
            {source: tuple(outgoing) for source, outgoing in edges.items()}
        )
        # Terminal types may end a chain but are never intermediate hops
        self._terminal_types = frozenset(terminal_types)

    @property
    def converters(self) -> Tuple[ScalarConverter[Any, Any], ...]:
        return tuple(self._converters.values())

    def with_converter(self, converter: ScalarConverter[Any, Any]) -> "ScalarConverterRegistry":
        """Return a new registry with ``converter`` registered, replacing any entry for the same pair."""
        logger.debug("Registering %r", converter)
        return ScalarConverterRegistry((*self.converters, converter), terminal_types=self._terminal_types)

    def with_converters(self, converters: Iterable[ScalarConverter[Any, Any]]) -> "ScalarConverterRegistry":
        return ScalarConverterRegistry((*self.converters, *converters), terminal_types=self._terminal_types)

    def has_converter(self, source_type: Any, target_type: Any) -> bool:
        return self._find_path(source_type, target_type) is not None

    def get_converter(self, source_type: Any, target_type: Any) -> ScalarConverter[Any, Any]:
        """
        Return a converter from ``source_type`` to ``target_type``.

        Resolution order: identity for equal types, a registered pair, the
        reverse of a registered pair, then the shortest chain of registered
        converters.

        Raises:
            UnsupportedTypeError: If no path connects the two types
        """
        if source_type == target_type:
            return ScalarConverter.identity(source_type)

        direct = self._converters.get((source_type, target_type))
        if direct is not None:
            return direct
        swapped = self._converters.get((target_type, source_type))
        if swapped is not None:
            return swapped.reversed()

        path = self._find_path(source_type, target_type)
        if path is None:
            raise UnsupportedTypeError.no_path(source_type, target_type)

        logger.debug(
            "Resolved %s -> %s through %s",
            _type_name(source_type),
            _type_name(target_type),
            " -> ".join(_type_name(step.target_type) for step in path[:-1]),
        )
        chained = path[0]
        for step in path[1:]:
            chained = chained.then(step)
        return chained

    def _find_path(self, source_type: Any, target_type: Any) -> Optional[List[ScalarConverter[Any, Any]]]:
        if source_type == target_type:
            return []
        visited = {source_type}
        queue: deque[Tuple[Any, List[ScalarConverter[Any, Any]]]] = deque([(source_type, [])])
        while queue:
            current, path = queue.popleft()
            for edge in self._edges.get(current, ()):
                if edge.target_type in visited:
                    continue
                extended = path + [edge]
                if edge.target_type == target_type:
                    return extended
                visited.add(edge.target_type)
                if edge.target_type in self._terminal_types:
                    continue
                queue.append((edge.target_type, extended))
        return None

    def __len__(self) -> int:
        return len(self._converters)

    def __repr__(self) -> str:
        return f"ScalarConverterRegistry({len(self)} converters)"


@lru_cache(maxsize=1)
def standard_registry() -> ScalarConverterRegistry:
    """Return the shared registry of built-in scalar converters."""
    from .scalar_registry_helpers import standard_converters

    registry = ScalarConverterRegistry(standard_converters())
    logger.debug("Built standard scalar registry with %d converters", len(registry))
    return registry


__all__ = ["ScalarConverter", "ScalarConverterRegistry", "standard_registry"]
