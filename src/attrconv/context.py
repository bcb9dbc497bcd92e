"""Per-call conversion context carried through nested conversions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

PathSegment = Union[str, int]


@dataclass(frozen=True)
class ConversionContext:
    """
    Diagnostic metadata for a single conversion call.

    The context names the attribute being converted and the path into nested
    lists and maps. It holds no mutable state; ``child`` returns a new context.
    """

    attribute_name: Optional[str] = None
    path: Tuple[PathSegment, ...] = ()

    @classmethod
    def for_attribute(cls, attribute_name: str) -> "ConversionContext":
        return cls(attribute_name=attribute_name)

    def child(self, segment: PathSegment) -> "ConversionContext":
        """Return the context of a list element (int) or map entry (str)."""
        return ConversionContext(attribute_name=self.attribute_name, path=self.path + (segment,))

    def describe(self) -> str:
        """Render the context as ``name[0].key`` for error messages."""
        parts = [self.attribute_name or ""]
        for segment in self.path:
            if isinstance(segment, int):
                parts.append(f"[{segment}]")
            else:
                parts.append(f".{segment}" if parts != [""] else segment)
        return "".join(parts)


EMPTY_CONTEXT = ConversionContext()


def resolve_context(context: Optional[ConversionContext]) -> ConversionContext:
    return EMPTY_CONTEXT if context is None else context


__all__ = ["EMPTY_CONTEXT", "ConversionContext", "PathSegment", "resolve_context"]
