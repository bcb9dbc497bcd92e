"""Built-in scalar converter tables."""

from typing import List

from ..scalar_registry import ScalarConverter
from .boxed import boxed_converters
from .temporal import temporal_converters
from .textual import textual_converters


def standard_converters() -> List[ScalarConverter]:
    """Return the built-in converters in registration order."""
    return [*temporal_converters(), *textual_converters(), *boxed_converters()]


__all__ = ["boxed_converters", "standard_converters", "temporal_converters", "textual_converters"]
