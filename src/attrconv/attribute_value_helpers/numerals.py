"""Base-10 numeral checks for Number payloads."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from ..exceptions import FormatError

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent
NUMERAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def is_numeral(text: object) -> bool:
    return isinstance(text, str) and NUMERAL_PATTERN.fullmatch(text) is not None


def require_numeral(text: object) -> str:
    """Return ``text`` unchanged when it is a valid numeral, else raise ``FormatError``."""
    if not is_numeral(text):
        raise FormatError.invalid_number(text)
    return text  # type: ignore[return-value]


def numeral_to_decimal(text: str) -> Decimal:
    """Parse numeral text into a ``Decimal`` for numeric comparison."""
    require_numeral(text)
    try:
        return Decimal(text)
    except InvalidOperation as exc:  # pragma: no cover - regex already guarantees syntax
        raise FormatError.invalid_number(text) from exc


__all__ = ["NUMERAL_PATTERN", "is_numeral", "numeral_to_decimal", "require_numeral"]
