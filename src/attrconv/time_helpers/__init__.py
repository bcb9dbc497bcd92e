"""Date-time pattern and time-zone helpers."""

from .datetime_pattern import DateTimeFormatter, DateTimePattern, compile_pattern, tokenize
from .timezone import localize, resolve_timezone, timezone_name, to_utc, to_zone, validate_timezone

__all__ = [
    "DateTimeFormatter",
    "DateTimePattern",
    "compile_pattern",
    "localize",
    "resolve_timezone",
    "timezone_name",
    "to_utc",
    "to_zone",
    "tokenize",
    "validate_timezone",
]
