"""
Date-time patterns in the familiar ``yyyy-MM-dd'T'HH:mm:ss.SSS`` letter syntax.

A pattern is compiled once into a ``DateTimePattern`` holding its tokens and a
parsing regex; a ``DateTimeFormatter`` binds a compiled pattern to a time zone.

Supported letters:
- ``y``/``u`` year (``yy`` is 2000-2099), ``M``/``L`` month (``MMM``/``MMMM`` names),
  ``d`` day, ``H`` hour 0-23, ``h`` hour 1-12 with ``a`` AM/PM, ``m`` minute,
  ``s`` second, ``S`` fraction digits, ``E`` day-of-week name
- ``X``/``x``/``Z`` zone offsets (``X`` writes ``Z`` for a zero offset)

Text in single quotes is literal and ``''`` is a quote. Fields missing from a
pattern parse as 1970-01-01T00:00:00.000000. Fractions beyond the pattern's
digits are truncated when formatting.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Dict, List, Optional, Tuple, Union

import pytz

from ..exceptions import ConfigurationError, FormatError
from .timezone import localize, resolve_timezone, timezone_name, to_zone

logger = logging.getLogger(__name__)

SHORT_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
FULL_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
SHORT_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
FULL_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MERIDIEMS = ("AM", "PM")

# Maximum repeat count per supported letter
_MAX_COUNTS = {
    "y": 4,
    "u": 4,
    "M": 4,
    "L": 4,
    "d": 2,
    "H": 2,
    "h": 2,
    "m": 2,
    "s": 2,
    "S": 9,
    "E": 4,
    "a": 1,
    "X": 3,
    "x": 3,
    "Z": 3,
}
_RESERVED = frozenset("[]{}#")
_QUOTE = "'"


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Field:
    letter: str
    count: int


Token = Union[Literal, Field]


def _is_pattern_letter(char: str) -> bool:
    return ("A" <= char <= "Z") or ("a" <= char <= "z")


def _alternation(names: Tuple[str, ...]) -> str:
    return "(" + "|".join(re.escape(name) for name in sorted(names, key=len, reverse=True)) + ")"


def _quoted_literal(pattern: str, start: int) -> Tuple[str, int]:
    """Read a quoted section starting at ``start`` (the opening quote)."""
    if pattern.startswith(_QUOTE * 2, start):
        return _QUOTE, start + 2
    chunks: List[str] = []
    index = start + 1
    while index < len(pattern):
        if pattern[index] == _QUOTE:
            if pattern.startswith(_QUOTE * 2, index):
                chunks.append(_QUOTE)
                index += 2
                continue
            return "".join(chunks), index + 1
        chunks.append(pattern[index])
        index += 1
    raise ConfigurationError.invalid_pattern(pattern, f"unterminated quote at position {start}")


def tokenize(pattern: str) -> Tuple[Token, ...]:
    """Split a pattern into literal and field tokens, rejecting unsupported letters."""
    if not isinstance(pattern, str) or not pattern:
        raise ConfigurationError.invalid_pattern(str(pattern), "pattern must be a non-empty string")

    tokens: List[Token] = []
    literal: List[str] = []
    index = 0
    while index < len(pattern):
        char = pattern[index]
        if char == _QUOTE:
            text, index = _quoted_literal(pattern, index)
            literal.append(text)
            continue
        if char in _RESERVED:
            raise ConfigurationError.invalid_pattern(pattern, f"reserved character {char!r}")
        if not _is_pattern_letter(char):
            literal.append(char)
            index += 1
            continue

        end = index
        while end < len(pattern) and pattern[end] == char:
            end += 1
        count = end - index
        max_count = _MAX_COUNTS.get(char)
        if max_count is None:
            raise ConfigurationError.invalid_pattern(pattern, f"unsupported pattern letter {char!r}")
        if count > max_count:
            raise ConfigurationError.invalid_pattern(pattern, f"too many pattern letters {char * count!r}")
        if literal:
            tokens.append(Literal("".join(literal)))
            literal = []
        tokens.append(Field(char, count))
        index = end

    if literal:
        tokens.append(Literal("".join(literal)))
    return tuple(tokens)


def _field_regex(field: Field) -> str:
    letter, count = field.letter, field.count
    if letter in "yu":
        return r"(\d{2})" if count == 2 else rf"(\d{{{count},4}})"
    if letter in "ML":
        if count == 3:
            return _alternation(SHORT_MONTHS)
        if count == 4:
            return _alternation(FULL_MONTHS)
    if letter in "MLdHhms":
        return r"(\d{1,2})" if count == 1 else r"(\d{2})"
    if letter == "S":
        return rf"(\d{{{count}}})"
    if letter == "E":
        return _alternation(FULL_DAYS if count == 4 else SHORT_DAYS)
    if letter == "a":
        return _alternation(MERIDIEMS)
    if letter == "Z":
        return r"([+-]\d{4})"
    offset = {1: r"[+-]\d{2}(?:\d{2})?", 2: r"[+-]\d{4}", 3: r"[+-]\d{2}:\d{2}"}[count]
    if letter == "X":
        return rf"(Z|{offset})"
    return rf"({offset})"


def _format_offset(offset: timedelta, field: Field) -> str:
    total_minutes = int(offset.total_seconds()) // 60
    if total_minutes == 0 and field.letter == "X":
        return "Z"
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    if field.letter == "Z" or field.count == 2:
        return f"{sign}{hours:02d}{minutes:02d}"
    if field.count == 3:
        return f"{sign}{hours:02d}:{minutes:02d}"
    return f"{sign}{hours:02d}" if minutes == 0 else f"{sign}{hours:02d}{minutes:02d}"


def _parse_offset(text: str) -> timedelta:
    if text == "Z":
        return timedelta(0)
    digits = text[1:].replace(":", "")
    hours = int(digits[:2])
    minutes = int(digits[2:]) if len(digits) > 2 else 0
    offset = timedelta(hours=hours, minutes=minutes)
    return -offset if text.startswith("-") else offset


def _format_field(dt: datetime, field: Field) -> str:
    letter, count = field.letter, field.count
    if letter in "yu":
        return f"{dt.year % 100:02d}" if count == 2 else f"{dt.year:0{count}d}"
    if letter in "ML":
        if count == 3:
            return SHORT_MONTHS[dt.month - 1]
        if count == 4:
            return FULL_MONTHS[dt.month - 1]
        return f"{dt.month:0{count}d}"
    if letter == "d":
        return f"{dt.day:0{count}d}"
    if letter == "H":
        return f"{dt.hour:0{count}d}"
    if letter == "h":
        return f"{(dt.hour % 12) or 12:0{count}d}"
    if letter == "m":
        return f"{dt.minute:0{count}d}"
    if letter == "s":
        return f"{dt.second:0{count}d}"
    if letter == "S":
        return f"{dt.microsecond:06d}"[:count].ljust(count, "0")
    if letter == "E":
        return (FULL_DAYS if count == 4 else SHORT_DAYS)[dt.weekday()]
    if letter == "a":
        return MERIDIEMS[dt.hour // 12]
    offset = dt.utcoffset()
    if offset is None:
        raise FormatError(f"Cannot format zone offset of naive datetime {dt!r}", value=dt)
    return _format_offset(offset, field)


_FIELD_NAMES = {
    "y": "year",
    "u": "year",
    "M": "month",
    "L": "month",
    "d": "day",
    "H": "hour",
    "h": "hour12",
    "m": "minute",
    "s": "second",
    "S": "microsecond",
    "E": "weekday",
    "a": "meridiem",
    "X": "offset",
    "x": "offset",
    "Z": "offset",
}


def _field_value(field: Field, text: str) -> object:
    letter, count = field.letter, field.count
    if letter in "yu":
        return 2000 + int(text) if count == 2 else int(text)
    if letter in "ML" and count >= 3:
        return (SHORT_MONTHS if count == 3 else FULL_MONTHS).index(text) + 1
    if letter == "S":
        return int(text[:6].ljust(6, "0"))
    if letter == "E":
        return (FULL_DAYS if count == 4 else SHORT_DAYS).index(text)
    if letter == "a":
        return MERIDIEMS.index(text)
    if letter in "XxZ":
        return _parse_offset(text)
    return int(text)


@dataclass(frozen=True)
class DateTimePattern:
    """A compiled date-time pattern."""

    pattern: str
    tokens: Tuple[Token, ...]
    regex: "re.Pattern[str]"

    @property
    def fields(self) -> Tuple[Field, ...]:
        return tuple(token for token in self.tokens if isinstance(token, Field))

    def format(self, dt: datetime) -> str:
        return "".join(
            token.text if isinstance(token, Literal) else _format_field(dt, token) for token in self.tokens
        )

    def parse(self, text: str, zone: tzinfo) -> datetime:
        """
        Parse ``text`` into an aware datetime in ``zone``.

        A parsed offset fixes the instant; otherwise the wall-clock time is
        interpreted in ``zone``.

        Raises:
            FormatError: If the text does not match or names an invalid date
        """
        if not isinstance(text, str):
            raise FormatError.invalid_payload("Timestamp", text, "str")
        match = self.regex.fullmatch(text)
        if match is None:
            raise FormatError.unparsable(text, self.pattern)

        values: Dict[str, object] = {}
        for field, group in zip(self.fields, match.groups()):
            name = _FIELD_NAMES[field.letter]
            value = _field_value(field, group)
            if values.setdefault(name, value) != value:
                raise FormatError(f"Conflicting {name} values in {text!r}", value=text, pattern=self.pattern)

        naive = self._build_naive(values, text)
        offset = values.get("offset")
        if offset is None:
            return localize(naive, zone)
        try:
            fixed = timezone(offset)  # type: ignore[arg-type]
        except ValueError as exc:
            raise FormatError(f"Offset out of range in {text!r}", value=text, pattern=self.pattern) from exc
        return to_zone(naive.replace(tzinfo=fixed), zone)

    def _build_naive(self, values: Dict[str, object], text: str) -> datetime:
        hour = values.get("hour")
        hour12 = values.get("hour12")
        if hour is None and hour12 is not None:
            if not 1 <= hour12 <= 12:  # type: ignore[operator]
                raise FormatError(f"Clock hour out of range in {text!r}", value=text, pattern=self.pattern)
            hour = hour12 % 12 + 12 * values.get("meridiem", 0)  # type: ignore[operator]
        try:
            return datetime(
                values.get("year", 1970),  # type: ignore[arg-type]
                values.get("month", 1),  # type: ignore[arg-type]
                values.get("day", 1),  # type: ignore[arg-type]
                hour if hour is not None else 0,  # type: ignore[arg-type]
                values.get("minute", 0),  # type: ignore[arg-type]
                values.get("second", 0),  # type: ignore[arg-type]
                values.get("microsecond", 0),  # type: ignore[arg-type]
            )
        except ValueError as exc:
            raise FormatError(f"Invalid date-time {text!r} for pattern {self.pattern!r}", value=text) from exc


@lru_cache(maxsize=128)
def compile_pattern(pattern: str) -> DateTimePattern:
    """
    Compile a pattern string.

    Raises:
        ConfigurationError: If the pattern is empty, uses an unsupported or
            reserved letter, or has an unterminated quote
    """
    tokens = tokenize(pattern)
    if not any(isinstance(token, Field) for token in tokens):
        raise ConfigurationError.invalid_pattern(pattern, "pattern has no date-time fields")
    regex = "".join(
        re.escape(token.text) if isinstance(token, Literal) else _field_regex(token) for token in tokens
    )
    return DateTimePattern(pattern=pattern, tokens=tokens, regex=re.compile(regex))


@dataclass(frozen=True)
class DateTimeFormatter:
    """A compiled pattern bound to a time zone."""

    pattern: DateTimePattern
    zone: tzinfo

    @classmethod
    def of_pattern(cls, pattern: str, tz_name: str = "UTC") -> "DateTimeFormatter":
        """
        Build a formatter from a pattern string and a zone identifier.

        Raises:
            ConfigurationError: If the pattern is malformed or the zone unknown
        """
        if not isinstance(pattern, str):
            raise ConfigurationError.invalid_pattern(repr(pattern), "pattern must be a non-empty string")
        compiled = compile_pattern(pattern)
        try:
            zone = resolve_timezone(tz_name)
        except pytz.UnknownTimeZoneError as exc:
            raise ConfigurationError.invalid_timezone(tz_name) from exc
        logger.debug("Compiled date-time pattern %r for zone %s", pattern, timezone_name(zone))
        return cls(pattern=compiled, zone=zone)

    @property
    def zone_name(self) -> str:
        return timezone_name(self.zone)

    def format(self, dt: datetime) -> str:
        """Format an aware datetime after converting it into the formatter's zone."""
        if dt.tzinfo is None or dt.utcoffset() is None:
            raise FormatError(f"Cannot format naive datetime {dt!r}", value=dt)
        return self.pattern.format(to_zone(dt, self.zone))

    def parse(self, text: str) -> datetime:
        return self.pattern.parse(text, self.zone)


__all__ = [
    "DateTimeFormatter",
    "DateTimePattern",
    "Field",
    "Literal",
    "compile_pattern",
    "tokenize",
]
