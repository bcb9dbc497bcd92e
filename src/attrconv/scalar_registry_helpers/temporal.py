"""Built-in converters between aware ``datetime`` and calendar-like types."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import List

import numpy as np
from dateutil import parser as dateutil_parser

from ..exceptions import FormatError, ValidationError
from ..scalar_registry import ScalarConverter
from ..time_helpers.timezone import to_utc

EPOCH_START = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def _require_aware(value: datetime) -> datetime:
    if not isinstance(value, datetime) or value.tzinfo is None or value.utcoffset() is None:
        raise ValidationError(value=value, constraint="must be a timezone-aware datetime")
    return value


def datetime_to_epoch_millis(value: datetime) -> int:
    """Whole milliseconds since the epoch; finer precision is floored."""
    return (_require_aware(value) - EPOCH_START) // _ONE_MILLISECOND


def epoch_millis_to_datetime(value: int) -> datetime:
    try:
        return EPOCH_START + timedelta(milliseconds=value)
    except OverflowError as exc:
        raise ValidationError(value=value, constraint="must be within the datetime range") from exc


def datetime_to_epoch_seconds(value: datetime) -> float:
    return _require_aware(value).timestamp()


def epoch_seconds_to_datetime(value: float) -> datetime:
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise ValidationError(value=value, constraint="must be within the datetime range") from exc


def datetime_to_iso(value: datetime) -> str:
    return _require_aware(value).isoformat()


def iso_to_datetime(value: str) -> datetime:
    """Parse ISO-8601 text; naive text is taken as UTC."""
    try:
        parsed = dateutil_parser.isoparse(value)
    except (ValueError, OverflowError, TypeError) as exc:
        raise FormatError(f"Invalid ISO-8601 timestamp: {value!r}", value=value) from exc
    return to_utc(parsed) if parsed.tzinfo is None else parsed


def datetime_to_date(value: datetime) -> date:
    """Calendar date of the instant in UTC."""
    return to_utc(_require_aware(value)).date()


def date_to_datetime(value: date) -> datetime:
    return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)


def datetime_to_datetime64(value: datetime) -> np.datetime64:
    naive_utc = to_utc(_require_aware(value)).replace(tzinfo=None)
    return np.datetime64(naive_utc, "us")


def datetime64_to_datetime(value: np.datetime64) -> datetime:
    if np.isnat(value):
        raise ValidationError(value=value, constraint="NaT is not representable")
    as_micros = value.astype("datetime64[us]")
    naive = as_micros.astype(datetime)
    if not isinstance(naive, datetime):
        raise ValidationError(value=value, constraint="must be within the datetime range")
    return naive.replace(tzinfo=timezone.utc)


def temporal_converters() -> List[ScalarConverter]:
    return [
        ScalarConverter(datetime, int, datetime_to_epoch_millis, epoch_millis_to_datetime),
        ScalarConverter(datetime, float, datetime_to_epoch_seconds, epoch_seconds_to_datetime),
        ScalarConverter(datetime, str, datetime_to_iso, iso_to_datetime),
        ScalarConverter(datetime, date, datetime_to_date, date_to_datetime),
        ScalarConverter(datetime, np.datetime64, datetime_to_datetime64, datetime64_to_datetime),
    ]


__all__ = [
    "EPOCH_START",
    "date_to_datetime",
    "datetime64_to_datetime",
    "datetime_to_date",
    "datetime_to_datetime64",
    "datetime_to_epoch_millis",
    "datetime_to_epoch_seconds",
    "datetime_to_iso",
    "epoch_millis_to_datetime",
    "epoch_seconds_to_datetime",
    "iso_to_datetime",
    "temporal_converters",
]
