from __future__ import annotations

"""Time-zone resolution helpers backed by pytz."""

import logging
from datetime import datetime, timezone, tzinfo

import pytz

logger = logging.getLogger(__name__)


def validate_timezone(tz_name: str) -> bool:
    """Return True when the timezone string is recognized by pytz."""
    try:
        pytz.timezone(tz_name)
    except (pytz.UnknownTimeZoneError, AttributeError):
        return False
    return True


def resolve_timezone(tz_name: str) -> tzinfo:
    """
    Resolve a zone identifier such as ``"UTC"`` or ``"Europe/Paris"``.

    Raises:
        pytz.UnknownTimeZoneError: If the identifier is not in the tz database
    """
    if not isinstance(tz_name, str) or not tz_name.strip():
        raise pytz.UnknownTimeZoneError(tz_name)
    return pytz.timezone(tz_name.strip())


def timezone_name(zone: tzinfo) -> str:
    """Return the identifier a zone was resolved from."""
    name = getattr(zone, "zone", None)
    if name:
        return name
    if zone is timezone.utc:
        return "UTC"
    return zone.tzname(None) or str(zone)


def localize(naive: datetime, zone: tzinfo) -> datetime:
    """Attach ``zone`` to a naive wall-clock datetime, honoring pytz DST rules."""
    localizer = getattr(zone, "localize", None)
    if localizer is not None:
        return localizer(naive)
    return naive.replace(tzinfo=zone)


def to_zone(dt: datetime, zone: tzinfo) -> datetime:
    """Convert an aware datetime into ``zone``."""
    converted = dt.astimezone(zone)
    normalizer = getattr(zone, "normalize", None)
    if normalizer is not None:
        return normalizer(converted)
    return converted


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC, assuming naive values are already UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


__all__ = ["localize", "resolve_timezone", "timezone_name", "to_utc", "to_zone", "validate_timezone"]
