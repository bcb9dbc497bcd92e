"""Declarative configuration for formatted timestamp converters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..exceptions import ConfigurationError
from .runtime import env_str

DEFAULT_TIMESTAMP_PATTERN = "yyyy-MM-dd'T'HH:mm:ss.SSS'Z'"
DEFAULT_TIME_ZONE = "UTC"

PATTERN_ENV_VAR = "ATTRCONV_TIMESTAMP_PATTERN"
TIME_ZONE_ENV_VAR = "ATTRCONV_TIMESTAMP_TIME_ZONE"

_OPTION_ALIASES = {
    "pattern": "pattern",
    "timeZone": "time_zone",
    "time_zone": "time_zone",
}


@dataclass(frozen=True)
class TimestampFormat:
    """Pattern and time-zone identifier for a formatted timestamp attribute."""

    pattern: str = DEFAULT_TIMESTAMP_PATTERN
    time_zone: str = DEFAULT_TIME_ZONE

    def __post_init__(self) -> None:
        if not isinstance(self.pattern, str) or not self.pattern:
            raise ConfigurationError.invalid_value("pattern", self.pattern, "Pattern must be a non-empty string")
        if not isinstance(self.time_zone, str) or not self.time_zone.strip():
            raise ConfigurationError.invalid_value(
                "time_zone", self.time_zone, "Time zone must be a non-empty identifier"
            )

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "TimestampFormat":
        """
        Build a format from declarative options (``pattern``, ``timeZone``).

        Raises:
            ConfigurationError: If an option name is unknown or given twice
        """
        values: dict[str, Any] = {}
        for key, value in options.items():
            field_name = _OPTION_ALIASES.get(key)
            if field_name is None:
                raise ConfigurationError.invalid_value(
                    "timestamp option", key, f"Expected one of {sorted(_OPTION_ALIASES)}"
                )
            if field_name in values:
                raise ConfigurationError.invalid_value("timestamp option", key, "Option given more than once")
            values[field_name] = value
        return cls(**values)

    @classmethod
    def from_env(cls) -> "TimestampFormat":
        """Read the format from ``ATTRCONV_TIMESTAMP_PATTERN`` / ``ATTRCONV_TIMESTAMP_TIME_ZONE``."""
        return cls(
            pattern=env_str(PATTERN_ENV_VAR, or_value=DEFAULT_TIMESTAMP_PATTERN, strip=False),
            time_zone=env_str(TIME_ZONE_ENV_VAR, or_value=DEFAULT_TIME_ZONE),
        )


__all__ = [
    "DEFAULT_TIMESTAMP_PATTERN",
    "DEFAULT_TIME_ZONE",
    "PATTERN_ENV_VAR",
    "TIME_ZONE_ENV_VAR",
    "TimestampFormat",
]
