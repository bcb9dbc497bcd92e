"""Configuration helpers and dataclasses."""

from .runtime import env_choice, env_str
from .timestamp_format import (
    DEFAULT_TIME_ZONE,
    DEFAULT_TIMESTAMP_PATTERN,
    PATTERN_ENV_VAR,
    TIME_ZONE_ENV_VAR,
    TimestampFormat,
)

__all__ = [
    "DEFAULT_TIMESTAMP_PATTERN",
    "DEFAULT_TIME_ZONE",
    "PATTERN_ENV_VAR",
    "TIME_ZONE_ENV_VAR",
    "TimestampFormat",
    "env_choice",
    "env_str",
]
