from __future__ import annotations

"""Runtime helpers for working with environment-backed configuration."""


import os
from typing import Optional

from ..exceptions import ConfigurationError


def _normalize(value: str | None, *, strip: bool) -> str | None:
    if value is None:
        return None
    return value.strip() if strip else value


def env_str(
    name: str,
    or_value: str | None = None,
    *,
    required: bool = False,
    strip: bool = True,
    allow_blank: bool = False,
) -> str | None:
    """Fetch an environment variable as a string with validation."""

    value = _normalize(os.getenv(name), strip=strip)

    if value is None or (not allow_blank and value == ""):
        if required:
            raise ConfigurationError.missing_value(name, "required environment variable is not set")
        return or_value
    return value


def env_choice(name: str, choices: set[str], or_value: Optional[str] = None) -> Optional[str]:
    """Fetch an environment variable that must be one of ``choices`` (case-insensitive)."""

    raw = env_str(name)
    if raw is None:
        return or_value
    normalized = raw.upper()
    if normalized not in {choice.upper() for choice in choices}:
        raise ConfigurationError.invalid_value(name, raw, f"Expected one of {sorted(choices)}")
    return normalized


__all__ = ["env_choice", "env_str"]
