"""Tests for timestamp format configuration."""

import pytest

from attrconv.config import (
    DEFAULT_TIME_ZONE,
    DEFAULT_TIMESTAMP_PATTERN,
    PATTERN_ENV_VAR,
    TIME_ZONE_ENV_VAR,
    TimestampFormat,
)
from attrconv.exceptions import ConfigurationError


def test_defaults():
    timestamp_format = TimestampFormat()
    assert timestamp_format.pattern == DEFAULT_TIMESTAMP_PATTERN == "yyyy-MM-dd'T'HH:mm:ss.SSS'Z'"
    assert timestamp_format.time_zone == DEFAULT_TIME_ZONE == "UTC"


def test_from_options_accepts_both_zone_spellings():
    assert TimestampFormat.from_options({"timeZone": "Asia/Tokyo"}).time_zone == "Asia/Tokyo"
    assert TimestampFormat.from_options({"time_zone": "Asia/Tokyo"}).time_zone == "Asia/Tokyo"


def test_from_options_empty_uses_defaults():
    assert TimestampFormat.from_options({}) == TimestampFormat()


def test_from_options_rejects_unknown_key():
    with pytest.raises(ConfigurationError, match="timestamp option"):
        TimestampFormat.from_options({"format": "yyyy"})


def test_from_options_rejects_duplicate_aliases():
    with pytest.raises(ConfigurationError, match="more than once"):
        TimestampFormat.from_options({"timeZone": "UTC", "time_zone": "UTC"})


@pytest.mark.parametrize("kwargs", [{"pattern": ""}, {"pattern": None}, {"time_zone": "  "}, {"time_zone": 5}])
def test_rejects_blank_values(kwargs):
    with pytest.raises(ConfigurationError):
        TimestampFormat(**kwargs)


def test_is_frozen():
    with pytest.raises(AttributeError):
        TimestampFormat().pattern = "yyyy"


def test_from_env_defaults():
    assert TimestampFormat.from_env() == TimestampFormat()


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv(PATTERN_ENV_VAR, "yyyy MM")
    monkeypatch.setenv(TIME_ZONE_ENV_VAR, " Europe/Paris ")
    timestamp_format = TimestampFormat.from_env()
    assert timestamp_format.pattern == "yyyy MM"
    assert timestamp_format.time_zone == "Europe/Paris"


def test_from_env_blank_pattern_falls_back(monkeypatch):
    monkeypatch.setenv(PATTERN_ENV_VAR, "")
    assert TimestampFormat.from_env().pattern == DEFAULT_TIMESTAMP_PATTERN
