"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from attrconv import FloatAttributeConverter, IntegerAttributeConverter
from attrconv.config import PATTERN_ENV_VAR, TIME_ZONE_ENV_VAR
from attrconv.logging_config import LOG_LEVEL_ENV_VAR


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    """Keep developer environment variables from leaking into configuration tests."""
    for name in (PATTERN_ENV_VAR, TIME_ZONE_ENV_VAR, LOG_LEVEL_ENV_VAR):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_instant() -> datetime:
    """2020-01-02T03:04:05.006Z"""
    return datetime(2020, 1, 2, 3, 4, 5, 6000, tzinfo=timezone.utc)


@pytest.fixture
def float_converter() -> FloatAttributeConverter:
    return FloatAttributeConverter.create()


@pytest.fixture
def integer_converter() -> IntegerAttributeConverter:
    return IntegerAttributeConverter.create()
