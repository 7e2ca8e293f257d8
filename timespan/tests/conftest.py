"""Pytest configuration for timespan tests."""

from zoneinfo import ZoneInfo

import pytest

from timespan.naive import NaiveTimeSpan


@pytest.fixture
def berlin():
    return ZoneInfo("Europe/Berlin")


@pytest.fixture
def office_hours():
    """Span from 09:00 to 17:00."""
    return NaiveTimeSpan.parse("09:00:00 - 17:00:00")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Keep the developer's TIMESPAN_* settings out of the tests."""
    for name in ("TIMESPAN_LOG_LEVEL", "TIMESPAN_DEFAULT_TEMPLATE", "TIMESPAN_DEFAULT_TIME_FORMAT"):
        monkeypatch.delenv(name, raising=False)
