"""Shared test fixtures and utilities for tzperiod tests."""

import pytest

from tzperiod.config import DEFAULT_TZ_ENV


@pytest.fixture(autouse=True)
def clean_default_time_zone(monkeypatch):
    """Run every test with the default zone unset (falls back to UTC)."""
    monkeypatch.delenv(DEFAULT_TZ_ENV, raising=False)


@pytest.fixture
def period_kinds():
    """Fixture providing every supported period key in order."""
    return ["10 minutes", "hour", "day", "week", "month"]

