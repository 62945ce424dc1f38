"""Shared fixtures."""

import pytest

SETTINGS_ENV = ("ASLEEP_TIMEZONE", "ASLEEP_DATE_FORMAT", "ASLEEP_SAMPLE_LIMIT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without ASLEEP_* variables and drop any a test loads."""
    for name in SETTINGS_ENV:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
