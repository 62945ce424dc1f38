"""Tests for settings."""

import pytest
from dateutil import tz

from asleep_core.config import DEFAULT_DATE_FORMAT, DEFAULT_SAMPLE_LIMIT, AsleepSettings, resolve_timezone
from asleep_core.exceptions import ConfigError


def test_defaults(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("")
    settings = AsleepSettings.from_env(env_file=env_file)
    assert settings.timezone is None
    assert settings.date_format == DEFAULT_DATE_FORMAT
    assert settings.sample_limit == DEFAULT_SAMPLE_LIMIT


def test_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("ASLEEP_TIMEZONE", "Europe/Berlin")
    monkeypatch.setenv("ASLEEP_SAMPLE_LIMIT", "60")
    env_file = tmp_path / ".env"
    env_file.write_text("")
    settings = AsleepSettings.from_env(env_file=env_file)
    assert settings.timezone == "Europe/Berlin"
    assert settings.sample_limit == 60


def test_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("ASLEEP_DATE_FORMAT=%Y-%m-%d\nASLEEP_TIMEZONE=UTC\n")
    settings = AsleepSettings.from_env(env_file=env_file)
    assert settings.date_format == "%Y-%m-%d"
    assert settings.reference_tz() is not None


def test_overrides_win(monkeypatch, tmp_path):
    monkeypatch.setenv("ASLEEP_SAMPLE_LIMIT", "60")
    env_file = tmp_path / ".env"
    env_file.write_text("")
    settings = AsleepSettings.from_env(env_file=env_file, sample_limit=5, timezone=None)
    assert settings.sample_limit == 5


def test_missing_env_file(tmp_path):
    with pytest.raises(ConfigError):
        AsleepSettings.from_env(env_file=tmp_path / "nope.env")


def test_invalid_limit(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("")
    with pytest.raises(ConfigError):
        AsleepSettings.from_env(env_file=env_file, sample_limit=0)


def test_unknown_timezone(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("")
    with pytest.raises(ConfigError) as exc_info:
        AsleepSettings.from_env(env_file=env_file, timezone="Mars/Olympus_Mons")
    assert "Unknown timezone" in exc_info.value.message


def test_resolve_timezone_local_by_default():
    assert isinstance(resolve_timezone(None), tz.tzlocal)
    assert isinstance(resolve_timezone(""), tz.tzlocal)


def test_blank_timezone_is_local():
    assert AsleepSettings(timezone="  ").timezone is None
