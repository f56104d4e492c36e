"""Tests for settings loading."""

import pytest

from core.config import (
    DEFAULT_BASE_URL,
    ConfigurationError,
    get_log_level,
    load_settings,
)


def test_defaults():
    settings = load_settings({"OPENWEATHERMAP_API_KEY": "abc"})

    assert settings.api_key == "abc"
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout_seconds == 10.0
    assert settings.forecast_max_samples == 24
    assert settings.units == "metric"


def test_overrides():
    settings = load_settings({
        "OPENWEATHERMAP_API_KEY": " abc ",
        "OPENWEATHER_BASE_URL": "http://localhost:8080/",
        "OPENWEATHER_TIMEOUT": "2.5",
        "FORECAST_MAX_SAMPLES": "16",
    })

    assert settings.api_key == "abc"
    assert settings.base_url == "http://localhost:8080"
    assert settings.timeout_seconds == 2.5
    assert settings.forecast_max_samples == 16


@pytest.mark.parametrize("env", [{}, {"OPENWEATHERMAP_API_KEY": "   "}])
def test_missing_api_key(env):
    with pytest.raises(ConfigurationError, match="OPENWEATHERMAP_API_KEY is not set"):
        load_settings(env)


@pytest.mark.parametrize("env", [
    {"OPENWEATHER_TIMEOUT": "soon"},
    {"FORECAST_MAX_SAMPLES": "many"},
    {"FORECAST_MAX_SAMPLES": "-1"},
])
def test_bad_numbers(env):
    with pytest.raises(ConfigurationError):
        load_settings({"OPENWEATHERMAP_API_KEY": "abc", **env})


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv("OPENWEATHERMAP_API_KEY", "from-env")
    assert load_settings().api_key == "from-env"


def test_log_level():
    assert get_log_level({}) == "INFO"
    assert get_log_level({"LOG_LEVEL": "debug"}) == "DEBUG"
