"""Shared fixtures for the weather tools test suite."""

from datetime import datetime, timedelta, timezone

import pytest

from core import openweather
from core.config import WeatherSettings
from core.models import AlertReport, CurrentWeather, Forecast, WeatherSample


def ts(year, month, day, hour=0):
    """Unix timestamp for a UTC wall-clock time."""
    return int(datetime(year, month, day, hour, tzinfo=timezone.utc).timestamp())


def make_samples(start, count, step_hours=3, **fields):
    """``count`` samples every ``step_hours`` from ``start`` (a UTC datetime).

    Keyword arguments are lists of per-sample values for WeatherSample fields,
    or a single value repeated for every sample.
    """
    samples = []
    for i in range(count):
        values = {
            name: (value[i] if isinstance(value, list) else value)
            for name, value in fields.items()
        }
        values.setdefault("temperature_min", 10.0)
        values.setdefault("temperature_max", 20.0)
        values.setdefault("humidity_percent", 50)
        values.setdefault("condition_description", "clear sky")
        moment = start + timedelta(hours=i * step_hours)
        samples.append(WeatherSample(timestamp=int(moment.timestamp()), **values))
    return samples


class FakeClient:
    """Stands in for OpenWeatherClient; returns canned records and records calls."""

    def __init__(self, current=None, forecast=None, alerts=None, error=None, max_samples=24):
        self.settings = WeatherSettings(api_key="test-key", forecast_max_samples=max_samples)
        self.current = current
        self.forecast = forecast or Forecast()
        self.alerts = alerts
        self.error = error
        self.calls = []

    def _maybe_fail(self):
        if self.error is not None:
            raise self.error

    def get_current(self, location):
        self.calls.append(("current", location))
        self._maybe_fail()
        return self.current

    def get_forecast(self, location):
        self.calls.append(("forecast", location))
        self._maybe_fail()
        return self.forecast

    def get_alerts(self, latitude, longitude):
        self.calls.append(("alerts", latitude, longitude))
        self._maybe_fail()
        return self.alerts or AlertReport(latitude=latitude, longitude=longitude)


@pytest.fixture
def utc():
    return timezone.utc


@pytest.fixture
def settings():
    return WeatherSettings(api_key="test-key", base_url="https://api.example.test")


@pytest.fixture
def fake_http(monkeypatch):
    """Replace the HTTP transport with a canned JSON payload.

    Returns a dict; set ``fake_http["payload"]`` before the call and read
    ``fake_http["urls"]`` afterwards.
    """
    state = {"payload": None, "urls": []}

    def _fake_get_json(url, timeout):
        state["urls"].append(url)
        return state["payload"]

    monkeypatch.setattr(openweather, "_http_get_json", _fake_get_json)
    return state


@pytest.fixture
def paris_current():
    return CurrentWeather(name="Paris", temperature=18.5, humidity_percent=64, description="broken clouds")
