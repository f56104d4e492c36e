# =============================================================================
# core/openweather.py  -  OpenWeatherMap HTTP Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Talks to three OpenWeatherMap endpoints and turns their JSON into the
#   dataclasses in core/models.py:
#
#     /data/2.5/weather   → CurrentWeather
#     /data/2.5/forecast  → Forecast (list of 3-hour WeatherSample)
#     /data/3.0/onecall   → AlertReport
#
# ERRORS:
#   Anything that goes wrong on the wire (HTTP status, DNS, timeout, a body
#   that isn't JSON) is raised as WeatherApiError.  Turning that into text
#   for the user is the tool layer's job, not this module's.
#
# PARSING:
#   The parse_* functions are pure (dict in, dataclass out) and tolerate
#   missing or null fields by falling back to the dataclass defaults.
# =============================================================================

import json
import logging
import socket
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Optional

from core.config import WeatherSettings
from core.models import (
    AlertReport,
    CurrentWeather,
    Forecast,
    WeatherAlert,
    WeatherSample,
)

logger = logging.getLogger(__name__)


class WeatherApiError(Exception):
    """The weather API could not be reached or returned an unusable response."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


def build_location(city: str, country_code: Optional[str] = None) -> str:
    """``"Paris"`` or ``"Paris,FR"`` - the ``q`` parameter OpenWeatherMap expects."""
    if country_code is None or not country_code.strip():
        return city
    return f"{city},{country_code}"


# =============================================================================
# Transport
# =============================================================================
def _http_get_json(url: str, timeout: float) -> Any:
    """GET ``url`` and decode the JSON body.

    Raises:
        WeatherApiError: on HTTP errors, network failures or invalid JSON.
    """
    req = urllib.request.Request(url, headers={"Accept": "application/json"})
    try:
        with urllib.request.urlopen(req, timeout=timeout) as response:
            body = response.read().decode("utf-8")
    except urllib.error.HTTPError as e:
        raise WeatherApiError(
            f"Response status code does not indicate success: {e.code} ({e.reason}).",
            status=e.code,
        ) from e
    except urllib.error.URLError as e:
        raise WeatherApiError(f"Could not reach weather service: {e.reason}") from e
    except (socket.timeout, TimeoutError) as e:
        raise WeatherApiError(f"Request timed out after {timeout:g}s.") from e

    try:
        return json.loads(body) if body.strip() else None
    except json.JSONDecodeError as e:
        raise WeatherApiError(f"Invalid JSON from weather service: {e}") from e


def _redact(url: str) -> str:
    """Hide the API key before a URL reaches the logs."""
    parts = urllib.parse.urlsplit(url)
    query = [
        (k, "***" if k == "appid" else v)
        for k, v in urllib.parse.parse_qsl(parts.query)
    ]
    return urllib.parse.urlunsplit(parts._replace(query=urllib.parse.urlencode(query)))


# =============================================================================
# Parsing (pure: dict → dataclass)
# =============================================================================
def _first_description(item: dict) -> str:
    weather = item.get("weather") or []
    if not weather:
        return ""
    return (weather[0] or {}).get("description") or ""


def parse_sample(item: dict) -> WeatherSample:
    """One entry of the forecast ``list`` array."""
    main = item.get("main") or {}
    return WeatherSample(
        timestamp=int(item.get("dt") or 0),
        temperature=float(main.get("temp") or 0.0),
        temperature_min=float(main.get("temp_min") or 0.0),
        temperature_max=float(main.get("temp_max") or 0.0),
        humidity_percent=int(main.get("humidity") or 0),
        condition_description=_first_description(item),
    )


def parse_forecast(data: Optional[dict]) -> Forecast:
    if not data:
        return Forecast()
    city = data.get("city") or {}
    return Forecast(
        city_name=city.get("name") or "",
        samples=[parse_sample(item) for item in data.get("list") or []],
    )


def parse_current(data: Optional[dict]) -> Optional[CurrentWeather]:
    if not data:
        return None
    main = data.get("main")
    return CurrentWeather(
        name=data.get("name") or "",
        temperature=float((main or {}).get("temp") or 0.0),
        humidity_percent=int((main or {}).get("humidity") or 0),
        description=_first_description(data),
        has_main=main is not None,
    )


def parse_alerts(data: Optional[dict], latitude: float, longitude: float) -> AlertReport:
    alerts = []
    for raw in (data or {}).get("alerts") or []:
        alerts.append(WeatherAlert(
            sender_name=raw.get("sender_name") or "",
            event=raw.get("event") or "",
            start=int(raw.get("start") or 0),
            end=int(raw.get("end") or 0),
            description=raw.get("description") or "",
            tags=list(raw.get("tags") or []),
        ))
    return AlertReport(latitude=latitude, longitude=longitude, alerts=alerts)


# =============================================================================
# Client
# =============================================================================
class OpenWeatherClient:
    """Thin client over the OpenWeatherMap REST API.

    Holds only immutable settings, so one instance can serve every tool call.
    """

    def __init__(self, settings: WeatherSettings):
        self.settings = settings

    def _url(self, path: str, **params: Any) -> str:
        query = urllib.parse.urlencode({
            **params,
            "appid": self.settings.api_key,
            "units": self.settings.units,
        })
        return f"{self.settings.base_url}{path}?{query}"

    def _get(self, path: str, **params: Any) -> Any:
        url = self._url(path, **params)
        logger.debug("GET %s", _redact(url))
        return _http_get_json(url, self.settings.timeout_seconds)

    def get_current(self, location: str) -> Optional[CurrentWeather]:
        """Current conditions for ``location`` (``"City"`` or ``"City,CC"``)."""
        return parse_current(self._get("/data/2.5/weather", q=location))

    def get_forecast(self, location: str) -> Forecast:
        """5-day / 3-hour forecast for ``location``."""
        return parse_forecast(self._get("/data/2.5/forecast", q=location))

    def get_alerts(self, latitude: float, longitude: float) -> AlertReport:
        """Active weather alerts for a coordinate pair (One Call 3.0)."""
        data = self._get("/data/3.0/onecall", lat=latitude, lon=longitude)
        return parse_alerts(data, latitude, longitude)
