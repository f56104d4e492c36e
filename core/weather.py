# =============================================================================
# core/weather.py  -  Weather Tool Logic (fetch → summarize → text)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   One function per weather tool.  Each one asks the OpenWeatherClient for
#   data and turns it into the short text the MCP tool returns:
#
#     describe_current_weather  →  "Current weather in Paris: 18.2°C, ..."
#     describe_forecast         →  "3-day weather forecast for Paris: ..."
#     describe_alerts           →  "Weather alerts for 48.85, 2.35: ..."
#
# THE SEPARATION OF "FETCH" AND "SUMMARIZE":
#   The client only fetches and parses.  The aggregation lives in
#   core/aggregation.py and never touches the network, so it can be tested
#   with hand-built samples.
#
# ERRORS:
#   WeatherApiError from the client propagates.  tools/mcp_server.py catches
#   it at the tool boundary and turns it into text.
# =============================================================================

from datetime import datetime, tzinfo
from typing import Optional

from core.aggregation import aggregate_daily, format_forecast
from core.models import WeatherAlert
from core.openweather import OpenWeatherClient, build_location

ALERT_TIME_FORMAT = "%Y-%m-%d %H:%M"


def _number(value: float) -> str:
    """20.0 → "20", 21.5 → "21.5"."""
    return str(int(value)) if float(value).is_integer() else repr(float(value))


# =============================================================================
# Current weather
# =============================================================================
def describe_current_weather(
    client: OpenWeatherClient, city: str, country_code: Optional[str] = None
) -> str:
    location = build_location(city, country_code)
    current = client.get_current(location)
    if current is None or not current.has_main:
        return f"No weather data found for {location}."

    return (
        f"Current weather in {current.name}: {_number(current.temperature)}°C, "
        f"{current.description}, Humidity: {current.humidity_percent}%."
    )


# =============================================================================
# Forecast
# =============================================================================
def describe_forecast(
    client: OpenWeatherClient,
    city: str,
    country_code: Optional[str] = None,
    max_samples: Optional[int] = None,
    tz: Optional[tzinfo] = None,
) -> str:
    """Fetch the 3-hour forecast and collapse it into one line per day.

    Args:
        client: Configured OpenWeatherMap client.
        city: City name.
        country_code: Optional ISO country code, e.g. "US".
        max_samples: Samples to aggregate; defaults to the client's
            ``forecast_max_samples`` setting (24, about 3 days).
        tz: Timezone for day boundaries; None means local time.
    """
    location = build_location(city, country_code)
    forecast = client.get_forecast(location)
    if not forecast.samples:
        return f"No forecast data found for {location}."

    if max_samples is None:
        max_samples = client.settings.forecast_max_samples

    summaries = aggregate_daily(forecast.samples, max_samples, tz=tz)
    return format_forecast(forecast.city_name, summaries)


# =============================================================================
# Alerts
# =============================================================================
def format_alert(alert: WeatherAlert, tz: Optional[tzinfo] = None) -> str:
    """Render one alert as a three-line block."""
    description = alert.description if alert.description.strip() else "No description provided"
    tags = f" [{', '.join(alert.tags)}]" if alert.tags else ""
    start = datetime.fromtimestamp(alert.start, tz=tz).strftime(ALERT_TIME_FORMAT)
    end = datetime.fromtimestamp(alert.end, tz=tz).strftime(ALERT_TIME_FORMAT)
    return (
        f"{alert.event}{tags} (from {alert.sender_name})\n"
        f"From: {start} To: {end}\n"
        f"{description}"
    )


def describe_alerts(
    client: OpenWeatherClient,
    latitude: float,
    longitude: float,
    tz: Optional[tzinfo] = None,
) -> str:
    coords = f"{_number(latitude)}, {_number(longitude)}"
    report = client.get_alerts(latitude, longitude)
    if not report.alerts:
        return f"No weather alerts for coordinates: {coords}."

    alerts_text = "\n\n".join(format_alert(a, tz) for a in report.alerts)
    return f"Weather alerts for {coords}:\n\n{alerts_text}"
