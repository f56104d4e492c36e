# =============================================================================
# core/config.py  -  Runtime Settings
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the handful of knobs the weather tools need from environment
#   variables.  Entry points (main.py, tools/mcp_server.py) call
#   load_dotenv() first, so a local .env file works the same as exported
#   variables.
#
# VARIABLES:
#   OPENWEATHERMAP_API_KEY   required, sent as the "appid" query parameter
#   OPENWEATHER_BASE_URL     default https://api.openweathermap.org
#   OPENWEATHER_TIMEOUT      seconds per HTTP request, default 10
#   FORECAST_MAX_SAMPLES     3-hour samples fed to the aggregator, default 24
#   LOG_LEVEL                server log level, default INFO
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_BASE_URL = "https://api.openweathermap.org"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_FORECAST_MAX_SAMPLES = 24      # 3 days x 8 samples per day


class ConfigurationError(Exception):
    """Raised when a required setting is missing or malformed."""


@dataclass(frozen=True)
class WeatherSettings:
    """Everything the OpenWeatherMap client needs to make a request."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    forecast_max_samples: int = DEFAULT_FORECAST_MAX_SAMPLES
    units: str = "metric"              # Output text assumes °C


def load_settings(environ: Optional[Mapping[str, str]] = None) -> WeatherSettings:
    """Build WeatherSettings from ``environ`` (defaults to ``os.environ``).

    Raises:
        ConfigurationError: if the API key is unset or a number won't parse.
    """
    env = os.environ if environ is None else environ

    api_key = env.get("OPENWEATHERMAP_API_KEY", "").strip()
    if not api_key:
        raise ConfigurationError("OPENWEATHERMAP_API_KEY is not set.")

    try:
        timeout = float(env.get("OPENWEATHER_TIMEOUT", DEFAULT_TIMEOUT_SECONDS))
        max_samples = int(env.get("FORECAST_MAX_SAMPLES", DEFAULT_FORECAST_MAX_SAMPLES))
    except ValueError as e:
        raise ConfigurationError(f"Invalid numeric setting: {e}") from e

    if max_samples < 0:
        raise ConfigurationError("FORECAST_MAX_SAMPLES must be >= 0.")

    return WeatherSettings(
        api_key=api_key,
        base_url=env.get("OPENWEATHER_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        timeout_seconds=timeout,
        forecast_max_samples=max_samples,
    )


def get_log_level(environ: Optional[Mapping[str, str]] = None) -> str:
    """Log level name for the MCP server, upper-cased."""
    env = os.environ if environ is None else environ
    return env.get("LOG_LEVEL", "INFO").upper()
