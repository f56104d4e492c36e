# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines every MCP tool a client (the ADK agent in agent/, Claude
#   Desktop, an IDE...) can call.  Each tool is a thin wrapper around a
#   core/ function: it logs the call, runs the core function, and turns any
#   failure into a readable message.
#
# HOW IT WORKS (the flow):
#   1. The client calls a tool by name via MCP (e.g., "get_weather_forecast")
#   2. FastMCP routes the call to the decorated function below
#   3. The function hands a core/ call to _run_tool()
#   4. _run_tool() returns the text, or an error message if it raised
#
# TOOLS:
#   get_current_weather   current conditions for a city
#   get_weather_forecast  3-day forecast, one line per day
#   get_weather_alerts    active alerts for a lat/lon pair
#   get_random_number     connectivity check, no API key needed
#
# ERROR POLICY:
#   Tools never raise into the MCP transport.  _run_tool() is the single
#   place where exceptions become text:
#     WeatherApiError  → "Error retrieving <what>: <message>" (+ a hint for
#                        401, 404 and 429 responses)
#     anything else    → "Unexpected error: <message>"
#
# RUNNING THIS SERVER:
#   a) Standalone:        python -m tools.mcp_server
#   b) From the agent:    agent/weather_agent.py spawns it over stdio
# =============================================================================

import logging
import sys
from functools import lru_cache
from typing import Callable, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP

# --- Import core logic ---
# The tools layer depends on core/ and nothing else.
from core.config import get_log_level, load_settings
from core.openweather import OpenWeatherClient, WeatherApiError
from core.random_numbers import random_number
from core.weather import describe_alerts, describe_current_weather, describe_forecast

load_dotenv()

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: the MCP server talks to its client over STDOUT, and a
# stray log line there would corrupt the JSON-RPC stream.
#
# Color codes:
#   CYAN   incoming requests (tool name + parameters)
#   GREEN  responses
#   YELLOW status / errors
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: str) -> str:
    """Log the tool's text response in GREEN, then return it."""
    logging.info(f"{_GREEN}  ← {tool_name} response: {result!r}{_RESET}")
    return result


# =============================================================================
# Shared client
# =============================================================================
# Settings are read on first use rather than at import, so the server still
# starts (and get_random_number still works) without an API key.  A missing
# key surfaces as an error message from the weather tools.
# =============================================================================
@lru_cache(maxsize=1)
def get_client() -> OpenWeatherClient:
    return OpenWeatherClient(load_settings())


# Hints appended to API errors, keyed by HTTP status.
_STATUS_HINTS = {
    401: "Check that OPENWEATHERMAP_API_KEY is valid.",
    404: "Check the location spelling and country code.",
    429: "The API rate limit was reached; try again later.",
}


def _api_error_text(what: str, error: WeatherApiError) -> str:
    text = f"Error retrieving {what}: {error}"
    hint = _STATUS_HINTS.get(error.status)
    return f"{text} {hint}" if hint else text


def _run_tool(tool_name: str, what: str, action: Callable[[], str], **params) -> str:
    """Run one tool body and convert any exception into a message.

    Args:
        tool_name: Name used in the log lines.
        what: Noun for the API error message ("weather", "forecast", "alerts").
        action: Zero-argument callable producing the tool's text.
        **params: Tool parameters, logged with the request.
    """
    _log_request(tool_name, **params)
    try:
        result = action()
    except WeatherApiError as e:
        logging.exception(f"{_YELLOW}HTTP error retrieving {what}.{_RESET}")
        result = _api_error_text(what, e)
    except Exception as e:
        logging.exception(f"{_YELLOW}Unexpected error retrieving {what}.{_RESET}")
        result = f"Unexpected error: {e}"
    return _log_response(tool_name, result)


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
mcp = FastMCP("weather-tools")


# =============================================================================
# TOOL 1: get_current_weather
# =============================================================================
@mcp.tool()
def get_current_weather(city: str, country_code: Optional[str] = None) -> str:
    """Gets current weather conditions for the specified city.

    Args:
        city: The city name to get weather for.
        country_code: Optional: Country code (e.g., 'US', 'UK').

    Returns:
        One sentence with temperature (°C), conditions and humidity.
    """
    return _run_tool(
        "get_current_weather", "weather",
        lambda: describe_current_weather(get_client(), city, country_code),
        city=city, country_code=country_code,
    )


# =============================================================================
# TOOL 2: get_weather_forecast
# =============================================================================
# The API returns forty 3-hour samples.  Only the first 24 are used and they
# are collapsed into one line per day (core/aggregation.py), so the client
# gets about three short lines instead of a raw data dump.
# =============================================================================
@mcp.tool()
def get_weather_forecast(city: str, country_code: Optional[str] = None) -> str:
    """Gets a 3-day weather forecast for the specified city.

    Args:
        city: The city name to get forecast for.
        country_code: Optional: Country code (e.g., 'US', 'UK').

    Returns:
        One line per day: date, min-max temperature (°C), the most common
        condition, and average humidity.
    """
    return _run_tool(
        "get_weather_forecast", "forecast",
        lambda: describe_forecast(get_client(), city, country_code),
        city=city, country_code=country_code,
    )


# =============================================================================
# TOOL 3: get_weather_alerts
# =============================================================================
@mcp.tool()
def get_weather_alerts(latitude: float, longitude: float) -> str:
    """Gets current weather alerts/warnings for the specified coordinates.

    Args:
        latitude: Latitude of the location.
        longitude: Longitude of the location.

    Returns:
        Each alert's event, tags, issuer, validity window and description,
        or a note that there are no alerts.
    """
    return _run_tool(
        "get_weather_alerts", "alerts",
        lambda: describe_alerts(get_client(), latitude, longitude),
        latitude=latitude, longitude=longitude,
    )


# =============================================================================
# TOOL 4: get_random_number
# =============================================================================
# "min" and "max" are the parameter names clients send, so they shadow the
# builtins inside this wrapper.
@mcp.tool()
def get_random_number(min: int = 0, max: int = 100) -> str:
    """Generates a random number between the specified minimum and maximum values.

    Args:
        min: Minimum value (inclusive).
        max: Maximum value (exclusive).
    """
    lower, upper = min, max
    return _run_tool(
        "get_random_number", "random number",
        lambda: str(random_number(lower, upper)),
        min=lower, max=upper,
    )


def main() -> None:
    """Console-script entry point: serve over stdio."""
    _log_status("Starting weather-tools MCP server on stdio")
    mcp.run()


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    main()
