# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of every piece of weather data that
# flows from the OpenWeatherMap payload, through the aggregator, to the text
# a tool returns.  They carry no behavior.
#
# OPTIONAL FIELDS:
#   The upstream JSON is loosely structured: a field can be missing or null.
#   Every field that comes from the API therefore has an explicit default,
#   so a partial payload still produces a well-formed record.
# =============================================================================

from dataclasses import dataclass, field
from datetime import date


# -----------------------------------------------------------------------------
# WeatherSample - one 3-hour forecast entry
# -----------------------------------------------------------------------------
# The forecast endpoint returns 40 of these (5 days x 8 per day).  The
# aggregator groups them into calendar days.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class WeatherSample:
    """A single timestamped weather observation or forecast point."""

    timestamp: int                     # Seconds since the Unix epoch (UTC instant)
    temperature: float = 0.0           # °C
    temperature_min: float = 0.0       # °C, lower bound for this sample
    temperature_max: float = 0.0       # °C, upper bound for this sample
    humidity_percent: int = 0          # 0-100
    condition_description: str = ""    # e.g. "light rain"


# -----------------------------------------------------------------------------
# DailySummary - the aggregator's output, one per calendar day
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class DailySummary:
    """One day of forecast samples reduced to a single record."""

    calendar_date: date
    min_temperature: float
    max_temperature: float
    average_humidity: float
    representative_condition: str
    sample_count: int = 0              # How many samples fed this summary


# -----------------------------------------------------------------------------
# Forecast - parsed /data/2.5/forecast response
# -----------------------------------------------------------------------------
@dataclass
class Forecast:
    """City name plus the ordered list of 3-hour samples."""

    city_name: str = ""
    samples: list[WeatherSample] = field(default_factory=list)


# -----------------------------------------------------------------------------
# CurrentWeather - parsed /data/2.5/weather response
# -----------------------------------------------------------------------------
@dataclass
class CurrentWeather:
    """Conditions right now for a named location."""

    name: str = ""
    temperature: float = 0.0
    humidity_percent: int = 0
    description: str = ""
    has_main: bool = True              # False when the payload had no "main" block


# -----------------------------------------------------------------------------
# WeatherAlert / AlertReport - parsed /data/3.0/onecall response
# -----------------------------------------------------------------------------
@dataclass
class WeatherAlert:
    """A government-issued weather warning."""

    sender_name: str = ""
    event: str = ""
    start: int = 0                     # Unix seconds
    end: int = 0                       # Unix seconds
    description: str = ""
    tags: list[str] = field(default_factory=list)


@dataclass
class AlertReport:
    """All active alerts for a coordinate pair."""

    latitude: float
    longitude: float
    alerts: list[WeatherAlert] = field(default_factory=list)
