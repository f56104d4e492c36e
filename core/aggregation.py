# =============================================================================
# core/aggregation.py  -  Daily Forecast Aggregation
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   The forecast endpoint returns weather in 3-hour steps.  A person asking
#   "what's the weather this week?" wants one line per day, not eight.
#   aggregate_daily() turns the flat sample list into DailySummary records:
#
#     samples (3h)  ──►  contiguous same-date runs  ──►  one summary per run
#
# GROUPING RULE:
#   Samples are grouped by their LOCAL calendar date, in one left-to-right
#   pass.  A new bucket opens only when the date changes, so a bucket is never
#   re-opened: if the same date shows up again after a different one, it
#   becomes a second summary.  Upstream data is time-sorted, so this does not
#   happen in practice.
#
# TRUNCATION:
#   The caller passes max_samples (24 for the forecast tool, roughly 3 days at
#   3-hour resolution).  Only the first max_samples raw samples are grouped.
#   The cap counts samples, not days.
#
# FORMATTING:
#   format_daily_summary() and format_forecast() render the summaries as the
#   text the MCP tool returns.
# =============================================================================

from collections import Counter
from datetime import date, datetime, tzinfo
from decimal import ROUND_HALF_UP, Decimal
from itertools import islice
from typing import Iterable, Optional

from core.models import DailySummary, WeatherSample


def local_date(timestamp: int, tz: Optional[tzinfo] = None) -> date:
    """Calendar date of a Unix timestamp in ``tz`` (process local time if None)."""
    return datetime.fromtimestamp(timestamp, tz=tz).date()


def aggregate_daily(
    samples: Iterable[WeatherSample],
    max_samples: int,
    tz: Optional[tzinfo] = None,
) -> list[DailySummary]:
    """Group samples into per-day summaries.

    Args:
        samples: Weather samples ordered by timestamp.
        max_samples: How many samples from the front of ``samples`` to use.
        tz: Timezone used to decide which calendar day a sample belongs to.
            ``None`` uses the process local timezone.

    Returns:
        One DailySummary per contiguous run of same-date samples, in input
        order.  Empty when ``samples`` is empty or ``max_samples`` is 0.
    """
    if max_samples < 0:
        raise ValueError(f"max_samples must be >= 0, got {max_samples}")

    summaries: list[DailySummary] = []
    current_date: Optional[date] = None
    bucket: list[WeatherSample] = []

    for sample in islice(samples, max_samples):
        sample_date = local_date(sample.timestamp, tz)

        if sample_date != current_date:
            if bucket:
                summaries.append(summarize_day(current_date, bucket))
                bucket = []
            current_date = sample_date

        bucket.append(sample)

    # Close the last day
    if bucket:
        summaries.append(summarize_day(current_date, bucket))

    return summaries


def summarize_day(calendar_date: date, bucket: list[WeatherSample]) -> DailySummary:
    """Reduce one day's samples to min/max temperature, mean humidity and mode condition.

    ``bucket`` must be non-empty.  Counter keeps insertion order for equal
    counts, so most_common() breaks ties by first appearance.
    """
    conditions = Counter(s.condition_description for s in bucket)
    representative, _ = conditions.most_common(1)[0]

    return DailySummary(
        calendar_date=calendar_date,
        min_temperature=min(s.temperature_min for s in bucket),
        max_temperature=max(s.temperature_max for s in bucket),
        average_humidity=sum(s.humidity_percent for s in bucket) / len(bucket),
        representative_condition=representative,
        sample_count=len(bucket),
    )


# =============================================================================
# Formatting
# =============================================================================
# Fixed English date format ("Monday, July 07"), one decimal for temperatures,
# whole percent for humidity.  Halves round away from zero (18.25 → "18.3",
# 52.5 → "53"), not to even as format(x, ".1f") does.
# =============================================================================
def round_half_up(value: float, places: int = 0) -> str:
    """Format ``value`` with ``places`` decimals, rounding halves away from zero."""
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def format_daily_summary(summary: DailySummary) -> str:
    """Render one day as a single line of text."""
    return (
        f"{summary.calendar_date:%A, %B %d}: "
        f"{round_half_up(summary.min_temperature, 1)}°C - "
        f"{round_half_up(summary.max_temperature, 1)}°C, "
        f"{summary.representative_condition}, "
        f"Avg Humidity: {round_half_up(summary.average_humidity)}%"
    )


def format_forecast(city_name: str, summaries: list[DailySummary]) -> str:
    """Render the full forecast response, days separated by blank lines."""
    lines = "\n\n".join(format_daily_summary(s) for s in summaries)
    return f"3-day weather forecast for {city_name}:\n\n{lines}"
