# =============================================================================
# core/__init__.py
# =============================================================================
# Business logic for the weather tools: data models, the daily forecast
# aggregator, the OpenWeatherMap client and the text builders.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any other
#   orchestration framework.  The aggregator in particular is pure Python
#   with no I/O, so it can be tested with hand-built samples.
# =============================================================================
