# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP clients and core/.  Each
#   tool:
#     1. Calls a function from core/
#     2. Logs the request and response to stderr
#     3. Turns any exception into a readable error message
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT aggregate or parse weather data (that's in core/)
#   - They do NOT know about Google ADK (any MCP client can call them)
# =============================================================================
