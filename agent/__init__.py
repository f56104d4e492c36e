# =============================================================================
# agent/__init__.py
# =============================================================================
# Google ADK agent that answers weather questions by calling the MCP tools
# served from tools/mcp_server.py.
#
# The agent holds no weather logic.  It has a system prompt (prompt.py), a
# model (via LiteLlm) and an MCP connection (weather_agent.py).  The LLM
# decides which tool to call; the tools do the work.
# =============================================================================
