# =============================================================================
# agent/weather_agent.py  -  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the weather assistant agent: an LLM (via LiteLlm) wired to the
#   FastMCP tool server in tools/mcp_server.py.
#
# ARCHITECTURE:
#   agent/ → orchestration only (prompt + model + tool connection)
#   tools/ → MCP wrappers only
#   core/  → actual logic
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_weather_assistant_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"


def get_mcp_server_path() -> str:
    """Absolute path of tools/mcp_server.py, independent of the working directory."""
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(project_root, "tools", "mcp_server.py")


def create_agent() -> Agent:
    """Create and configure the weather assistant agent.

    Steps:
      1. Point an MCPToolset at our FastMCP server (spawned over stdio)
      2. Pick the model (AGENT_MODEL env var, GPT-4o via OpenRouter by default)
      3. Build the ADK Agent with the system prompt and tools

    Returns:
        A configured Google ADK Agent instance.
    """

    # =========================================================================
    # Step 1: Configure the MCP tool connection
    # =========================================================================
    # ADK starts the server as a subprocess with "uv run" so it shares the
    # project's virtual environment (fastmcp, core/, etc.), then talks to it
    # over stdin/stdout.  OPENWEATHERMAP_API_KEY is inherited from our env.
    # =========================================================================
    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", get_mcp_server_path()],
        ),
    )

    # =========================================================================
    # Step 2: Create the ADK Agent
    # =========================================================================
    # LiteLlm lets ADK use any provider.  The default string routes through
    # OpenRouter and reads OPENROUTER_API_KEY from the environment.
    # Set AGENT_MODEL to e.g. "openrouter/openai/gpt-4o-mini" to switch.
    # =========================================================================
    model_name = os.environ.get("AGENT_MODEL", DEFAULT_MODEL)

    agent = Agent(
        name="weather_assistant",                              # Used in logs and traces
        model=LiteLlm(model=model_name),
        instruction=get_weather_assistant_prompt(),
        tools=[mcp_tools],
    )

    return agent
