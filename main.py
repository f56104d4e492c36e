# =============================================================================
# main.py  -  Entry Point for the Weather Assistant Agent
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads .env (OPENWEATHERMAP_API_KEY, OPENROUTER_API_KEY, ...)
#   2. Creates the Google ADK agent (agent/weather_agent.py), which spawns
#      the MCP tool server (tools/mcp_server.py) as a subprocess
#   3. Reads questions from the terminal, streams the agent's events, and
#      prints the final answer
#
# To use the tools without the agent, run the server directly and connect
# any MCP client to it:
#   uv run python -m tools.mcp_server
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Must happen BEFORE creating the agent: LiteLlm reads its API key from the
# environment when it initializes, and the MCP subprocess inherits ours.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.weather_agent import create_agent

APP_NAME = "weather_assistant"
USER_ID = "local_user"

EXIT_COMMANDS = ("quit", "exit", "q")


async def ask(runner: Runner, session_id: str, question: str) -> str:
    """Send one question to the agent and return its final text answer.

    Tool calls are echoed as they happen so the user can see which MCP tool
    the model picked.
    """
    message = types.Content(role="user", parts=[types.Part(text=question)])
    answer = ""

    async for event in runner.run_async(user_id=USER_ID, session_id=session_id, new_message=message):
        for part in (event.content.parts if event.content else None) or []:
            if getattr(part, "function_call", None):
                print(f"  🔧 {part.function_call.name}")
            if getattr(part, "text", None):
                answer = part.text

    return answer


async def run_agent():
    """Run the weather assistant interactively until the user quits."""
    session_service = InMemorySessionService()
    runner = Runner(agent=create_agent(), app_name=APP_NAME, session_service=session_service)
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("🌦  Weather assistant ready. Ask about current weather, a 3-day forecast,")
    print("   or alerts. Type 'quit' to exit.")

    while True:
        try:
            question = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            break

        if question.lower() in EXIT_COMMANDS:
            break
        if not question:
            continue

        answer = await ask(runner, session.id, question)
        print(f"\n🤖 {answer or 'No response generated.'}")

    print("\n👋 Goodbye!")


if __name__ == "__main__":
    asyncio.run(run_agent())
