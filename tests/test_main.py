"""Tests for the interactive entry point's event handling."""

import asyncio
from types import SimpleNamespace

import main


class StubRunner:
    """Yields canned ADK-style events and records the request."""

    def __init__(self, events):
        self.events = events
        self.requests = []

    async def run_async(self, user_id, session_id, new_message):
        self.requests.append((user_id, session_id, new_message))
        for event in self.events:
            yield event


def _event(*parts):
    return SimpleNamespace(content=SimpleNamespace(parts=list(parts)))


def test_ask_returns_last_text_and_echoes_tool_calls(capsys):
    runner = StubRunner([
        _event(SimpleNamespace(text=None, function_call=SimpleNamespace(name="get_weather_forecast"))),
        SimpleNamespace(content=None),
        _event(SimpleNamespace(text="Rain on Tuesday.", function_call=None)),
    ])

    answer = asyncio.run(main.ask(runner, "s1", "Will it rain in Paris?"))

    assert answer == "Rain on Tuesday."
    assert "get_weather_forecast" in capsys.readouterr().out
    user_id, session_id, message = runner.requests[0]
    assert (user_id, session_id) == (main.USER_ID, "s1")
    assert message.parts[0].text == "Will it rain in Paris?"


def test_ask_without_text_returns_empty():
    assert asyncio.run(main.ask(StubRunner([]), "s1", "hello")) == ""
