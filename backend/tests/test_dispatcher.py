"""
Tests for forwarding requests to the provider.
"""
import asyncio

import httpx
import openai

from chatforge.pipeline.dispatcher import generate_with_ai
from chatforge.pipeline.prompts.generator import GENERATOR_SYSTEM, build_generation_prompt, format_history
from chatforge.schemas.chat import ConversationTurn
from conftest import TODO_REPLY, make_provider


def test_history_rendered_in_order():
    history = [
        ConversationTurn(role="user", content="make a game", timestamp=1),
        ConversationTurn(role="assistant", content="which one?", timestamp=2),
    ]
    assert format_history(history) == "User: make a game\n\nAssistant: which one?"


def test_prompt_contains_system_history_and_message():
    history = [ConversationTurn(role="user", content="earlier", timestamp=1)]
    prompt = build_generation_prompt("build pong", history)

    assert prompt.startswith(GENERATOR_SYSTEM)
    assert "User: earlier" in prompt
    assert prompt.index("User: earlier") < prompt.index("User Request: build pong")


def test_success_returns_text_and_project():
    provider = make_provider()
    result = asyncio.run(generate_with_ai(provider, "todo app", [], "P1"))

    assert result.response == TODO_REPLY
    assert result.project.id == "P1"
    provider.chat.completions.create.assert_awaited_once()
    kwargs = provider.chat.completions.create.await_args.kwargs
    assert kwargs["temperature"] == 0.7
    assert kwargs["top_p"] == 0.95
    assert kwargs["messages"][0]["role"] == "user"
    assert "User Request: todo app" in kwargs["messages"][0]["content"]


def test_reply_without_code_has_no_project():
    provider = make_provider(reply="Sure, tell me more about what you want.")
    result = asyncio.run(generate_with_ai(provider, "hello"))

    assert result.response == "Sure, tell me more about what you want."
    assert result.project is None


def test_provider_error_falls_back_without_retry():
    error = openai.APIConnectionError(request=httpx.Request("POST", "https://provider.test"))
    provider = make_provider(error=error)

    result = asyncio.run(generate_with_ai(provider, "todo app"))

    assert result.project is None
    assert result.response.startswith("I apologize")
    assert provider.chat.completions.create.await_count == 1


def test_missing_client_falls_back():
    result = asyncio.run(generate_with_ai(None, "todo app"))

    assert result.project is None
    assert "No provider API key configured" in result.response


def test_empty_reply_falls_back():
    result = asyncio.run(generate_with_ai(make_provider(reply=""), "todo app"))

    assert result.project is None
    assert "empty response" in result.response


def test_any_provider_exception_falls_back():
    provider = make_provider(error=RuntimeError("quota exceeded"))

    result = asyncio.run(generate_with_ai(provider, "todo app"))

    assert result.project is None
    assert "quota exceeded" in result.response
    assert provider.chat.completions.create.await_count == 1
