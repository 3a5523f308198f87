from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from chatforge.dependencies import get_openai_client
from chatforge.main import app

TODO_REPLY = (
    "**Building: Todo App**\n\n"
    "A simple todo list.\n\n"
    "**Language/Framework:** JavaScript\n\n"
    "**Code:**\n"
    "```javascript\n"
    'console.log("hi")\n'
    "```\n\n"
    "**Next Steps:**\n"
    "Run it."
)


def completion(content: str | None) -> SimpleNamespace:
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def make_provider(reply: str | None = TODO_REPLY, error: Exception | None = None) -> MagicMock:
    provider = MagicMock()
    if error is not None:
        provider.chat.completions.create = AsyncMock(side_effect=error)
    else:
        provider.chat.completions.create = AsyncMock(return_value=completion(reply))
    return provider


@pytest.fixture
def provider():
    return make_provider()


@pytest.fixture
def client(provider):
    app.dependency_overrides[get_openai_client] = lambda: provider
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
