from fastapi import Request
from openai import AsyncOpenAI

from chatforge.config import settings
from chatforge.services.broadcaster import UpdateBroadcaster
from chatforge.services.connection_registry import ConnectionRegistry


def get_openai_client() -> AsyncOpenAI | None:
    """Provider client, or None when no API key is configured."""
    if not settings.openai_api_key:
        return None
    kwargs: dict = {
        "api_key": settings.openai_api_key,
        "timeout": settings.openai_timeout,
        "max_retries": 0,
    }
    if settings.openai_base_url:
        kwargs["base_url"] = settings.openai_base_url
    return AsyncOpenAI(**kwargs)


def get_connection_registry(request: Request) -> ConnectionRegistry:
    return request.app.state.connections


def get_broadcaster(request: Request) -> UpdateBroadcaster:
    return UpdateBroadcaster(request.app.state.connections)
