"""Bookkeeping for connected realtime clients.

One registry lives for the lifetime of the server process. Membership only
changes on connect/disconnect and is read as a snapshot when broadcasting;
everything runs on the event loop, so no locking is involved.
"""
import asyncio
import logging
import uuid
from typing import Any, Protocol

from fastapi import WebSocket

from chatforge.utils.sse import sse_event

logger = logging.getLogger(__name__)


class Channel(Protocol):
    id: str

    async def send(self, event: str, data: Any) -> None: ...


class WebSocketChannel:
    def __init__(self, websocket: WebSocket):
        self.id = uuid.uuid4().hex
        self.websocket = websocket

    async def send(self, event: str, data: Any) -> None:
        await self.websocket.send_json({"event": event, "data": data})


class SSEChannel:
    """Buffers preformatted SSE frames until the stream response drains them."""

    def __init__(self, max_pending: int = 100):
        self.id = uuid.uuid4().hex
        self.queue: asyncio.Queue[str] = asyncio.Queue(maxsize=max_pending)

    async def send(self, event: str, data: Any) -> None:
        # Raises QueueFull for a stalled reader; the broadcaster drops it.
        self.queue.put_nowait(sse_event(event, data))


class ConnectionRegistry:
    def __init__(self):
        self._channels: dict[str, Channel] = {}

    def connect(self, channel: Channel) -> None:
        self._channels[channel.id] = channel
        logger.info("Client connected: %s (%d active)", channel.id, len(self._channels))

    def disconnect(self, channel: Channel) -> None:
        if self._channels.pop(channel.id, None) is not None:
            logger.info("Client disconnected: %s (%d active)", channel.id, len(self._channels))

    def channels(self) -> list[Channel]:
        return list(self._channels.values())

    def __len__(self) -> int:
        return len(self._channels)

    def __contains__(self, channel: Channel) -> bool:
        return channel.id in self._channels
