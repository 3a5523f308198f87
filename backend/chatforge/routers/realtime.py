import asyncio
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from fastapi.responses import StreamingResponse

from chatforge.dependencies import get_connection_registry
from chatforge.services.connection_registry import ConnectionRegistry, SSEChannel, WebSocketChannel
from chatforge.utils.sse import sse_comment

router = APIRouter(tags=["realtime"])

KEEPALIVE_SECONDS = 15.0


@router.websocket("/ws")
async def code_updates_ws(websocket: WebSocket):
    registry: ConnectionRegistry = websocket.app.state.connections
    await websocket.accept()
    channel = WebSocketChannel(websocket)
    registry.connect(channel)
    try:
        # Inbound frames carry no business meaning; read only to notice disconnects.
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        pass
    finally:
        registry.disconnect(channel)


async def stream_channel(
    registry: ConnectionRegistry,
    channel: SSEChannel,
    keepalive: float = KEEPALIVE_SECONDS,
) -> AsyncGenerator[str, None]:
    """Drain an SSE channel until the registry drops it.

    Ending the stream lets the browser's EventSource reconnect with a fresh
    channel instead of idling on one that no longer receives updates.
    """
    try:
        yield sse_comment("connected")
        while channel in registry or not channel.queue.empty():
            try:
                yield await asyncio.wait_for(channel.queue.get(), timeout=keepalive)
            except asyncio.TimeoutError:
                if channel in registry:
                    yield sse_comment("keepalive")
    finally:
        registry.disconnect(channel)


@router.get("/api/events")
async def code_updates_sse(registry: ConnectionRegistry = Depends(get_connection_registry)):
    channel = SSEChannel()
    registry.connect(channel)
    return StreamingResponse(stream_channel(registry, channel), media_type="text/event-stream")
