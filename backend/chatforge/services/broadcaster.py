import asyncio
import logging

from chatforge.schemas.project import CodeUpdate, Project
from chatforge.services.connection_registry import Channel, ConnectionRegistry

logger = logging.getLogger(__name__)

CODE_UPDATE_EVENT = "codeUpdate"
SEND_TIMEOUT_SECONDS = 2.0


class UpdateBroadcaster:
    """Pushes code updates to every connected client, at most once.

    Sends run concurrently and each one is bounded by ``send_timeout``, so a
    stalled client neither delays the others nor holds up the caller for
    longer than that. There is no acknowledgment, no per-client filtering and
    no backlog: clients match ``projectId`` against their own active project,
    and a client that connects later only sees later updates.
    """

    def __init__(self, registry: ConnectionRegistry, send_timeout: float = SEND_TIMEOUT_SECONDS):
        self.registry = registry
        self.send_timeout = send_timeout

    async def _send(self, channel: Channel, payload: dict) -> bool:
        try:
            await asyncio.wait_for(channel.send(CODE_UPDATE_EVENT, payload), timeout=self.send_timeout)
            return True
        except Exception:
            logger.warning("Dropping client %s after failed send", channel.id, exc_info=True)
            self.registry.disconnect(channel)
            return False

    async def broadcast(self, project: Project) -> int:
        payload = CodeUpdate(project_id=project.id, code=project.code).model_dump(by_alias=True)
        results = await asyncio.gather(*(self._send(channel, payload) for channel in self.registry.channels()))
        delivered = sum(results)
        logger.debug("Broadcast %s for project %s to %d client(s)", CODE_UPDATE_EVENT, project.id, delivered)
        return delivered
