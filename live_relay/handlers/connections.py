"""Registry of live client connections, used for coordinated shutdown."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from live_relay.relay.endpoint import RelayEndpoint

logger = logging.getLogger(__name__)


class ConnectionRegistry:
    """Concurrency-safe set of upgraded, not-yet-closed client connections.

    One instance is owned by the runtime composition root and handed to every
    session handler and to the shutdown coordinator.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._active: dict[RelayEndpoint, bool] = {}

    async def register(self, conn: RelayEndpoint) -> None:
        async with self._lock:
            if conn in self._active:
                logger.error("connection registered twice: %r", conn)
                return
            self._active[conn] = True

    async def unregister(self, conn: RelayEndpoint) -> bool:
        async with self._lock:
            return self._active.pop(conn, None) is not None

    async def broadcast_close(self, code: int, reason: str) -> int:
        """Close every live connection with `code`/`reason`; returns how many were closed.

        Entries are removed from the registry before closing, so a session's own
        later `unregister` is a no-op.
        """
        async with self._lock:
            snapshot = list(self._active)
            self._active.clear()

        logger.info("Closing %d active WebSocket connection(s)...", len(snapshot))
        closed = 0
        for conn in snapshot:
            try:
                await conn.close(code=code, reason=reason)
            except Exception:
                # The session may already be tearing this connection down.
                logger.debug("close during broadcast failed for %r", conn, exc_info=True)
                continue
            closed += 1
        return closed

    def count(self) -> int:
        return len(self._active)

    def __len__(self) -> int:
        return len(self._active)

    def __contains__(self, conn: object) -> bool:
        return conn in self._active


__all__ = ["ConnectionRegistry"]
