"""uvicorn server with a connection-draining shutdown sequence."""

from __future__ import annotations

import socket
import signal
import asyncio
import logging
from types import FrameType

import uvicorn

from live_relay.handlers.connections import ConnectionRegistry
from live_relay.config.websocket import WS_CLOSE_GOING_AWAY_CODE, WS_CLOSE_SHUTDOWN_REASON

logger = logging.getLogger(__name__)


class RelayServer(uvicorn.Server):
    """On the first SIGINT/SIGTERM, send going-away closes to every live client
    before letting uvicorn stop the listener (bounded by
    `timeout_graceful_shutdown`). A second signal falls through to uvicorn's
    own handling and forces exit.
    """

    def __init__(self, config: uvicorn.Config, *, connections: ConnectionRegistry) -> None:
        super().__init__(config)
        self._connections = connections
        self._loop: asyncio.AbstractEventLoop | None = None
        self._draining = False
        self._drain_task: asyncio.Task | None = None

    async def serve(self, sockets: list[socket.socket] | None = None) -> None:
        self._loop = asyncio.get_running_loop()
        await super().serve(sockets=sockets)

    def handle_exit(self, sig: int, frame: FrameType | None) -> None:
        if self._draining or self._loop is None:
            super().handle_exit(sig, frame)
            return
        self._draining = True
        logger.info("%s signal received: starting graceful shutdown...", signal.Signals(sig).name)
        self._loop.call_soon_threadsafe(self._start_drain)

    def _start_drain(self) -> None:
        self._drain_task = asyncio.ensure_future(self.drain())

    async def drain(self) -> int:
        try:
            closed = await self._connections.broadcast_close(WS_CLOSE_GOING_AWAY_CODE, WS_CLOSE_SHUTDOWN_REASON)
            logger.info("Closed %d WebSocket connection(s)", closed)
            return closed
        finally:
            self.should_exit = True


__all__ = ["RelayServer"]
