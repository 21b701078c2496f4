"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from live_relay.config.websocket import WS_CLOSE_GOING_AWAY_CODE, WS_CLOSE_SHUTDOWN_REASON

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from live_relay.state.settings import AppSettings
    from live_relay.handlers.tokens import TokenIssuer
    from live_relay.handlers.connections import ConnectionRegistry


@dataclass(slots=True)
class RuntimeDeps:
    connections: ConnectionRegistry
    tokens: TokenIssuer
    settings: AppSettings

    async def shutdown(self) -> None:
        try:
            closed = await self.connections.broadcast_close(WS_CLOSE_GOING_AWAY_CODE, WS_CLOSE_SHUTDOWN_REASON)
        except Exception:
            logger.exception("runtime shutdown failed")
            return
        if closed:
            logger.info("runtime shutdown closed %d lingering connection(s)", closed)


__all__ = ["RuntimeDeps"]
