"""Handshake rejection helpers for the relay endpoint."""

from __future__ import annotations

import logging

from fastapi import WebSocket
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)

DENIAL_RESPONSE_EXTENSION = "websocket.http.response"


async def reject_unauthorized(ws: WebSocket) -> None:
    """Refuse the handshake with HTTP 401 without ever upgrading the transport."""
    extensions = ws.scope.get("extensions") or {}
    try:
        if DENIAL_RESPONSE_EXTENSION in extensions:
            await ws.send_denial_response(PlainTextResponse("Unauthorized", status_code=401))
            return
        # Without the denial extension the server answers a pre-accept close with 403.
        await ws.close()
    except Exception:
        logger.debug("WebSocket rejection failed", exc_info=True)


__all__ = ["reject_unauthorized"]
