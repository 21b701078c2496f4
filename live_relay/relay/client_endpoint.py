"""Relay endpoint backed by the browser's (Starlette) WebSocket."""

from __future__ import annotations

from fastapi import WebSocket
from fastapi.websockets import WebSocketState

from live_relay.errors import EndpointClosed
from live_relay.state.relay import Frame
from live_relay.config.websocket import WS_CLOSE_NORMAL_CODE


class ClientEndpoint:
    def __init__(self, ws: WebSocket) -> None:
        self._ws = ws
        self._closed = False

    @property
    def websocket(self) -> WebSocket:
        return self._ws

    async def receive(self) -> Frame:
        if self._ws.client_state == WebSocketState.DISCONNECTED:
            raise EndpointClosed(WS_CLOSE_NORMAL_CODE, "client already disconnected")
        message = await self._ws.receive()
        if message["type"] == "websocket.disconnect":
            raise EndpointClosed(int(message.get("code") or WS_CLOSE_NORMAL_CODE), message.get("reason") or "")

        text = message.get("text")
        if text is not None:
            return Frame(text)
        return Frame(message.get("bytes") or b"")

    async def send(self, frame: Frame) -> None:
        if frame.is_text:
            await self._ws.send_text(frame.data)  # type: ignore[arg-type]
        else:
            await self._ws.send_bytes(frame.data)  # type: ignore[arg-type]

    async def close(self, *, code: int, reason: str = "") -> None:
        if self._closed:
            return
        self._closed = True
        if self._ws.application_state == WebSocketState.DISCONNECTED:
            return
        await self._ws.close(code=code, reason=reason)

    def __repr__(self) -> str:
        client = self._ws.client
        peer = f"{client.host}:{client.port}" if client is not None else "unknown"
        return f"ClientEndpoint(peer={peer})"


__all__ = ["ClientEndpoint"]
