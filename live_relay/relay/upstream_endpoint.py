"""Relay endpoint backed by the upstream `websockets` client connection."""

from __future__ import annotations

from websockets.exceptions import ConnectionClosed
from websockets.asyncio.client import ClientConnection

from live_relay.errors import EndpointClosed
from live_relay.state.relay import Frame
from live_relay.config.websocket import WS_CLOSE_ABNORMAL_CODE


class UpstreamEndpoint:
    def __init__(self, conn: ClientConnection) -> None:
        self._conn = conn
        self._closed = False

    @property
    def connection(self) -> ClientConnection:
        return self._conn

    async def receive(self) -> Frame:
        try:
            data = await self._conn.recv()
        except ConnectionClosed as exc:
            if exc.rcvd is None:
                raise EndpointClosed(WS_CLOSE_ABNORMAL_CODE, "no close frame received") from exc
            raise EndpointClosed(exc.rcvd.code, exc.rcvd.reason) from exc
        return Frame(data)

    async def send(self, frame: Frame) -> None:
        await self._conn.send(frame.data)

    async def close(self, *, code: int, reason: str = "") -> None:
        if self._closed:
            return
        self._closed = True
        await self._conn.close(code=code, reason=reason)

    def __repr__(self) -> str:
        return f"UpstreamEndpoint(id={self._conn.id})"


__all__ = ["UpstreamEndpoint"]
