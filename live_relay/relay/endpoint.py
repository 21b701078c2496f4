"""Transport-agnostic interface the forwarder reads from and writes to."""

from __future__ import annotations

from typing import Protocol

from live_relay.state.relay import Frame


class RelayEndpoint(Protocol):
    async def receive(self) -> Frame:
        """Return the next frame, or raise `EndpointClosed` once the peer has closed."""
        ...

    async def send(self, frame: Frame) -> None: ...

    async def close(self, *, code: int, reason: str = "") -> None: ...


__all__ = ["RelayEndpoint"]
