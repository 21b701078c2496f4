"""Per-session relay state (dataclasses only)."""

from __future__ import annotations

from typing import TYPE_CHECKING
from dataclasses import dataclass

if TYPE_CHECKING:
    from live_relay.relay.endpoint import RelayEndpoint


@dataclass(frozen=True, slots=True)
class Frame:
    """One WebSocket message; `str` payloads are text frames, `bytes` are binary."""

    data: str | bytes

    @property
    def is_text(self) -> bool:
        return isinstance(self.data, str)

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(slots=True)
class DirectionStats:
    """Counters for one relay direction. Written only by that direction's task."""

    label: str
    messages: int = 0
    text_messages: int = 0
    binary_messages: int = 0
    close_code: int | None = None
    error: str | None = None


@dataclass(slots=True)
class RelaySession:
    session_id: str
    client: RelayEndpoint
    upstream: RelayEndpoint


@dataclass(frozen=True, slots=True)
class RelayOutcome:
    first_finished: str
    client_to_upstream: DirectionStats
    upstream_to_client: DirectionStats


__all__ = ["DirectionStats", "Frame", "RelayOutcome", "RelaySession"]
