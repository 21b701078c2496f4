"""Session handler lifecycle phases."""

from __future__ import annotations

from enum import Enum


class SessionState(str, Enum):
    AWAITING_AUTH = "awaiting_auth"
    UPGRADED = "upgraded"
    UPSTREAM_CONNECTING = "upstream_connecting"
    RELAYING = "relaying"
    CLOSED = "closed"


__all__ = ["SessionState"]
