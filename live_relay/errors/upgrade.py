from __future__ import annotations

from .base import RelayError


class UpgradeFailed(RelayError):
    """The WebSocket handshake with the client could not be completed."""


__all__ = ["UpgradeFailed"]
