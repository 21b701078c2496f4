"""Closure signal raised by relay endpoints."""

from __future__ import annotations

from .base import RelayError


class EndpointClosed(RelayError):
    """Raised by a relay endpoint when its peer has closed the connection."""

    def __init__(self, code: int, reason: str = "") -> None:
        super().__init__(f"connection closed code={code} reason={reason!r}")
        self.code = code
        self.reason = reason


__all__ = ["EndpointClosed"]
