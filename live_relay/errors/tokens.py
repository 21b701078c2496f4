"""Session token errors."""

from __future__ import annotations

from .base import RelayError


class InvalidToken(RelayError):
    """Raised when a session token fails signature, algorithm or timing checks."""


__all__ = ["InvalidToken"]
