from __future__ import annotations

from .base import RelayError


class TokenIssueError(RelayError):
    """Raised when the signing primitive fails while issuing a session token."""


__all__ = ["TokenIssueError"]
