from __future__ import annotations

from .base import RelayError


class AuthRejected(RelayError):
    """No offered subprotocol carried a valid session token."""


__all__ = ["AuthRejected"]
