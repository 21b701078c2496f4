"""Root of the relay's exception hierarchy."""

from __future__ import annotations


class RelayError(Exception):
    """Base class for relay errors."""


__all__ = ["RelayError"]
