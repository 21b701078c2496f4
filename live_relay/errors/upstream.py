from __future__ import annotations

from .base import RelayError


class UpstreamUnavailable(RelayError):
    """Dialing the upstream speech service failed."""


__all__ = ["UpstreamUnavailable"]
