from __future__ import annotations

from .base import RelayError


class ConfigurationError(RelayError):
    """Raised at startup when required configuration is missing or invalid."""


__all__ = ["ConfigurationError"]
