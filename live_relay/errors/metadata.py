from __future__ import annotations

from .base import RelayError


class MetadataError(RelayError):
    """The project metadata file is missing or malformed."""


__all__ = ["MetadataError"]
