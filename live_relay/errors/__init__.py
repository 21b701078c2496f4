"""Shared error types for the live transcription relay."""

from .auth import AuthRejected
from .base import RelayError
from .tokens import InvalidToken
from .upgrade import UpgradeFailed
from .metadata import MetadataError
from .endpoint import EndpointClosed
from .upstream import UpstreamUnavailable
from .token_issue import TokenIssueError
from .configuration import ConfigurationError

__all__ = [
    "AuthRejected",
    "ConfigurationError",
    "EndpointClosed",
    "InvalidToken",
    "MetadataError",
    "RelayError",
    "TokenIssueError",
    "UpgradeFailed",
    "UpstreamUnavailable",
]
