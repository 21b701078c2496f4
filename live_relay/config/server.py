"""HTTP listener configuration."""

from __future__ import annotations

from pathlib import Path

ENV_HOST = "HOST"
DEFAULT_HOST = "0.0.0.0"

ENV_PORT = "PORT"
DEFAULT_PORT = 8081

ENV_SHUTDOWN_GRACE_S = "SHUTDOWN_GRACE_S"
DEFAULT_SHUTDOWN_GRACE_S = 10.0

ENV_METADATA_PATH = "METADATA_PATH"
DEFAULT_METADATA_PATH = Path("deepgram.toml")
METADATA_SECTION = "meta"

CORS_ALLOW_ORIGINS = ["*"]
CORS_ALLOW_METHODS = ["GET", "POST", "OPTIONS"]
CORS_ALLOW_HEADERS = ["Content-Type"]

HTTP_ERROR_INTERNAL = "INTERNAL_SERVER_ERROR"

__all__ = [
    "CORS_ALLOW_HEADERS",
    "CORS_ALLOW_METHODS",
    "CORS_ALLOW_ORIGINS",
    "DEFAULT_HOST",
    "DEFAULT_METADATA_PATH",
    "DEFAULT_PORT",
    "DEFAULT_SHUTDOWN_GRACE_S",
    "ENV_HOST",
    "ENV_METADATA_PATH",
    "ENV_PORT",
    "ENV_SHUTDOWN_GRACE_S",
    "HTTP_ERROR_INTERNAL",
    "METADATA_SECTION",
]
