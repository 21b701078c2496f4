"""Configuration module exports (env names and defaults only)."""

from .auth import TOKEN_ALGORITHM, WS_SUBPROTOCOL_PREFIX
from .websocket import WS_ENDPOINT_PATH

__all__ = [
    "TOKEN_ALGORITHM",
    "WS_ENDPOINT_PATH",
    "WS_SUBPROTOCOL_PREFIX",
]
