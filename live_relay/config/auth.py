"""Session token configuration."""

from __future__ import annotations

ENV_SESSION_TOKEN_TTL_S = "SESSION_TOKEN_TTL_S"
DEFAULT_SESSION_TOKEN_TTL_S = 3600.0

# Symmetric scheme only; anything else in the token header is rejected.
TOKEN_ALGORITHM = "HS256"
TOKEN_REQUIRED_CLAIMS = ["iat", "exp"]

# Browsers cannot set headers on a WebSocket handshake, so the token rides in
# the offered subprotocol list as "access_token.<jwt>".
WS_SUBPROTOCOL_PREFIX = "access_token."

__all__ = [
    "DEFAULT_SESSION_TOKEN_TTL_S",
    "ENV_SESSION_TOKEN_TTL_S",
    "TOKEN_ALGORITHM",
    "TOKEN_REQUIRED_CLAIMS",
    "WS_SUBPROTOCOL_PREFIX",
]
