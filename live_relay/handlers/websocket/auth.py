"""WebSocket admission via tokens carried in the subprotocol list."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from fastapi import WebSocket

from live_relay.errors import AuthRejected, InvalidToken
from live_relay.config.auth import WS_SUBPROTOCOL_PREFIX
from live_relay.handlers.tokens import validate_token

logger = logging.getLogger(__name__)


def get_offered_subprotocols(ws: WebSocket) -> list[str]:
    return [str(p) for p in (ws.scope.get("subprotocols") or [])]


def validate_subprotocol_list(
    offered_protocols: Iterable[str],
    secret: bytes,
    *,
    now: float | None = None,
) -> str | None:
    """Return the first offered `access_token.<jwt>` whose token validates, else None."""
    for proto in offered_protocols:
        if not proto.startswith(WS_SUBPROTOCOL_PREFIX):
            continue
        token = proto[len(WS_SUBPROTOCOL_PREFIX) :]
        try:
            validate_token(token, secret, now=now)
        except InvalidToken as exc:
            logger.debug("rejected offered token: %s", exc)
            continue
        return proto
    return None


def require_subprotocol(
    offered_protocols: Iterable[str],
    secret: bytes,
    *,
    now: float | None = None,
) -> str:
    matched = validate_subprotocol_list(offered_protocols, secret, now=now)
    if matched is None:
        raise AuthRejected("invalid or missing token")
    return matched


__all__ = ["get_offered_subprotocols", "require_subprotocol", "validate_subprotocol_list"]
