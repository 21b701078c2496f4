"""Authenticated dial to the upstream speech service."""

from __future__ import annotations

import logging

import websockets
from websockets.exceptions import InvalidURI, InvalidStatus, InvalidHandshake
from websockets.asyncio.client import ClientConnection

from live_relay.errors import UpstreamUnavailable
from live_relay.config.upstream import UPSTREAM_AUTH_HEADER, UPSTREAM_AUTH_SCHEME, DEFAULT_UPSTREAM_OPEN_TIMEOUT_S

logger = logging.getLogger(__name__)


def build_auth_headers(api_key: str) -> dict[str, str]:
    return {UPSTREAM_AUTH_HEADER: f"{UPSTREAM_AUTH_SCHEME} {api_key}"}


async def connect(
    url: str,
    api_key: str,
    *,
    open_timeout: float | None = DEFAULT_UPSTREAM_OPEN_TIMEOUT_S,
) -> ClientConnection:
    """Open the upstream WebSocket. Any dial failure raises `UpstreamUnavailable`; never retried."""
    logger.debug("dialing upstream %s", url)
    try:
        return await websockets.connect(
            url,
            additional_headers=build_auth_headers(api_key),
            open_timeout=open_timeout,
        )
    except InvalidStatus as exc:
        status = exc.response.status_code
        raise UpstreamUnavailable(f"upstream rejected handshake with HTTP {status}") from exc
    except InvalidURI as exc:
        raise UpstreamUnavailable(f"invalid upstream URL: {exc}") from exc
    except InvalidHandshake as exc:
        raise UpstreamUnavailable(f"upstream handshake failed: {exc}") from exc
    except TimeoutError as exc:
        raise UpstreamUnavailable(f"timed out after {open_timeout}s connecting to upstream") from exc
    except OSError as exc:
        raise UpstreamUnavailable(f"could not reach upstream: {exc}") from exc


__all__ = ["build_auth_headers", "connect"]
