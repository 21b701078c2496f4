"""Primary WebSocket session orchestration for the relay endpoint."""

from __future__ import annotations

import uuid
import logging

from fastapi import WebSocket

from live_relay.state import RuntimeDeps, SessionState
from live_relay.state.relay import RelaySession
from live_relay.upstream.url import build_url, resolve_params
from live_relay.upstream.connector import connect
from live_relay.relay.session import run_relay
from live_relay.relay.closing import safe_close
from live_relay.errors import AuthRejected, UpgradeFailed, UpstreamUnavailable
from live_relay.relay.client_endpoint import ClientEndpoint
from live_relay.relay.upstream_endpoint import UpstreamEndpoint
from live_relay.config.websocket import WS_CLOSE_INTERNAL_ERROR_CODE, WS_CLOSE_UPSTREAM_FAILED_REASON

from .errors import reject_unauthorized
from .auth import require_subprotocol, get_offered_subprotocols

logger = logging.getLogger(__name__)


def _transition(session_id: str, state: SessionState) -> SessionState:
    logger.debug("[%s] session state -> %s", session_id, state.value)
    return state


async def _upgrade(ws: WebSocket, subprotocol: str) -> None:
    try:
        await ws.accept(subprotocol=subprotocol)
    except Exception as exc:
        raise UpgradeFailed(str(exc)) from exc


async def handle_websocket_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> None:
    session_id = uuid.uuid4().hex[:12]
    state = _transition(session_id, SessionState.AWAITING_AUTH)
    settings = runtime_deps.settings

    try:
        subprotocol = require_subprotocol(
            get_offered_subprotocols(ws),
            runtime_deps.tokens.secret,
            now=runtime_deps.tokens.now(),
        )
    except AuthRejected as exc:
        logger.info("[%s] WebSocket auth failed: %s", session_id, exc)
        await reject_unauthorized(ws)
        _transition(session_id, SessionState.CLOSED)
        return

    try:
        await _upgrade(ws, subprotocol)
    except UpgradeFailed as exc:
        logger.warning("[%s] WebSocket upgrade failed: %s", session_id, exc)
        _transition(session_id, SessionState.CLOSED)
        return
    state = _transition(session_id, SessionState.UPGRADED)

    client = ClientEndpoint(ws)
    await runtime_deps.connections.register(client)
    logger.info("[%s] client connected. Active: %d", session_id, runtime_deps.connections.count())

    try:
        state = _transition(session_id, SessionState.UPSTREAM_CONNECTING)
        params = resolve_params(ws.query_params)
        upstream_url = build_url(settings.upstream.url, ws.query_params)
        logger.info(
            "[%s] connecting to upstream: model=%s, language=%s, encoding=%s, sample_rate=%s, channels=%s",
            session_id,
            params["model"],
            params["language"],
            params["encoding"],
            params["sample_rate"],
            params["channels"],
        )
        try:
            upstream_conn = await connect(
                upstream_url,
                settings.upstream.api_key,
                open_timeout=settings.upstream.open_timeout_s,
            )
        except UpstreamUnavailable as exc:
            logger.error("[%s] failed to connect to upstream: %s", session_id, exc)
            await safe_close(client, code=WS_CLOSE_INTERNAL_ERROR_CODE, reason=WS_CLOSE_UPSTREAM_FAILED_REASON)
            return
        logger.info("[%s] connected to upstream", session_id)

        state = _transition(session_id, SessionState.RELAYING)
        outcome = await run_relay(
            RelaySession(session_id=session_id, client=client, upstream=UpstreamEndpoint(upstream_conn)),
            binary_log_every=settings.relay.binary_log_every,
        )
        logger.info(
            "[%s] relay finished first=%s client->upstream=%d upstream->client=%d",
            session_id,
            outcome.first_finished,
            outcome.client_to_upstream.messages,
            outcome.upstream_to_client.messages,
        )
    finally:
        # No-op when the relay already closed it.
        await safe_close(client, code=WS_CLOSE_INTERNAL_ERROR_CODE, reason="")
        await runtime_deps.connections.unregister(client)
        state = _transition(session_id, SessionState.CLOSED)
        logger.info(
            "[%s] WebSocket connection closed (%s). Active: %d",
            session_id,
            state.value,
            runtime_deps.connections.count(),
        )


__all__ = ["handle_websocket_connection"]
