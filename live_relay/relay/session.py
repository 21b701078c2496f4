"""Bidirectional relay for one client/upstream pairing."""

from __future__ import annotations

import asyncio
import logging

from live_relay.upstream.event_log import LoggingEventHandler
from live_relay.state.relay import RelayOutcome, RelaySession, DirectionStats
from live_relay.config.websocket import (
    CLIENT_TO_UPSTREAM,
    UPSTREAM_TO_CLIENT,
    WS_CLOSE_NORMAL_CODE,
    WS_CLOSE_CLIENT_GONE_REASON,
    DEFAULT_RELAY_BINARY_LOG_EVERY,
)

from .forwarder import forward
from .closing import safe_close

logger = logging.getLogger(__name__)


async def run_relay(
    session: RelaySession,
    *,
    binary_log_every: int = DEFAULT_RELAY_BINARY_LOG_EVERY,
) -> RelayOutcome:
    """Relay both directions until either one ends, then close both endpoints.

    The direction still running when the other finishes is cancelled rather
    than awaited; its transport is being torn down anyway.
    """
    client_stats = DirectionStats(label=CLIENT_TO_UPSTREAM)
    upstream_stats = DirectionStats(label=UPSTREAM_TO_CLIENT)

    upstream_task = asyncio.create_task(
        forward(
            session.upstream,
            session.client,
            upstream_stats,
            binary_log_every=binary_log_every,
            events=LoggingEventHandler(session.session_id),
        ),
        name=f"relay-{session.session_id}-{UPSTREAM_TO_CLIENT}",
    )
    client_task = asyncio.create_task(
        forward(session.client, session.upstream, client_stats, binary_log_every=binary_log_every),
        name=f"relay-{session.session_id}-{CLIENT_TO_UPSTREAM}",
    )
    tasks = (client_task, upstream_task)

    done: set[asyncio.Task] = set()
    try:
        done, _pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

        logger.info("[%s] proxy session ending, closing connections", session.session_id)
        await safe_close(session.client, code=WS_CLOSE_NORMAL_CODE)
        await safe_close(session.upstream, code=WS_CLOSE_NORMAL_CODE, reason=WS_CLOSE_CLIENT_GONE_REASON)

    first = client_stats.label if client_task in done else upstream_stats.label
    return RelayOutcome(
        first_finished=first,
        client_to_upstream=client_stats,
        upstream_to_client=upstream_stats,
    )


__all__ = ["run_relay"]
