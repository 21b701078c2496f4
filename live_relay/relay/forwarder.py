"""One-way frame relay between two endpoints."""

from __future__ import annotations

import logging

from live_relay.errors import EndpointClosed
from live_relay.state.relay import DirectionStats
from live_relay.upstream.events import CloseEvent
from live_relay.upstream.parser import parse_upstream_event
from live_relay.upstream.dispatch import UpstreamEventHandler, dispatch_event
from live_relay.config.websocket import WS_EXPECTED_CLOSE_CODES, DEFAULT_RELAY_BINARY_LOG_EVERY

from .endpoint import RelayEndpoint

logger = logging.getLogger(__name__)


def _log_frame(stats: DirectionStats, *, is_text: bool, size: int, binary_log_every: int) -> None:
    # Text frames are rare (control/transcripts); binary audio is sampled.
    if is_text or (binary_log_every > 0 and stats.binary_messages % binary_log_every == 0):
        logger.info(
            "[%s] message #%d (binary: %s, size: %d)",
            stats.label,
            stats.messages,
            not is_text,
            size,
        )


async def forward(
    source: RelayEndpoint,
    destination: RelayEndpoint,
    stats: DirectionStats,
    *,
    binary_log_every: int = DEFAULT_RELAY_BINARY_LOG_EVERY,
    events: UpstreamEventHandler | None = None,
) -> DirectionStats:
    """Copy frames from `source` to `destination` until either side fails.

    Frames are written verbatim with their original type. `stats` is owned by
    this coroutine for its whole lifetime and is returned on exit. When
    `events` is given, text frames (and the source's closure) are also
    classified and dispatched to it; the forwarded payload is unaffected.
    """
    while True:
        try:
            frame = await source.receive()
        except EndpointClosed as exc:
            stats.close_code = exc.code
            if exc.code in WS_EXPECTED_CLOSE_CODES:
                logger.info("[%s] source closed (code=%s)", stats.label, exc.code)
            else:
                stats.error = str(exc)
                logger.warning("[%s] read error: %s", stats.label, exc)
            if events is not None:
                dispatch_event(CloseEvent(code=exc.code, reason=exc.reason), events)
            return stats
        except Exception as exc:
            stats.error = f"read error: {exc}"
            logger.warning("[%s] read error: %s", stats.label, exc)
            return stats

        stats.messages += 1
        if frame.is_text:
            stats.text_messages += 1
        else:
            stats.binary_messages += 1
        _log_frame(stats, is_text=frame.is_text, size=frame.size, binary_log_every=binary_log_every)

        if events is not None and frame.is_text:
            dispatch_event(parse_upstream_event(frame.data), events)  # type: ignore[arg-type]

        try:
            await destination.send(frame)
        except Exception as exc:
            stats.error = f"write error: {exc}"
            logger.warning("[%s] write error: %s", stats.label, exc)
            return stats


__all__ = ["forward"]
