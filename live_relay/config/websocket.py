"""WebSocket proxy constants."""

from __future__ import annotations

WS_ENDPOINT_PATH = "/api/live-transcription"

# Close codes
WS_CLOSE_NORMAL_CODE = 1000
WS_CLOSE_GOING_AWAY_CODE = 1001
WS_CLOSE_ABNORMAL_CODE = 1006
WS_CLOSE_INTERNAL_ERROR_CODE = 1011

WS_CLOSE_SHUTDOWN_REASON = "Server shutting down"
WS_CLOSE_UPSTREAM_FAILED_REASON = "Failed to connect to upstream"
WS_CLOSE_CLIENT_GONE_REASON = "Client disconnected"

# Closures with these codes end a relay direction without a warning.
WS_EXPECTED_CLOSE_CODES = frozenset({WS_CLOSE_NORMAL_CODE, WS_CLOSE_GOING_AWAY_CODE})

# Direction labels used in relay logs.
CLIENT_TO_UPSTREAM = "client->upstream"
UPSTREAM_TO_CLIENT = "upstream->client"

# Audio frames arrive every few tens of ms; only every Nth binary frame is logged.
ENV_RELAY_BINARY_LOG_EVERY = "RELAY_BINARY_LOG_EVERY"
DEFAULT_RELAY_BINARY_LOG_EVERY = 10

__all__ = [
    "CLIENT_TO_UPSTREAM",
    "DEFAULT_RELAY_BINARY_LOG_EVERY",
    "ENV_RELAY_BINARY_LOG_EVERY",
    "UPSTREAM_TO_CLIENT",
    "WS_CLOSE_ABNORMAL_CODE",
    "WS_CLOSE_CLIENT_GONE_REASON",
    "WS_CLOSE_GOING_AWAY_CODE",
    "WS_CLOSE_INTERNAL_ERROR_CODE",
    "WS_CLOSE_NORMAL_CODE",
    "WS_CLOSE_SHUTDOWN_REASON",
    "WS_CLOSE_UPSTREAM_FAILED_REASON",
    "WS_ENDPOINT_PATH",
    "WS_EXPECTED_CLOSE_CODES",
]
