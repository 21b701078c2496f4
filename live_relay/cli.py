"""Command-line entry point: load settings, print the banner, serve until signalled."""

from __future__ import annotations

import logging

import uvicorn

from live_relay.server import create_app
from live_relay.errors import ConfigurationError
from live_relay.state.settings import AppSettings
from live_relay.config.websocket import WS_ENDPOINT_PATH
from live_relay.runtime.server import RelayServer
from live_relay.runtime.settings_loader import load_settings, load_env_file
from live_relay.runtime.dependencies import build_runtime_deps

logger = logging.getLogger(__name__)

_BANNER_WIDTH = 70


def _log_banner(settings: AppSettings) -> None:
    secret_hex = settings.auth.session_secret[:8].hex()
    logger.info("")
    logger.info("=" * _BANNER_WIDTH)
    logger.info("Backend API Server running at http://localhost:%d", settings.server.port)
    logger.info("")
    logger.info("  GET  /api/session")
    logger.info("  WS   %s (auth required)", WS_ENDPOINT_PATH)
    logger.info("  GET  /api/metadata")
    logger.info("  GET  /health")
    logger.info("")
    logger.info("Session secret: %s... (first 8 bytes)", secret_hex)
    logger.info("=" * _BANNER_WIDTH)
    logger.info("")


def main() -> None:
    load_env_file()
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        logger.error("ERROR: %s", exc)
        raise SystemExit(1) from exc

    runtime_deps = build_runtime_deps(settings)
    config = uvicorn.Config(
        create_app(runtime_deps),
        host=settings.server.host,
        port=settings.server.port,
        timeout_graceful_shutdown=max(1, int(settings.server.shutdown_grace_s)),
        log_config=None,
    )
    server = RelayServer(config, connections=runtime_deps.connections)

    _log_banner(settings)
    try:
        server.run()
    except SystemExit:
        # uvicorn exits directly when the listener cannot bind.
        if server.started:
            raise
    if not server.started:
        logger.error("Server failed to start on %s:%d", settings.server.host, settings.server.port)
        raise SystemExit(1)
    logger.info("Shutdown complete")


if __name__ == "__main__":
    main()
