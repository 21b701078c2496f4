"""FastAPI application for the live transcription relay."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, WebSocket
from fastapi.responses import ORJSONResponse
from fastapi.middleware.cors import CORSMiddleware

from live_relay.state import RuntimeDeps
from live_relay.handlers.http import router
from live_relay.config.websocket import WS_ENDPOINT_PATH
from live_relay.runtime.logging import configure_logging
from live_relay.runtime.dependencies import build_runtime_deps
from live_relay.handlers.websocket.manager import handle_websocket_connection
from live_relay.config.server import CORS_ALLOW_HEADERS, CORS_ALLOW_METHODS, CORS_ALLOW_ORIGINS

logger = logging.getLogger(__name__)

configure_logging()


def create_app(runtime_deps: RuntimeDeps | None = None) -> FastAPI:
    """Build the app. Without `runtime_deps`, they are built from the environment at startup."""

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        if getattr(app.state, "runtime_deps", None) is None:
            app.state.runtime_deps = build_runtime_deps()
        logger.info("runtime: ready")
        try:
            yield
        finally:
            await app.state.runtime_deps.shutdown()

    app = FastAPI(default_response_class=ORJSONResponse, lifespan=_lifespan)
    app.state.runtime_deps = runtime_deps
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )
    app.include_router(router)

    @app.websocket(WS_ENDPOINT_PATH)
    async def live_transcription(websocket: WebSocket) -> None:
        deps = getattr(websocket.app.state, "runtime_deps", None)
        if deps is None:
            raise RuntimeError("Runtime dependencies are not initialized")
        await handle_websocket_connection(websocket, deps)

    return app


app = create_app()

__all__ = ["app", "create_app"]
