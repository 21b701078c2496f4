"""Plain HTTP routes: session tokens, project metadata and liveness."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Request, APIRouter
from fastapi.responses import ORJSONResponse

from live_relay.state import RuntimeDeps
from live_relay.config.server import HTTP_ERROR_INTERNAL
from live_relay.runtime.metadata import load_metadata
from live_relay.errors import MetadataError, TokenIssueError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_runtime_deps(request: Request) -> RuntimeDeps:
    runtime_deps = getattr(request.app.state, "runtime_deps", None)
    if runtime_deps is None:
        raise RuntimeError("Runtime dependencies are not initialized")
    return runtime_deps


def _error_response(message: str) -> ORJSONResponse:
    return ORJSONResponse({"error": HTTP_ERROR_INTERNAL, "message": message}, status_code=500)


@router.get("/api/session", response_model=None)
async def issue_session(request: Request) -> Any:
    runtime_deps = get_runtime_deps(request)
    try:
        token = runtime_deps.tokens.issue()
    except TokenIssueError:
        logger.exception("Failed to issue token")
        return _error_response("Failed to issue session token")
    return {"token": token}


@router.get("/api/metadata", response_model=None)
async def metadata(request: Request) -> Any:
    runtime_deps = get_runtime_deps(request)
    path = runtime_deps.settings.server.metadata_path
    try:
        return load_metadata(path)
    except MetadataError as exc:
        logger.error("Error reading metadata: %s", exc)
        return _error_response(f"Failed to read metadata from {path.name}: {exc}")


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


__all__ = ["get_runtime_deps", "router"]
