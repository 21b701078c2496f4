"""Runtime dependency construction (composition root)."""

from __future__ import annotations

import logging

from live_relay.state import RuntimeDeps
from live_relay.state.settings import AppSettings
from live_relay.handlers.tokens import TokenIssuer
from live_relay.handlers.connections import ConnectionRegistry

from .settings_loader import load_settings

logger = logging.getLogger(__name__)


def build_runtime_deps(settings: AppSettings | None = None) -> RuntimeDeps:
    settings = settings or load_settings()
    if settings.auth.secret_generated:
        logger.info("No session secret configured; generated one for this process")

    tokens = TokenIssuer(secret=settings.auth.session_secret, ttl_s=settings.auth.token_ttl_s)
    return RuntimeDeps(
        connections=ConnectionRegistry(),
        tokens=tokens,
        settings=settings,
    )


__all__ = ["RuntimeDeps", "build_runtime_deps"]
