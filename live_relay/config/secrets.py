"""Secrets and credential configuration."""

from __future__ import annotations

ENV_DEEPGRAM_API_KEY = "DEEPGRAM_API_KEY"

# Optional. When unset a random secret is generated at startup, so issued
# tokens do not survive a restart.
ENV_SESSION_SECRET = "SESSION_SECRET"

SESSION_SECRET_BYTES = 32

__all__ = [
    "ENV_DEEPGRAM_API_KEY",
    "ENV_SESSION_SECRET",
    "SESSION_SECRET_BYTES",
]
