"""Logging configuration."""

from __future__ import annotations

import os

LOG_LEVEL: str = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
LOG_FORMAT: str = (os.getenv("LOG_FORMAT") or "").strip() or "%(asctime)s %(levelname)s %(name)s: %(message)s"

# websockets and uvicorn access logs are noisy for a relay; keep them at WARNING
# unless explicitly enabled.
ENV_SHOW_LIBRARY_LOGS = "SHOW_LIBRARY_LOGS"
NOISY_LOGGERS = ("websockets", "websockets.client", "websockets.server", "uvicorn.access")

__all__ = ["ENV_SHOW_LIBRARY_LOGS", "LOG_FORMAT", "LOG_LEVEL", "NOISY_LOGGERS"]
