"""Environment parsing for runtime settings."""

from __future__ import annotations

import os
import secrets
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from live_relay.errors import ConfigurationError
from live_relay.config.secrets import ENV_SESSION_SECRET, ENV_DEEPGRAM_API_KEY, SESSION_SECRET_BYTES
from live_relay.config.auth import ENV_SESSION_TOKEN_TTL_S, DEFAULT_SESSION_TOKEN_TTL_S
from live_relay.state.settings import (
    AppSettings,
    AuthSettings,
    RelaySettings,
    ServerSettings,
    UpstreamSettings,
)
from live_relay.config.websocket import ENV_RELAY_BINARY_LOG_EVERY, DEFAULT_RELAY_BINARY_LOG_EVERY
from live_relay.config.upstream import (
    ENV_DEEPGRAM_STT_URL,
    DEFAULT_DEEPGRAM_STT_URL,
    ENV_UPSTREAM_OPEN_TIMEOUT_S,
    DEFAULT_UPSTREAM_OPEN_TIMEOUT_S,
)
from live_relay.config.server import (
    ENV_HOST,
    ENV_PORT,
    DEFAULT_HOST,
    DEFAULT_PORT,
    ENV_METADATA_PATH,
    ENV_SHUTDOWN_GRACE_S,
    DEFAULT_METADATA_PATH,
    DEFAULT_SHUTDOWN_GRACE_S,
)


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _load_auth_settings() -> AuthSettings:
    ttl_s = _float_env(ENV_SESSION_TOKEN_TTL_S, DEFAULT_SESSION_TOKEN_TTL_S)
    if ttl_s <= 0:
        ttl_s = DEFAULT_SESSION_TOKEN_TTL_S

    secret_raw = os.getenv(ENV_SESSION_SECRET) or ""
    if secret_raw:
        return AuthSettings(session_secret=secret_raw.encode("utf-8"), token_ttl_s=ttl_s)
    return AuthSettings(
        session_secret=secrets.token_bytes(SESSION_SECRET_BYTES),
        token_ttl_s=ttl_s,
        secret_generated=True,
    )


def _load_upstream_settings() -> UpstreamSettings:
    api_key = (os.getenv(ENV_DEEPGRAM_API_KEY) or "").strip()
    if not api_key:
        raise ConfigurationError(
            f"{ENV_DEEPGRAM_API_KEY} environment variable is required. "
            "Copy sample.env to .env and add your API key."
        )

    open_timeout = _float_env(ENV_UPSTREAM_OPEN_TIMEOUT_S, DEFAULT_UPSTREAM_OPEN_TIMEOUT_S)
    return UpstreamSettings(
        api_key=api_key,
        url=_str_env(ENV_DEEPGRAM_STT_URL, DEFAULT_DEEPGRAM_STT_URL),
        open_timeout_s=open_timeout if open_timeout > 0 else DEFAULT_UPSTREAM_OPEN_TIMEOUT_S,
    )


def _load_server_settings() -> ServerSettings:
    port = _int_env(ENV_PORT, DEFAULT_PORT)
    if not 0 <= port <= 65535:
        raise ConfigurationError(f"{ENV_PORT} must be between 0 and 65535, got {port}")

    metadata_raw = os.getenv(ENV_METADATA_PATH)
    metadata_path = (
        Path(metadata_raw).expanduser() if metadata_raw and metadata_raw.strip() else DEFAULT_METADATA_PATH
    )

    return ServerSettings(
        host=_str_env(ENV_HOST, DEFAULT_HOST),
        port=port,
        shutdown_grace_s=max(0.0, _float_env(ENV_SHUTDOWN_GRACE_S, DEFAULT_SHUTDOWN_GRACE_S)),
        metadata_path=metadata_path,
    )


def _load_relay_settings() -> RelaySettings:
    every = _int_env(ENV_RELAY_BINARY_LOG_EVERY, DEFAULT_RELAY_BINARY_LOG_EVERY)
    return RelaySettings(binary_log_every=max(0, every))


def load_env_file(path: Path | None = None) -> bool:
    """Load a `.env` file (default: nearest one from the working directory). Set variables win."""
    dotenv_path = path if path is not None else find_dotenv(usecwd=True)
    if not dotenv_path:
        return False
    return load_dotenv(dotenv_path, override=False)


def load_settings() -> AppSettings:
    """Build settings from the environment; raises `ConfigurationError` if the upstream key is missing."""
    return AppSettings(
        auth=_load_auth_settings(),
        upstream=_load_upstream_settings(),
        server=_load_server_settings(),
        relay=_load_relay_settings(),
    )


__all__ = ["load_env_file", "load_settings"]
