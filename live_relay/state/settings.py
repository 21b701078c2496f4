"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from pathlib import Path
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AuthSettings:
    session_secret: bytes
    token_ttl_s: float
    secret_generated: bool = False


@dataclass(frozen=True, slots=True)
class UpstreamSettings:
    api_key: str
    url: str
    open_timeout_s: float


@dataclass(frozen=True, slots=True)
class ServerSettings:
    host: str
    port: int
    shutdown_grace_s: float
    metadata_path: Path


@dataclass(frozen=True, slots=True)
class RelaySettings:
    binary_log_every: int


@dataclass(frozen=True, slots=True)
class AppSettings:
    auth: AuthSettings
    upstream: UpstreamSettings
    server: ServerSettings
    relay: RelaySettings


__all__ = [
    "AppSettings",
    "AuthSettings",
    "RelaySettings",
    "ServerSettings",
    "UpstreamSettings",
]
