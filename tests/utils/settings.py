from __future__ import annotations

from pathlib import Path

from live_relay.state.settings import (
    AppSettings,
    AuthSettings,
    RelaySettings,
    ServerSettings,
    UpstreamSettings,
)

TEST_SECRET = b"relay-test-secret-0123456789abcdef"
OTHER_SECRET = b"another-secret-fedcba9876543210xyz"
TEST_API_KEY = "test-api-key"


def build_test_settings(
    *,
    upstream_url: str = "ws://127.0.0.1:9/v1/listen",
    secret: bytes = TEST_SECRET,
    metadata_path: Path = Path("deepgram.toml"),
    open_timeout_s: float = 2.0,
    shutdown_grace_s: float = 2.0,
) -> AppSettings:
    return AppSettings(
        auth=AuthSettings(session_secret=secret, token_ttl_s=3600.0),
        upstream=UpstreamSettings(api_key=TEST_API_KEY, url=upstream_url, open_timeout_s=open_timeout_s),
        server=ServerSettings(
            host="127.0.0.1",
            port=0,
            shutdown_grace_s=shutdown_grace_s,
            metadata_path=metadata_path,
        ),
        relay=RelaySettings(binary_log_every=10),
    )


__all__ = ["OTHER_SECRET", "TEST_API_KEY", "TEST_SECRET", "build_test_settings"]
