"""Session token issuing and validation (HS256 JWTs with iat/exp only)."""

from __future__ import annotations

import time
from typing import Any
from collections.abc import Callable

import jwt

from live_relay.errors import InvalidToken, TokenIssueError
from live_relay.config.auth import TOKEN_ALGORITHM, TOKEN_REQUIRED_CLAIMS, DEFAULT_SESSION_TOKEN_TTL_S

TimeFn = Callable[[], float]


def _decode(token: str, secret: bytes) -> dict[str, Any]:
    # Timing is checked by the caller so that the clock can be injected.
    try:
        return jwt.decode(
            token,
            secret,
            algorithms=[TOKEN_ALGORITHM],
            options={
                "require": TOKEN_REQUIRED_CLAIMS,
                "verify_exp": False,
                "verify_iat": False,
                "verify_nbf": False,
            },
        )
    except jwt.InvalidTokenError as exc:
        raise InvalidToken(str(exc)) from exc


def validate_token(token: str, secret: bytes, *, now: float | None = None) -> None:
    """Raise `InvalidToken` unless `token` is signed with `secret` and `iat <= now < exp`."""
    if not token:
        raise InvalidToken("empty token")

    claims = _decode(token, secret)
    issued_at = claims.get("iat")
    expires_at = claims.get("exp")
    if not isinstance(issued_at, (int, float)) or not isinstance(expires_at, (int, float)):
        raise InvalidToken("iat and exp must be numeric")

    current = time.time() if now is None else float(now)
    if current < issued_at:
        raise InvalidToken("token used before issued")
    if current >= expires_at:
        raise InvalidToken("token expired")


class TokenIssuer:
    """Create and verify short-lived session tokens.

    Tokens carry no identity: any holder of a validly signed, unexpired token
    may open a relay session.
    """

    def __init__(
        self,
        *,
        secret: bytes,
        ttl_s: float = DEFAULT_SESSION_TOKEN_TTL_S,
        now_fn: TimeFn | None = None,
    ) -> None:
        if not secret:
            raise ValueError("session secret must not be empty")
        self._secret = bytes(secret)
        self._ttl_s = max(1.0, float(ttl_s))
        self._now = now_fn or time.time

    @property
    def secret(self) -> bytes:
        return self._secret

    @property
    def ttl_s(self) -> float:
        return self._ttl_s

    def now(self) -> float:
        return self._now()

    def issue(self) -> str:
        issued_at = int(self._now())
        claims = {"iat": issued_at, "exp": issued_at + int(self._ttl_s)}
        try:
            return jwt.encode(claims, self._secret, algorithm=TOKEN_ALGORITHM)
        except Exception as exc:
            raise TokenIssueError(f"failed to sign session token: {exc}") from exc

    def validate(self, token: str) -> None:
        validate_token(token, self._secret, now=self._now())


__all__ = ["TokenIssuer", "validate_token"]
