from __future__ import annotations

import pytest

from live_relay.errors import AuthRejected
from live_relay.handlers.tokens import TokenIssuer
from tests.utils.settings import TEST_SECRET, OTHER_SECRET
from live_relay.handlers.websocket.auth import require_subprotocol, validate_subprotocol_list

NOW = 1_700_000_000.0


def _token(secret: bytes = TEST_SECRET, at: float = NOW, ttl_s: float = 3600) -> str:
    return TokenIssuer(secret=secret, ttl_s=ttl_s, now_fn=lambda: at).issue()


def test_valid_entry_is_returned_verbatim() -> None:
    proto = f"access_token.{_token()}"
    assert validate_subprotocol_list([proto], TEST_SECRET, now=NOW) == proto


def test_first_valid_entry_wins() -> None:
    first = f"access_token.{_token()}"
    second = f"access_token.{_token(at=NOW - 10)}"
    offered = ["binary", "access_token.garbage", first, second]
    assert validate_subprotocol_list(offered, TEST_SECRET, now=NOW) == first


def test_entries_without_prefix_are_ignored() -> None:
    bare = _token()
    assert validate_subprotocol_list([bare, "token." + bare], TEST_SECRET, now=NOW) is None


@pytest.mark.parametrize(
    "offered",
    [
        [],
        ["access_token."],
        ["access_token.not-a-jwt"],
        [f"access_token.{_token(secret=OTHER_SECRET)}"],
        [f"access_token.{_token(at=NOW - 7200)}"],
    ],
)
def test_no_valid_entry_yields_none(offered: list[str]) -> None:
    assert validate_subprotocol_list(offered, TEST_SECRET, now=NOW) is None


def test_require_subprotocol_raises_when_nothing_validates() -> None:
    with pytest.raises(AuthRejected):
        require_subprotocol(["access_token.nope"], TEST_SECRET, now=NOW)


def test_require_subprotocol_returns_match() -> None:
    proto = f"access_token.{_token()}"
    assert require_subprotocol(["chat", proto], TEST_SECRET, now=NOW) == proto
