from __future__ import annotations

import jwt
import pytest

from live_relay.errors import InvalidToken, TokenIssueError
from live_relay.handlers.tokens import TokenIssuer, validate_token
from tests.utils.settings import TEST_SECRET, OTHER_SECRET


def _issuer_at(t: float, ttl_s: float = 3600.0) -> TokenIssuer:
    return TokenIssuer(secret=TEST_SECRET, ttl_s=ttl_s, now_fn=lambda: t)


def test_issue_then_validate_with_same_clock() -> None:
    issuer = _issuer_at(1_700_000_000.0)
    token = issuer.issue()
    issuer.validate(token)


def test_issued_claims_are_iat_and_exp_only() -> None:
    token = _issuer_at(1_700_000_000.0, ttl_s=60).issue()
    claims = jwt.decode(token, options={"verify_signature": False})
    assert claims == {"iat": 1_700_000_000, "exp": 1_700_000_060}
    assert jwt.get_unverified_header(token)["alg"] == "HS256"


def test_token_valid_until_one_second_before_expiry() -> None:
    token = _issuer_at(1000.0, ttl_s=3600).issue()
    validate_token(token, TEST_SECRET, now=1000.0 + 3599)
    with pytest.raises(InvalidToken):
        validate_token(token, TEST_SECRET, now=1000.0 + 3600)


def test_token_rejected_before_issued_at() -> None:
    token = _issuer_at(1000.0).issue()
    with pytest.raises(InvalidToken):
        validate_token(token, TEST_SECRET, now=999.0)


def test_token_signed_with_other_secret_rejected() -> None:
    token = TokenIssuer(secret=OTHER_SECRET, now_fn=lambda: 1000.0).issue()
    with pytest.raises(InvalidToken):
        validate_token(token, TEST_SECRET, now=1000.0)


def test_token_with_other_hmac_algorithm_rejected() -> None:
    token = jwt.encode({"iat": 1000, "exp": 2000}, TEST_SECRET, algorithm="HS512")
    with pytest.raises(InvalidToken):
        validate_token(token, TEST_SECRET, now=1500.0)


def test_unsigned_token_rejected() -> None:
    token = jwt.encode({"iat": 1000, "exp": 2000}, None, algorithm="none")
    with pytest.raises(InvalidToken):
        validate_token(token, TEST_SECRET, now=1500.0)


def test_token_missing_exp_rejected() -> None:
    token = jwt.encode({"iat": 1000}, TEST_SECRET, algorithm="HS256")
    with pytest.raises(InvalidToken):
        validate_token(token, TEST_SECRET, now=1500.0)


@pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c", "access_token.whatever"])
def test_garbage_tokens_rejected(token: str) -> None:
    with pytest.raises(InvalidToken):
        validate_token(token, TEST_SECRET, now=1500.0)


def test_issuer_rejects_empty_secret() -> None:
    with pytest.raises(ValueError):
        TokenIssuer(secret=b"")


def test_signing_failure_raises_token_issue_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_encode(*_args: object, **_kwargs: object) -> str:
        raise RuntimeError("hmac unavailable")

    monkeypatch.setattr(jwt, "encode", broken_encode)
    with pytest.raises(TokenIssueError):
        _issuer_at(1000.0).issue()
