"""Tests for password hashing, JWT helpers and the session issuer."""

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from guardian_gate.core.config import get_settings
from guardian_gate.domain.exceptions import AuthenticationException
from guardian_gate.infrastructure.security import (
    AuthSecurity,
    SessionIssuer,
    decode_session_token,
    encode_session_token,
    get_password_hash,
    verify_password,
)


def test_password_hash_round_trip() -> None:
    hashed = get_password_hash("correct-horse")
    assert hashed != "correct-horse"
    assert hashed.startswith("$2")
    assert verify_password("correct-horse", hashed)
    assert not verify_password("wrong-horse", hashed)


def test_long_passwords_are_not_truncated() -> None:
    base = "x" * 80
    hashed = get_password_hash(base + "a")
    assert not verify_password(base + "b", hashed)


def test_verify_password_with_garbage_hash_is_false() -> None:
    assert verify_password("anything", "not-a-bcrypt-hash") is False


def test_auth_security_uses_configured_rounds() -> None:
    security = AuthSecurity(rounds=5)
    hashed = security.hash_password("pw-12345678")
    assert hashed.split("$")[2] == "05"
    assert security.verify_password("pw-12345678", hashed)


def test_session_token_uses_configured_lifetime() -> None:
    before = datetime.now(UTC)
    token, expires_at = encode_session_token("u1")
    assert decode_session_token(token) == "u1"
    lifetime = get_settings().access_token_lifetime
    assert before + lifetime - timedelta(seconds=5) <= expires_at <= datetime.now(UTC) + lifetime


def test_decode_rejects_missing_sub() -> None:
    settings = get_settings()
    token = jwt.encode(
        {"exp": datetime.now(UTC) + timedelta(minutes=5)},
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    with pytest.raises(ValueError):
        decode_session_token(token)


def test_decode_rejects_wrong_key() -> None:
    token = jwt.encode(
        {"sub": "u1", "exp": datetime.now(UTC) + timedelta(minutes=5)},
        "another-key",
        algorithm="HS256",
    )
    with pytest.raises(ValueError):
        decode_session_token(token)


def test_session_issuer_round_trip() -> None:
    issuer = SessionIssuer()
    session = issuer.issue("user-42")
    assert issuer.resolve_user_id(session.token) == "user-42"
    assert session.expires_at > datetime.now(UTC)


def test_session_issuer_rejects_expired_token() -> None:
    token, _ = encode_session_token("u1", lifetime=timedelta(seconds=-1))
    with pytest.raises(AuthenticationException):
        SessionIssuer().resolve_user_id(token)


def test_session_issuer_rejects_malformed_token() -> None:
    with pytest.raises(AuthenticationException):
        SessionIssuer().resolve_user_id("not.a.jwt")
