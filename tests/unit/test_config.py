"""Tests for Settings validation."""

import pytest
from pydantic import ValidationError

from guardian_gate.core.config import Settings

BASE = {"secret_key": "s3cret", "database_backend": "memory"}


def test_defaults() -> None:
    settings = Settings(**BASE, _env_file=None)
    assert settings.api_prefix == "/api"
    assert settings.session_cookie_name == "token"
    assert settings.otp_verify_email_ttl_seconds == 120
    assert settings.otp_reset_password_ttl_seconds == 600
    assert settings.access_token_lifetime.days == 7


def test_secret_key_required() -> None:
    with pytest.raises(ValidationError, match="SECRET_KEY"):
        Settings(secret_key="", database_backend="memory", _env_file=None)


def test_postgres_requires_database_url() -> None:
    with pytest.raises(ValidationError, match="DATABASE_URL"):
        Settings(secret_key="s3cret", database_backend="postgres", database_url="", _env_file=None)


def test_unknown_database_backend() -> None:
    with pytest.raises(ValidationError):
        Settings(secret_key="s3cret", database_backend="mongo", _env_file=None)


def test_gmail_requires_credentials() -> None:
    with pytest.raises(ValidationError, match="GMAIL_REFRESH_TOKEN"):
        Settings(
            **BASE,
            email_backend="gmail",
            email_sender="noreply@example.com",
            gmail_client_id="id",
            gmail_client_secret="secret",
            _env_file=None,
        )


def test_unknown_email_backend() -> None:
    with pytest.raises(ValidationError):
        Settings(**BASE, email_backend="pigeon", _env_file=None)


def test_short_otp_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(**BASE, otp_digits=3, _env_file=None)


def test_environment_controls_development_flag() -> None:
    assert Settings(**BASE, environment="development", _env_file=None).is_development
    assert not Settings(**BASE, environment="production", _env_file=None).is_development


@pytest.mark.parametrize("rounds", [3, 32])
def test_bcrypt_rounds_out_of_range(rounds: int) -> None:
    with pytest.raises(ValidationError, match="bcrypt_rounds"):
        Settings(**BASE, bcrypt_rounds=rounds, _env_file=None)
