"""Tests for UserEntity slot invariants and OtpPurpose."""

from datetime import UTC, datetime, timedelta

import pytest

from guardian_gate.domain.entities import UserEntity
from guardian_gate.domain.enums import OtpPurpose
from guardian_gate.domain.exceptions import ValidationException

NOW = datetime(2026, 5, 1, tzinfo=UTC)


def _user(**overrides) -> UserEntity:
    fields = {
        "id": "u1",
        "email": "ada@example.com",
        "name": "Ada",
        "password_hash": "hash",
        "is_verified": False,
        "created_at": NOW,
    }
    fields.update(overrides)
    return UserEntity(**fields)


def test_otp_purpose_from_value() -> None:
    assert OtpPurpose("login") is OtpPurpose.LOGIN


def test_requires_id_and_email() -> None:
    with pytest.raises(ValidationException) as exc_info:
        _user(id="")
    assert exc_info.value.details == {"field": "id"}
    with pytest.raises(ValidationException):
        _user(email="")


@pytest.mark.parametrize(
    "half_set",
    [
        {"verification_token": "123456"},
        {"login_token_expires": NOW},
        {"reset_password_token": "123456"},
    ],
)
def test_half_set_slot_is_rejected(half_set: dict) -> None:
    with pytest.raises(ValidationException):
        _user(**half_set)


def test_slots_are_independent() -> None:
    user = _user()
    user.set_otp(OtpPurpose.VERIFY_EMAIL, "111111", NOW + timedelta(minutes=2))
    user.set_otp(OtpPurpose.LOGIN, "222222", NOW + timedelta(minutes=2))
    assert user.get_otp(OtpPurpose.VERIFY_EMAIL)[0] == "111111"
    assert user.get_otp(OtpPurpose.LOGIN)[0] == "222222"
    assert user.get_otp(OtpPurpose.RESET_PASSWORD) == (None, None)

    user.clear_otp(OtpPurpose.LOGIN)
    assert user.get_otp(OtpPurpose.LOGIN) == (None, None)
    assert user.get_otp(OtpPurpose.VERIFY_EMAIL)[0] == "111111"


def test_set_otp_overwrites() -> None:
    user = _user()
    user.set_otp(OtpPurpose.RESET_PASSWORD, "111111", NOW)
    user.set_otp(OtpPurpose.RESET_PASSWORD, "333333", NOW + timedelta(minutes=10))
    assert user.reset_password_token == "333333"
    assert user.reset_password_expires == NOW + timedelta(minutes=10)


def test_mark_verified() -> None:
    user = _user()
    user.mark_verified()
    assert user.is_verified is True
