"""Tests for the admin password reset script's core helper."""

from datetime import timedelta

from guardian_gate.application.dtos.user import UserCreate
from guardian_gate.domain.enums import OtpPurpose
from guardian_gate.infrastructure.persistence.repositories import InMemoryCredentialStore
from guardian_gate.infrastructure.security import verify_password
from scripts.reset_password import reset_password


async def test_reset_password_sets_hash_and_clears_reset_code() -> None:
    store = InMemoryCredentialStore()
    user = await store.create(
        UserCreate(name="Ada", email="ada@example.com", password_hash="old")
    )
    user.set_otp(OtpPurpose.RESET_PASSWORD, "123456", user.created_at + timedelta(minutes=10))
    await store.save(user)

    updated = await reset_password(store, "ada@example.com", "new-password-1")

    assert updated is not None
    stored = await store.find_by_id(user.id)
    assert verify_password("new-password-1", stored.password_hash)
    assert stored.reset_password_token is None


async def test_reset_password_unknown_email() -> None:
    assert await reset_password(InMemoryCredentialStore(), "ghost@example.com", "x" * 8) is None
