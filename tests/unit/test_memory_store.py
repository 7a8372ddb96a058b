"""Tests for InMemoryCredentialStore."""

from datetime import timedelta

import pytest

from guardian_gate.application.dtos.user import UserCreate
from guardian_gate.domain.enums import OtpPurpose
from guardian_gate.domain.exceptions import DuplicateEmailException, UserNotFoundException
from guardian_gate.infrastructure.persistence.repositories import InMemoryCredentialStore


@pytest.fixture
def store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore()


def _data(email: str = "ada@example.com") -> UserCreate:
    return UserCreate(name="Ada", email=email, password_hash="hash")


async def test_create_and_find(store: InMemoryCredentialStore) -> None:
    created = await store.create(_data())
    assert created.id
    assert created.is_verified is False
    assert created.created_at.tzinfo is not None
    assert (await store.find_by_email("ada@example.com")).id == created.id
    assert (await store.find_by_id(created.id)).email == "ada@example.com"


async def test_find_missing_returns_none(store: InMemoryCredentialStore) -> None:
    assert await store.find_by_email("ghost@example.com") is None
    assert await store.find_by_id("nope") is None


async def test_email_lookup_is_exact(store: InMemoryCredentialStore) -> None:
    await store.create(_data("Ada@example.com"))
    assert await store.find_by_email("ada@example.com") is None


async def test_duplicate_email(store: InMemoryCredentialStore) -> None:
    await store.create(_data())
    with pytest.raises(DuplicateEmailException):
        await store.create(_data())


async def test_returned_entities_are_copies(store: InMemoryCredentialStore) -> None:
    created = await store.create(_data())
    created.mark_verified()
    stored = await store.find_by_id(created.id)
    assert stored.is_verified is False


async def test_save_persists_changes(store: InMemoryCredentialStore) -> None:
    user = await store.create(_data())
    user.set_otp(OtpPurpose.LOGIN, "123456", user.created_at + timedelta(minutes=2))
    await store.save(user)
    stored = await store.find_by_id(user.id)
    assert stored.login_token == "123456"


async def test_save_unknown_user(store: InMemoryCredentialStore) -> None:
    user = await store.create(_data())
    await store.delete_by_id(user.id)
    with pytest.raises(UserNotFoundException):
        await store.save(user)


async def test_delete_by_id(store: InMemoryCredentialStore) -> None:
    user = await store.create(_data())
    assert await store.delete_by_id(user.id) is True
    assert await store.delete_by_id(user.id) is False
    assert await store.find_by_email("ada@example.com") is None
    assert len(store) == 0
    # the email can be registered again
    await store.create(_data())


async def test_ping(store: InMemoryCredentialStore) -> None:
    assert await store.ping() is True
