"""In-memory credential store for tests and single-process development.

Holds copies of UserEntity keyed by id with an email index; callers never
share an instance with the store, so mutations only land through save().
"""

from __future__ import annotations

import asyncio
from dataclasses import replace

from guardian_gate.application.dtos.user import UserCreate
from guardian_gate.domain.entities import UserEntity
from guardian_gate.domain.exceptions import DuplicateEmailException, UserNotFoundException
from guardian_gate.shared.utils.datetime import utc_now
from guardian_gate.shared.utils.generators import generate_cuid


class InMemoryCredentialStore:
    """ICredentialStore backed by process memory. Not shared across workers."""

    def __init__(self) -> None:
        self._users: dict[str, UserEntity] = {}
        self._ids_by_email: dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def find_by_email(self, email: str) -> UserEntity | None:
        user_id = self._ids_by_email.get(email)
        if user_id is None:
            return None
        return replace(self._users[user_id])

    async def find_by_id(self, user_id: str) -> UserEntity | None:
        user = self._users.get(user_id)
        return replace(user) if user else None

    async def create(self, data: UserCreate) -> UserEntity:
        async with self._lock:
            if data.email in self._ids_by_email:
                raise DuplicateEmailException()
            user = UserEntity(
                id=generate_cuid(),
                email=data.email,
                name=data.name,
                password_hash=data.password_hash,
                is_verified=False,
                created_at=utc_now(),
            )
            self._users[user.id] = user
            self._ids_by_email[user.email] = user.id
        return replace(user)

    async def save(self, user: UserEntity) -> UserEntity:
        async with self._lock:
            if user.id not in self._users:
                raise UserNotFoundException(email=user.email)
            self._users[user.id] = replace(user)
        return user

    async def delete_by_id(self, user_id: str) -> bool:
        async with self._lock:
            user = self._users.pop(user_id, None)
            if user is None:
                return False
            self._ids_by_email.pop(user.email, None)
        return True

    async def ping(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._users)
