"""SQL credential store. Interface methods return domain UserEntity objects."""

from __future__ import annotations

from sqlalchemy import select, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from guardian_gate.application.dtos.user import UserCreate
from guardian_gate.domain.entities import UserEntity
from guardian_gate.domain.exceptions import DuplicateEmailException, UserNotFoundException
from guardian_gate.infrastructure.persistence.models.user import User
from guardian_gate.infrastructure.persistence.repositories.base import BaseRepository
from guardian_gate.shared.utils.datetime import ensure_utc

# Mutable columns copied from the entity on save
_MUTABLE_FIELDS = (
    "name",
    "password_hash",
    "is_verified",
    "verification_token",
    "verification_token_expires",
    "login_token",
    "login_token_expires",
    "reset_password_token",
    "reset_password_expires",
)


def _user_to_entity(u: User) -> UserEntity:
    """Map ORM User to domain UserEntity (timestamps normalized to UTC)."""
    return UserEntity(
        id=u.id,
        email=u.email,
        name=u.name,
        password_hash=u.password_hash,
        is_verified=u.is_verified,
        created_at=ensure_utc(u.created_at),
        verification_token=u.verification_token,
        verification_token_expires=ensure_utc(u.verification_token_expires),
        login_token=u.login_token,
        login_token_expires=ensure_utc(u.login_token_expires),
        reset_password_token=u.reset_password_token,
        reset_password_expires=ensure_utc(u.reset_password_expires),
    )


class UserRepository(BaseRepository[User]):
    """ICredentialStore over the app_user table."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def find_by_email(self, email: str) -> UserEntity | None:
        async with self._guard("find_by_email"):
            result = await self.db.execute(select(User).where(User.email == email))
            user = result.scalar_one_or_none()
        return _user_to_entity(user) if user else None

    async def find_by_id(self, user_id: str) -> UserEntity | None:
        user = await self.get_by_id(user_id)
        return _user_to_entity(user) if user else None

    async def create(self, data: UserCreate) -> UserEntity:
        """Insert an unverified user. The unique index on email decides races."""
        obj = User(
            name=data.name,
            email=data.email,
            password_hash=data.password_hash,
            is_verified=False,
        )
        async with self._guard("create"):
            try:
                await self.add(obj)
            except IntegrityError as e:
                await self.db.rollback()
                raise DuplicateEmailException() from e
        return _user_to_entity(obj)

    async def save(self, user: UserEntity) -> UserEntity:
        """Copy mutable fields onto the stored row and commit (last writer wins)."""
        async with self._guard("save"):
            obj = await self.db.get(User, user.id)
            if obj is None:
                raise UserNotFoundException(email=user.email)
            for field in _MUTABLE_FIELDS:
                setattr(obj, field, getattr(user, field))
            await self.commit()
        return user

    async def delete_by_id(self, user_id: str) -> bool:
        async with self._guard("delete_by_id"):
            obj = await self.db.get(User, user_id)
            if obj is None:
                return False
            await self.delete(obj)
        return True

    async def ping(self) -> bool:
        try:
            await self.db.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError):
            return False
        return True
