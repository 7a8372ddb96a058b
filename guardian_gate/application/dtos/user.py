"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime

from guardian_gate.domain.entities import UserEntity


@dataclass(frozen=True)
class UserCreate:
    """Fields for a new account. password_hash is already hashed."""

    name: str
    email: str
    password_hash: str


@dataclass(frozen=True)
class UserResult:
    """User read-model returned to callers. No password hash, no OTP slots."""

    id: str
    name: str
    email: str
    is_verified: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, user: UserEntity) -> "UserResult":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            is_verified=user.is_verified,
            created_at=user.created_at,
        )
