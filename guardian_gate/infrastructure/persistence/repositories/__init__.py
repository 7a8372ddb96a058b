"""Persistence repositories. Re-exports for dependency injection."""

from guardian_gate.infrastructure.persistence.repositories.base import BaseRepository
from guardian_gate.infrastructure.persistence.repositories.memory_user_repo import (
    InMemoryCredentialStore,
)
from guardian_gate.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "BaseRepository",
    "InMemoryCredentialStore",
    "UserRepository",
]
