"""Application DTOs (no dependency on ORM or HTTP schemas)."""

from guardian_gate.application.dtos.auth import IssuedSession, SessionResult
from guardian_gate.application.dtos.user import UserCreate, UserResult

__all__ = [
    "IssuedSession",
    "SessionResult",
    "UserCreate",
    "UserResult",
]
