"""DTOs for session issuance."""

from dataclasses import dataclass
from datetime import datetime

from guardian_gate.application.dtos.user import UserResult


@dataclass(frozen=True)
class IssuedSession:
    """Signed bearer token and its absolute expiry."""

    token: str
    expires_at: datetime


@dataclass(frozen=True)
class SessionResult:
    """Outcome of a successful verify-email / verify-login: user summary plus session."""

    user: UserResult
    session: IssuedSession
