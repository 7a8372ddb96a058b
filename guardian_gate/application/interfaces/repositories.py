"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain entities or application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from guardian_gate.application.dtos.user import UserCreate
    from guardian_gate.domain.entities import UserEntity


class ICredentialStore(Protocol):
    """Protocol for the credential store: user records keyed by email and id.

    Every method may raise StoreUnavailableException. Writes are durable
    when the call returns (no request-spanning transaction).
    """

    async def find_by_email(self, email: str) -> UserEntity | None:
        """Return the user with exactly this email, or None."""

    async def find_by_id(self, user_id: str) -> UserEntity | None:
        """Return the user with this id, or None."""

    async def create(self, data: UserCreate) -> UserEntity:
        """Create an unverified user. Raises DuplicateEmailException if the email exists."""

    async def save(self, user: UserEntity) -> UserEntity:
        """Persist all mutable fields of an existing user (last writer wins)."""

    async def delete_by_id(self, user_id: str) -> bool:
        """Delete the user; return False when no record existed."""

    async def ping(self) -> bool:
        """Return True when the backing store is reachable."""
