"""Service interfaces (ports) for the application layer.

Protocols define contracts for collaborators the auth flows depend on (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from guardian_gate.application.dtos.auth import IssuedSession
    from guardian_gate.domain.enums import OtpPurpose


# Email notifier interface
class IEmailNotifier(Protocol):
    """Protocol for delivering one-time codes and status emails.

    Implementations raise NotifierFailureException when delivery fails;
    callers never retry internally.
    """

    async def send_verification(
        self, email: str, name: str, code: str, purpose: OtpPurpose = ...
    ) -> None:
        """Send an email-verification or login code (purpose sets the stated lifetime)."""

    async def send_welcome(self, email: str, name: str) -> None:
        """Send the welcome email after successful verification."""

    async def send_password_reset(self, email: str, name: str, code: str) -> None:
        """Send the password-reset code."""


# Password hashing interface
class IAuthSecurity(Protocol):
    """Protocol for password hashing and comparison (blocking; run in a thread)."""

    def hash_password(self, password: str) -> str:
        """Return a one-way hash of password."""

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Return True if plain_password matches hashed_password."""


# Session issuer interface
class ISessionIssuer(Protocol):
    """Protocol for minting and resolving signed bearer sessions."""

    def issue(self, user_id: str) -> IssuedSession:
        """Mint a session token bound to user_id."""

    def resolve_user_id(self, token: str) -> str:
        """Return the user id in token. Raises AuthenticationException if invalid or expired."""
