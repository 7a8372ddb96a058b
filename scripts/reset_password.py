"""Reset a user's password (Postgres only).

Usage:
    python -m scripts.reset_password <email> <new_password>

Also clears any pending password-reset code for the user.
"""

import asyncio
import sys

from guardian_gate.application.interfaces.repositories import ICredentialStore
from guardian_gate.core.config import get_settings
from guardian_gate.domain.entities import UserEntity
from guardian_gate.domain.enums import OtpPurpose
from guardian_gate.infrastructure.persistence.database import session_scope
from guardian_gate.infrastructure.persistence.repositories import UserRepository
from guardian_gate.infrastructure.security.password import get_password_hash
from guardian_gate.schemas.auth import MIN_PASSWORD_LENGTH


async def reset_password(
    store: ICredentialStore, email: str, new_password: str
) -> UserEntity | None:
    """Set a new password hash for email; return the user or None if not found."""
    user = await store.find_by_email(email)
    if user is None:
        return None
    user.password_hash = await asyncio.to_thread(
        get_password_hash, new_password, get_settings().bcrypt_rounds
    )
    user.clear_otp(OtpPurpose.RESET_PASSWORD)
    return await store.save(user)


async def main() -> None:
    if len(sys.argv) < 3:
        print(
            "Usage: python -m scripts.reset_password <email> <new_password>",
            file=sys.stderr,
        )
        sys.exit(1)
    email = sys.argv[1]
    new_password = sys.argv[2]
    if len(new_password) < MIN_PASSWORD_LENGTH:
        print(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
            file=sys.stderr,
        )
        sys.exit(1)

    settings = get_settings()
    if settings.database_backend != "postgres":
        print("This script requires DATABASE_BACKEND=postgres", file=sys.stderr)
        sys.exit(1)

    async with session_scope() as session:
        user = await reset_password(UserRepository(session), email, new_password)
    if user is None:
        print(f"User not found: {email}", file=sys.stderr)
        sys.exit(1)
    print(f"Password reset for user {user.id} ({user.email})")


if __name__ == "__main__":
    asyncio.run(main())
