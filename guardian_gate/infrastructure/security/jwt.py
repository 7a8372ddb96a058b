"""Session JWTs: HS256 tokens whose subject is the user id.

Secret, algorithm and lifetime come from guardian_gate.core.config.
"""

from datetime import datetime, timedelta
from typing import cast

from jose import JWTError, jwt

from guardian_gate.core.config import get_settings
from guardian_gate.shared.utils.datetime import utc_now


def encode_session_token(
    user_id: str,
    lifetime: timedelta | None = None,
) -> tuple[str, datetime]:
    """Sign a session token for user_id.

    Args:
        user_id: Stored as the sub claim.
        lifetime: Optional TTL; else settings.access_token_lifetime.

    Returns:
        (encoded JWT string, absolute expiry in UTC).
    """
    settings = get_settings()
    issued_at = utc_now()
    expires_at = issued_at + (
        lifetime if lifetime is not None else settings.access_token_lifetime
    )
    encoded = jwt.encode(
        {"sub": user_id, "iat": issued_at, "exp": expires_at},
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded), expires_at


def decode_session_token(token: str) -> str:
    """Verify a session token and return its user id.

    Raises:
        ValueError: Bad signature, expired, or sub/exp missing or empty.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    user_id = payload.get("sub")
    if not isinstance(user_id, str) or not user_id:
        raise ValueError("Token missing required claim: sub")
    return user_id
