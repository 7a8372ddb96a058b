"""Session cookie helpers: http-only JWT cookie set on login, cleared on logout."""

import math

from fastapi import Response

from guardian_gate.application.dtos.auth import IssuedSession
from guardian_gate.core.config import get_settings
from guardian_gate.shared.utils.datetime import utc_now


def set_session_cookie(response: Response, session: IssuedSession) -> None:
    """Attach the session token as an http-only cookie (Secure outside development).

    The cookie expires together with the token's exp claim.
    """
    settings = get_settings()
    remaining = (session.expires_at - utc_now()).total_seconds()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session.token,
        max_age=max(0, math.ceil(remaining)),
        expires=session.expires_at,
        httponly=True,
        secure=not settings.is_development,
        samesite="lax",
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    settings = get_settings()
    response.delete_cookie(
        key=settings.session_cookie_name,
        path="/",
        httponly=True,
        secure=not settings.is_development,
        samesite="lax",
    )
