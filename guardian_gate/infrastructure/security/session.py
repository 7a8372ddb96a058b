"""Session issuer: signed JWT bound to a user id."""

from guardian_gate.application.dtos.auth import IssuedSession
from guardian_gate.domain.exceptions import AuthenticationException
from guardian_gate.infrastructure.security.jwt import (
    decode_session_token,
    encode_session_token,
)
from guardian_gate.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class SessionIssuer:
    """ISessionIssuer using HS256 JWTs with sub = user id."""

    def issue(self, user_id: str) -> IssuedSession:
        token, expires_at = encode_session_token(user_id)
        return IssuedSession(token=token, expires_at=expires_at)

    def resolve_user_id(self, token: str) -> str:
        try:
            return decode_session_token(token)
        except ValueError as e:
            logger.debug("Session token rejected: %s", e)
            raise AuthenticationException("Not authorized, token failed") from e
