"""Security: JWT sessions and password hashing."""

from guardian_gate.infrastructure.security.jwt import (
    decode_session_token,
    encode_session_token,
)
from guardian_gate.infrastructure.security.password import (
    AuthSecurity,
    get_password_hash,
    verify_password,
)
from guardian_gate.infrastructure.security.session import SessionIssuer

__all__ = [
    "AuthSecurity",
    "SessionIssuer",
    "decode_session_token",
    "encode_session_token",
    "get_password_hash",
    "verify_password",
]
