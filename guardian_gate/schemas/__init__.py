"""Pydantic request/response schemas for the API."""

from guardian_gate.schemas.auth import (
    AuthResponse,
    ChangePasswordRequest,
    DeleteAccountRequest,
    EmailCodeRequest,
    EmailRequest,
    LoginOtpRequest,
    RegisterRequest,
    ResetPasswordRequest,
    UserSummary,
)
from guardian_gate.schemas.health import HealthResponse, RootResponse

__all__ = [
    "AuthResponse",
    "ChangePasswordRequest",
    "DeleteAccountRequest",
    "EmailCodeRequest",
    "EmailRequest",
    "HealthResponse",
    "LoginOtpRequest",
    "RegisterRequest",
    "ResetPasswordRequest",
    "RootResponse",
    "UserSummary",
]
