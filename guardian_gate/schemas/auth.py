"""Auth API schemas.

Request bodies accept the camelCase keys used by the web client
(confirmPassword, currentPassword, newPassword) as well as snake_case.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from guardian_gate.application.dtos.user import UserResult

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)

# Same floor as the web client forms.
MIN_PASSWORD_LENGTH = 6


class RegisterRequest(BaseModel):
    """Request body for POST /auth/register."""

    model_config = _CAMEL

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(
        ..., min_length=MIN_PASSWORD_LENGTH, description="Password (min 6 characters)"
    )
    confirm_password: str = Field(..., min_length=1)


class EmailRequest(BaseModel):
    """Request body carrying only an email (resend / forgot-password)."""

    email: EmailStr


class EmailCodeRequest(BaseModel):
    """Request body for verify-email, verify-login and verify-reset-otp."""

    email: EmailStr
    token: str = Field(..., min_length=1, max_length=32, description="One-time code")


class LoginOtpRequest(BaseModel):
    """Request body for POST /auth/send-login-otp."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class ResetPasswordRequest(BaseModel):
    model_config = _CAMEL

    email: EmailStr
    token: str = Field(..., min_length=1, max_length=32)
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)
    confirm_password: str = Field(..., min_length=1)


class ChangePasswordRequest(BaseModel):
    model_config = _CAMEL

    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)
    confirm_password: str = Field(..., min_length=1)


class DeleteAccountRequest(BaseModel):
    """Re-confirmation required to delete the signed-in account.

    email is a plain string so a malformed value reaches the mismatch check
    (401) instead of failing body validation (400).
    """

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserSummary(BaseModel):
    """Public user fields. Never carries the password hash or OTP slots."""

    model_config = _CAMEL

    id: str
    name: str
    email: str
    is_verified: bool
    created_at: datetime

    @classmethod
    def from_result(cls, user: UserResult) -> "UserSummary":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            is_verified=user.is_verified,
            created_at=user.created_at,
        )


class AuthResponse(BaseModel):
    """Envelope for every auth endpoint: {success, message?, user?, token?}."""

    success: bool = True
    message: str | None = None
    user: UserSummary | None = None
    token: str | None = None
