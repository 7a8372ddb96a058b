"""User domain entity.

Represents an account and its one-time-code slots, independent of
persistence. Credential stores load and save this entity.
"""

from dataclasses import dataclass
from datetime import datetime

from guardian_gate.domain.enums import OtpPurpose
from guardian_gate.domain.exceptions import ValidationException

# purpose -> (token attribute, expiry attribute)
_OTP_SLOTS: dict[OtpPurpose, tuple[str, str]] = {
    OtpPurpose.VERIFY_EMAIL: ("verification_token", "verification_token_expires"),
    OtpPurpose.LOGIN: ("login_token", "login_token_expires"),
    OtpPurpose.RESET_PASSWORD: ("reset_password_token", "reset_password_expires"),
}


@dataclass
class UserEntity:
    """Domain entity for a user account.

    Each OTP purpose has its own (token, expires) pair. A pair is either
    fully set or fully empty; validation runs on construction and every
    slot mutation goes through set_otp / clear_otp to keep it that way.
    """

    id: str
    email: str
    name: str
    password_hash: str
    is_verified: bool
    created_at: datetime
    verification_token: str | None = None
    verification_token_expires: datetime | None = None
    login_token: str | None = None
    login_token_expires: datetime | None = None
    reset_password_token: str | None = None
    reset_password_expires: datetime | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate user invariants. Raises ValidationException if invalid."""
        if not self.id:
            raise ValidationException("User ID is required", field="id")
        if not self.email:
            raise ValidationException("User email is required", field="email")
        for purpose, (token_attr, expires_attr) in _OTP_SLOTS.items():
            token = getattr(self, token_attr)
            expires = getattr(self, expires_attr)
            if (token is None) != (expires is None):
                raise ValidationException(
                    f"OTP slot for {purpose.value} must have both token and expiry or neither",
                    field=token_attr,
                )

    def get_otp(self, purpose: OtpPurpose) -> tuple[str | None, datetime | None]:
        """Return (token, expires) currently stored for purpose."""
        token_attr, expires_attr = _OTP_SLOTS[purpose]
        return getattr(self, token_attr), getattr(self, expires_attr)

    def set_otp(self, purpose: OtpPurpose, token: str, expires: datetime) -> None:
        """Overwrite the slot for purpose; any previous code for it stops validating."""
        token_attr, expires_attr = _OTP_SLOTS[purpose]
        setattr(self, token_attr, token)
        setattr(self, expires_attr, expires)

    def clear_otp(self, purpose: OtpPurpose) -> None:
        token_attr, expires_attr = _OTP_SLOTS[purpose]
        setattr(self, token_attr, None)
        setattr(self, expires_attr, None)

    def mark_verified(self) -> None:
        """Flag the email as verified. Verification never reverts."""
        self.is_verified = True
