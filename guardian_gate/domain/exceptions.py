"""Domain exceptions for guardian-gate.

Defines domain-level exceptions that represent business rule violations in
the authentication flows. These exceptions are independent of infrastructure
concerns. The presentation layer maps them to HTTP responses in
guardian_gate.core.exception_handlers using error_code.
"""

from typing import Any


class GuardianGateException(Exception):
    """Base exception for all guardian-gate errors.

    All custom exceptions inherit from this class so the exception handler
    can render a consistent envelope and log the failure once.

    Attributes:
        message: Human-readable error description (safe to show to callers).
        error_code: Machine-readable error code.
        details: Additional error context; logged, never sent on the wire.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the failure envelope sent to clients (no details)."""
        return {"success": False, "message": self.message}


class ValidationException(GuardianGateException):
    """Raised when input validation fails (e.g. invalid format or inconsistent entity state)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class PasswordMismatchException(GuardianGateException):
    """Raised when a password and its confirmation differ."""

    def __init__(self) -> None:
        super().__init__("Passwords do not match", "PASSWORD_MISMATCH")


class AuthenticationException(GuardianGateException):
    """Raised when a session is missing, malformed, expired, or points at a deleted user."""

    def __init__(self, message: str = "Not authorized") -> None:
        """Initialize with optional message.

        Args:
            message: Description of the authentication failure.
        """
        super().__init__(message, "AUTHENTICATION_ERROR")


class InvalidCredentialsException(GuardianGateException):
    """Raised when a password check fails."""

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message, "INVALID_CREDENTIALS")


class EmailNotVerifiedException(GuardianGateException):
    """Raised when an unverified user asks for a login code."""

    def __init__(self) -> None:
        super().__init__(
            "Please verify your email address first. "
            "Check your inbox for the verification code.",
            "EMAIL_NOT_VERIFIED",
        )


class EmailMismatchException(GuardianGateException):
    """Raised when the email re-confirmed for account deletion is not the session user's."""

    def __init__(self) -> None:
        super().__init__("Email does not match", "EMAIL_MISMATCH")


class AlreadyVerifiedException(GuardianGateException):
    """Raised when resending a verification code to an already verified user."""

    def __init__(self) -> None:
        super().__init__("Email is already verified", "ALREADY_VERIFIED")


class InvalidOrExpiredCodeException(GuardianGateException):
    """Raised when a one-time code is missing, wrong, expired, or for another purpose."""

    def __init__(self, purpose: str, message: str | None = None) -> None:
        """Initialize with the purpose the code was checked against.

        Args:
            purpose: OTP purpose value (e.g. 'login').
            message: Optional override; defaults to a purpose-neutral message.
        """
        super().__init__(
            message or "Invalid or expired verification code",
            "INVALID_OR_EXPIRED_CODE",
            {"purpose": purpose},
        )


class DuplicateEmailException(GuardianGateException):
    """Raised when registering an email that already exists."""

    def __init__(self) -> None:
        super().__init__(
            "User already exists with this email",
            "DUPLICATE_EMAIL",
        )


class UserNotFoundException(GuardianGateException):
    """Raised when an operation targets an email with no account."""

    def __init__(self, message: str = "User not found", email: str | None = None) -> None:
        """Initialize with message and the email that was looked up.

        Args:
            message: Human-readable message (varies per flow).
            email: Email that was not found; kept in details for logging.
        """
        details = {"email": email} if email else {}
        super().__init__(message, "USER_NOT_FOUND", details)
