"""Infrastructure exceptions for the credential store and email transport.

They extend GuardianGateException so presentation maps them to HTTP
responses consistently. Messages are generic; the underlying cause is
chained (raise ... from) and logged by the exception handler.
"""

from guardian_gate.domain.exceptions import GuardianGateException


class StoreUnavailableException(GuardianGateException):
    """Credential store read or write failed (connection lost, timeout, driver error)."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            "Server Error",
            "STORE_UNAVAILABLE",
            {"operation": operation},
        )


class NotifierFailureException(GuardianGateException):
    """Sending an email failed. The caller may retry via a resend operation."""

    def __init__(self, kind: str, reason: str | None = None) -> None:
        details = {"kind": kind}
        if reason:
            details["reason"] = reason
        super().__init__(
            f"Failed to send {kind.replace('_', ' ')} email",
            "NOTIFIER_FAILURE",
            details,
        )
