"""Application services: OTP engine and auth flow controller."""

from guardian_gate.application.services.auth_flow_service import AuthFlowService
from guardian_gate.application.services.otp_service import (
    DEFAULT_OTP_TTLS,
    OTP_DIGITS,
    OtpService,
)

__all__ = [
    "DEFAULT_OTP_TTLS",
    "OTP_DIGITS",
    "AuthFlowService",
    "OtpService",
]
