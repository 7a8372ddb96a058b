"""Domain enumerations for guardian-gate.

Enums represent fixed sets of domain values (e.g. OTP purpose).
"""

from enum import Enum


class OtpPurpose(str, Enum):
    """Reason a one-time code was issued.

    Each purpose owns an independent token slot on the user record, so a
    code issued for one purpose never validates another.
    """

    VERIFY_EMAIL = "verify_email"
    LOGIN = "login"
    RESET_PASSWORD = "reset_password"
