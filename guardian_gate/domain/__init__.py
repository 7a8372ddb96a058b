"""Domain layer: entities, enums, and business-rule exceptions."""

from guardian_gate.domain.entities import UserEntity
from guardian_gate.domain.enums import OtpPurpose
from guardian_gate.domain.exceptions import GuardianGateException, ValidationException

__all__ = [
    "GuardianGateException",
    "OtpPurpose",
    "UserEntity",
    "ValidationException",
]
