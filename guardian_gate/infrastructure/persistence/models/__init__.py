"""Persistence models: ORM entities and mixins."""

from guardian_gate.infrastructure.persistence.models.mixins import (
    AccountModel,
    CuidMixin,
    OtpSlotsMixin,
    TimestampMixin,
)
from guardian_gate.infrastructure.persistence.models.user import User

__all__ = [
    "AccountModel",
    "CuidMixin",
    "OtpSlotsMixin",
    "TimestampMixin",
    "User",
]
