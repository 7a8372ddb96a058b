"""SQLAlchemy mixins for the account tables.

Provides: CuidMixin, TimestampMixin, OtpSlotsMixin, and the combined
AccountModel base.
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from guardian_gate.shared.utils.generators import generate_cuid


def _expiry_column() -> Mapped[datetime | None]:
    return mapped_column(DateTime(timezone=True), nullable=True)


class CuidMixin:
    """String primary key filled with a fresh CUID2 on insert."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class TimestampMixin:
    """created_at / updated_at maintained by the database clock."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class OtpSlotsMixin:
    """One (code, expiry) column pair per OTP purpose.

    Column names mirror the slot attributes on UserEntity, so the
    repository copies them across by name. Both columns of a slot are
    null when no code is pending.
    """

    @declared_attr
    def verification_token(cls) -> Mapped[str | None]:
        return mapped_column(String, nullable=True)

    @declared_attr
    def verification_token_expires(cls) -> Mapped[datetime | None]:
        return _expiry_column()

    @declared_attr
    def login_token(cls) -> Mapped[str | None]:
        return mapped_column(String, nullable=True)

    @declared_attr
    def login_token_expires(cls) -> Mapped[datetime | None]:
        return _expiry_column()

    @declared_attr
    def reset_password_token(cls) -> Mapped[str | None]:
        return mapped_column(String, nullable=True)

    @declared_attr
    def reset_password_expires(cls) -> Mapped[datetime | None]:
        return _expiry_column()


class AccountModel(CuidMixin, TimestampMixin, OtpSlotsMixin):
    """Combined mixin: CUID + timestamps + OTP slots."""

    __abstract__ = True
