"""User ORM model: account credentials plus one OTP slot per purpose."""

from sqlalchemy import Boolean, String, text
from sqlalchemy.orm import Mapped, mapped_column

from guardian_gate.infrastructure.persistence.database import Base
from guardian_gate.infrastructure.persistence.models.mixins import AccountModel


class User(AccountModel, Base):
    """User model. Table: app_user. Email is globally unique."""

    __tablename__ = "app_user"

    name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String, nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String, nullable=False)
    is_verified: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("false")
    )
