"""Email notifier factory: builds the notifier selected by settings.email_backend."""

from collections.abc import Mapping
from datetime import timedelta
from typing import ClassVar

from guardian_gate.application.interfaces.services import IEmailNotifier
from guardian_gate.core.config import Settings
from guardian_gate.domain.enums import OtpPurpose
from guardian_gate.infrastructure.external.email.gmail_notifier import GmailApiNotifier
from guardian_gate.infrastructure.external.email.log_notifier import LogOnlyEmailNotifier
from guardian_gate.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def otp_ttls_from_settings(settings: Settings) -> Mapping[OtpPurpose, timedelta]:
    """Per-purpose OTP lifetimes from settings."""
    return {
        OtpPurpose.VERIFY_EMAIL: timedelta(seconds=settings.otp_verify_email_ttl_seconds),
        OtpPurpose.LOGIN: timedelta(seconds=settings.otp_login_ttl_seconds),
        OtpPurpose.RESET_PASSWORD: timedelta(
            seconds=settings.otp_reset_password_ttl_seconds
        ),
    }


class EmailNotifierFactory:
    """Factory for email notifier instances by email_backend."""

    _backends: ClassVar[tuple[str, ...]] = ("log", "gmail")

    @classmethod
    def create_notifier(cls, settings: Settings) -> IEmailNotifier:
        """Create the notifier for settings.email_backend.

        Raises:
            ValueError: If the backend is not supported.
        """
        backend = settings.email_backend.lower()
        ttls = otp_ttls_from_settings(settings)
        if backend == "log":
            return LogOnlyEmailNotifier(ttls=ttls)
        if backend == "gmail":
            assert settings.gmail_client_secret is not None
            assert settings.gmail_refresh_token is not None
            return GmailApiNotifier(
                sender=settings.email_sender,
                client_id=settings.gmail_client_id,
                client_secret=settings.gmail_client_secret.get_secret_value(),
                refresh_token=settings.gmail_refresh_token.get_secret_value(),
                token_uri=settings.gmail_token_uri,
                ttls=ttls,
            )
        raise ValueError(
            f"Unsupported email backend: {settings.email_backend}. "
            f"Supported: {list(cls._backends)}"
        )
