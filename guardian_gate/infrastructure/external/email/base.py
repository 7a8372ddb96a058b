"""Shared behaviour for IEmailNotifier implementations."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import timedelta

from guardian_gate.application.services.otp_service import DEFAULT_OTP_TTLS
from guardian_gate.domain.enums import OtpPurpose
from guardian_gate.infrastructure.external.email.templates import EmailTemplateRenderer


class TemplatedEmailNotifier:
    """Renders each kind of email and hands it to deliver().

    Subclasses implement deliver(kind, to, subject, html).
    """

    def __init__(
        self,
        renderer: EmailTemplateRenderer | None = None,
        ttls: Mapping[OtpPurpose, timedelta] | None = None,
    ) -> None:
        self._renderer = renderer or EmailTemplateRenderer()
        self._ttls = {**DEFAULT_OTP_TTLS, **(ttls or {})}

    def _ttl_minutes(self, purpose: OtpPurpose) -> int:
        return max(1, int(self._ttls[purpose].total_seconds() // 60))

    async def send_verification(
        self,
        email: str,
        name: str,
        code: str,
        purpose: OtpPurpose = OtpPurpose.VERIFY_EMAIL,
    ) -> None:
        """Email and login codes share one template; purpose picks the stated lifetime."""
        subject, html = self._renderer.render(
            "verification",
            name=name,
            code=code,
            ttl_minutes=self._ttl_minutes(purpose),
        )
        await self.deliver("verification", email, subject, html)

    async def send_welcome(self, email: str, name: str) -> None:
        subject, html = self._renderer.render("welcome", name=name)
        await self.deliver("welcome", email, subject, html)

    async def send_password_reset(self, email: str, name: str, code: str) -> None:
        subject, html = self._renderer.render(
            "password_reset",
            name=name,
            code=code,
            ttl_minutes=self._ttl_minutes(OtpPurpose.RESET_PASSWORD),
        )
        await self.deliver("password_reset", email, subject, html)

    async def deliver(self, kind: str, to: str, subject: str, html: str) -> None:
        raise NotImplementedError
