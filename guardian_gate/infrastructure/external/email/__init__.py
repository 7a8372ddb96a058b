"""Outbound email: templated notifiers (log, Gmail API) and their factory."""

from guardian_gate.infrastructure.external.email.factory import (
    EmailNotifierFactory,
    otp_ttls_from_settings,
)
from guardian_gate.infrastructure.external.email.gmail_notifier import GmailApiNotifier
from guardian_gate.infrastructure.external.email.log_notifier import LogOnlyEmailNotifier
from guardian_gate.infrastructure.external.email.templates import EmailTemplateRenderer

__all__ = [
    "EmailNotifierFactory",
    "EmailTemplateRenderer",
    "GmailApiNotifier",
    "LogOnlyEmailNotifier",
    "otp_ttls_from_settings",
]
