"""Tests for email templates, the log notifier, the Gmail notifier and the factory."""

import base64
import email
import logging
from datetime import timedelta
from unittest.mock import MagicMock, patch

import httplib2
import pytest
from google.auth.exceptions import RefreshError
from googleapiclient.errors import HttpError
from pydantic import SecretStr

from guardian_gate.core.config import get_settings
from guardian_gate.domain.enums import OtpPurpose
from guardian_gate.infrastructure.exceptions import NotifierFailureException
from guardian_gate.infrastructure.external.email import (
    EmailNotifierFactory,
    EmailTemplateRenderer,
    GmailApiNotifier,
    LogOnlyEmailNotifier,
    otp_ttls_from_settings,
)

GMAIL_BUILD = "guardian_gate.infrastructure.external.email.gmail_notifier.build"


def _gmail_notifier(**kwargs) -> GmailApiNotifier:
    return GmailApiNotifier(
        sender="noreply@example.com",
        client_id="client-id",
        client_secret="client-secret",
        refresh_token="refresh-token",
        **kwargs,
    )


def _gmail_service(execute_result=None, execute_error=None) -> MagicMock:
    service = MagicMock()
    request = service.users.return_value.messages.return_value.send.return_value
    if execute_error is not None:
        request.execute.side_effect = execute_error
    else:
        request.execute.return_value = execute_result or {"id": "msg-1"}
    return service


def _decoded_message(service: MagicMock) -> email.message.Message:
    send = service.users.return_value.messages.return_value.send
    raw = send.call_args.kwargs["body"]["raw"]
    return email.message_from_bytes(base64.urlsafe_b64decode(raw))


# ---- templates ----


def test_verification_template() -> None:
    subject, html = EmailTemplateRenderer().render(
        "verification", name="Ada", code="123456", ttl_minutes=2
    )
    assert subject == "Verify Your Email Address"
    assert "Welcome, Ada!" in html
    assert "123456" in html
    assert "expires in 2 minutes" in html


def test_password_reset_template() -> None:
    subject, html = EmailTemplateRenderer().render(
        "password_reset", name="Ada", code="654321", ttl_minutes=10
    )
    assert subject == "Password Reset Request"
    assert "654321" in html
    assert "expires in 10 minutes" in html


def test_welcome_template() -> None:
    subject, html = EmailTemplateRenderer().render("welcome", name="Ada")
    assert subject == "Welcome to Our App!"
    assert "successfully verified" in html


def test_names_are_html_escaped() -> None:
    _, html = EmailTemplateRenderer().render("welcome", name="<script>x</script>")
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_unknown_template_kind() -> None:
    with pytest.raises(KeyError):
        EmailTemplateRenderer().render("newsletter")


# ---- log notifier ----


async def test_log_notifier_keeps_code_out_of_info_logs(caplog: pytest.LogCaptureFixture) -> None:
    notifier = LogOnlyEmailNotifier()
    with caplog.at_level(logging.INFO, logger="guardian_gate"):
        await notifier.send_verification("ada@example.com", "Ada", "123456")
    info_text = " ".join(r.getMessage() for r in caplog.records if r.levelno >= logging.INFO)
    assert "ada@example.com" in info_text
    assert "123456" not in info_text


async def test_log_notifier_writes_body_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    notifier = LogOnlyEmailNotifier()
    with caplog.at_level(logging.DEBUG, logger="guardian_gate"):
        await notifier.send_password_reset("ada@example.com", "Ada", "654321")
    assert "654321" in caplog.text


# ---- gmail notifier ----


async def test_gmail_notifier_sends_html_message() -> None:
    service = _gmail_service()
    with patch(GMAIL_BUILD, return_value=service) as build:
        await _gmail_notifier().send_verification("ada@example.com", "Ada", "123456")
    assert build.call_args.args == ("gmail", "v1")
    creds = build.call_args.kwargs["credentials"]
    assert creds.refresh_token == "refresh-token"
    assert creds.client_id == "client-id"
    message = _decoded_message(service)
    assert message["to"] == "ada@example.com"
    assert message["from"] == "noreply@example.com"
    assert message["subject"] == "Verify Your Email Address"
    body = message.get_payload(decode=True).decode("utf-8")
    assert "123456" in body
    send = service.users.return_value.messages.return_value.send
    assert send.call_args.kwargs["userId"] == "me"


async def test_gmail_notifier_builds_client_per_send() -> None:
    service = _gmail_service()
    notifier = _gmail_notifier()
    with patch(GMAIL_BUILD, return_value=service) as build:
        await notifier.send_welcome("ada@example.com", "Ada")
        await notifier.send_welcome("ada@example.com", "Ada")
    assert build.call_count == 2


async def test_gmail_notifier_uses_configured_ttl_in_body() -> None:
    service = _gmail_service()
    notifier = _gmail_notifier(ttls={OtpPurpose.RESET_PASSWORD: timedelta(minutes=15)})
    with patch(GMAIL_BUILD, return_value=service):
        await notifier.send_password_reset("ada@example.com", "Ada", "654321")
    body = _decoded_message(service).get_payload(decode=True).decode("utf-8")
    assert "expires in 15 minutes" in body


async def test_login_code_email_states_login_lifetime() -> None:
    service = _gmail_service()
    notifier = _gmail_notifier(
        ttls={
            OtpPurpose.VERIFY_EMAIL: timedelta(minutes=2),
            OtpPurpose.LOGIN: timedelta(minutes=5),
        }
    )
    with patch(GMAIL_BUILD, return_value=service):
        await notifier.send_verification(
            "ada@example.com", "Ada", "123456", OtpPurpose.LOGIN
        )
    body = _decoded_message(service).get_payload(decode=True).decode("utf-8")
    assert "expires in 5 minutes" in body


async def test_gmail_api_error_becomes_notifier_failure() -> None:
    error = HttpError(httplib2.Response({"status": 500}), b"backend error")
    service = _gmail_service(execute_error=error)
    with patch(GMAIL_BUILD, return_value=service):
        with pytest.raises(NotifierFailureException) as exc_info:
            await _gmail_notifier().send_verification("ada@example.com", "Ada", "123456")
    assert exc_info.value.message == "Failed to send verification email"
    assert exc_info.value.__cause__ is error


async def test_gmail_refresh_error_becomes_notifier_failure() -> None:
    service = _gmail_service(execute_error=RefreshError("invalid_grant"))
    with patch(GMAIL_BUILD, return_value=service):
        with pytest.raises(NotifierFailureException) as exc_info:
            await _gmail_notifier().send_password_reset("ada@example.com", "Ada", "1")
    assert exc_info.value.details["reason"] == "OAuth token refresh failed"


# ---- factory ----


def test_factory_builds_log_notifier_by_default() -> None:
    notifier = EmailNotifierFactory.create_notifier(get_settings())
    assert isinstance(notifier, LogOnlyEmailNotifier)


def test_factory_builds_gmail_notifier() -> None:
    settings = get_settings().model_copy(
        update={
            "email_backend": "gmail",
            "email_sender": "noreply@example.com",
            "gmail_client_id": "id",
            "gmail_client_secret": SecretStr("secret"),
            "gmail_refresh_token": SecretStr("refresh"),
        }
    )
    notifier = EmailNotifierFactory.create_notifier(settings)
    assert isinstance(notifier, GmailApiNotifier)


def test_factory_rejects_unknown_backend() -> None:
    settings = get_settings().model_copy(update={"email_backend": "pigeon"})
    with pytest.raises(ValueError):
        EmailNotifierFactory.create_notifier(settings)


def test_otp_ttls_from_settings() -> None:
    ttls = otp_ttls_from_settings(get_settings())
    assert ttls[OtpPurpose.VERIFY_EMAIL] == timedelta(minutes=2)
    assert ttls[OtpPurpose.LOGIN] == timedelta(minutes=2)
    assert ttls[OtpPurpose.RESET_PASSWORD] == timedelta(minutes=10)
