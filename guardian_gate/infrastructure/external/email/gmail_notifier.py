"""Email notifier using the Gmail API with an OAuth2 refresh token."""

from __future__ import annotations

import asyncio
import base64
from collections.abc import Mapping
from datetime import timedelta
from email.mime.text import MIMEText
from typing import Any

from google.auth.exceptions import RefreshError, TransportError
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from guardian_gate.domain.enums import OtpPurpose
from guardian_gate.infrastructure.exceptions import NotifierFailureException
from guardian_gate.infrastructure.external.email.base import TemplatedEmailNotifier
from guardian_gate.infrastructure.external.email.templates import EmailTemplateRenderer
from guardian_gate.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

GMAIL_SEND_SCOPE = "https://www.googleapis.com/auth/gmail.send"


class GmailApiNotifier(TemplatedEmailNotifier):
    """Sends HTML email as the configured Gmail account.

    A fresh access token is obtained from the refresh token per send; any
    transport or API failure becomes NotifierFailureException.
    """

    def __init__(
        self,
        sender: str,
        client_id: str,
        client_secret: str,
        refresh_token: str,
        token_uri: str = "https://oauth2.googleapis.com/token",
        renderer: EmailTemplateRenderer | None = None,
        ttls: Mapping[OtpPurpose, timedelta] | None = None,
    ) -> None:
        super().__init__(renderer, ttls)
        self._sender = sender
        self._client_id = client_id
        self._client_secret = client_secret
        self._refresh_token = refresh_token
        self._token_uri = token_uri

    def _credentials(self) -> Credentials:
        return Credentials(
            token=None,
            refresh_token=self._refresh_token,
            token_uri=self._token_uri,
            client_id=self._client_id,
            client_secret=self._client_secret,
            scopes=[GMAIL_SEND_SCOPE],
        )

    def _build_raw(self, to: str, subject: str, html: str) -> str:
        message = MIMEText(html, "html", "utf-8")
        message["to"] = to
        message["from"] = self._sender
        message["subject"] = subject
        return base64.urlsafe_b64encode(message.as_bytes()).decode("ascii")

    async def deliver(self, kind: str, to: str, subject: str, html: str) -> None:
        raw = self._build_raw(to, subject, html)
        try:
            service: Any = await asyncio.to_thread(
                build,
                "gmail",
                "v1",
                credentials=self._credentials(),
                cache_discovery=False,
            )
            request = service.users().messages().send(userId="me", body={"raw": raw})
            result = await asyncio.to_thread(request.execute)
        except HttpError as e:
            status = getattr(e.resp, "status", None)
            raise NotifierFailureException(kind, f"Gmail API error {status}") from e
        except (RefreshError, TransportError) as e:
            raise NotifierFailureException(kind, "OAuth token refresh failed") from e
        except OSError as e:
            raise NotifierFailureException(kind, "network error") from e
        logger.info(
            "Email sent: kind=%s to=%s message_id=%s", kind, to, result.get("id")
        )
