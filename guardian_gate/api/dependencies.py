"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the credential store, notifier, and the
auth flow service. Routes depend only on these, not on infra directly.

When database_backend is 'postgres', the store is a SQLAlchemy repository
bound to a per-request session. When it is 'memory', the process-wide
InMemoryCredentialStore on app.state is used.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from guardian_gate.application.interfaces.repositories import ICredentialStore
from guardian_gate.application.interfaces.services import IEmailNotifier
from guardian_gate.application.services.auth_flow_service import AuthFlowService
from guardian_gate.application.services.otp_service import OtpService
from guardian_gate.core.config import get_settings
from guardian_gate.domain.entities import UserEntity
from guardian_gate.domain.exceptions import AuthenticationException
from guardian_gate.infrastructure.external.email import (
    EmailNotifierFactory,
    otp_ttls_from_settings,
)
from guardian_gate.infrastructure.persistence.database import session_scope
from guardian_gate.infrastructure.persistence.repositories import UserRepository
from guardian_gate.infrastructure.security import AuthSecurity, SessionIssuer


# ---- Credential store ----


async def get_credential_store(request: Request) -> AsyncIterator[ICredentialStore]:
    """Yield the credential store for the configured backend."""
    settings = get_settings()
    if settings.database_backend == "memory":
        yield request.app.state.credential_store
        return
    async with session_scope() as session:
        yield UserRepository(session)


# ---- Services ----


def get_email_notifier() -> IEmailNotifier:
    """Notifier for settings.email_backend. Tests override this dependency."""
    return EmailNotifierFactory.create_notifier(get_settings())


def get_session_issuer() -> SessionIssuer:
    return SessionIssuer()


def get_otp_service(
    store: Annotated[ICredentialStore, Depends(get_credential_store)],
) -> OtpService:
    settings = get_settings()
    return OtpService(
        store,
        otp_ttls_from_settings(settings),
        digits=settings.otp_digits,
    )


def get_auth_flow_service(
    store: Annotated[ICredentialStore, Depends(get_credential_store)],
    otp_service: Annotated[OtpService, Depends(get_otp_service)],
    notifier: Annotated[IEmailNotifier, Depends(get_email_notifier)],
    session_issuer: Annotated[SessionIssuer, Depends(get_session_issuer)],
) -> AuthFlowService:
    """Build AuthFlowService for the request (store, OTP engine, notifier, session issuer)."""
    settings = get_settings()
    return AuthFlowService(
        store=store,
        otp_service=otp_service,
        notifier=notifier,
        auth_security=AuthSecurity(rounds=settings.bcrypt_rounds),
        session_issuer=session_issuer,
    )


# ---- Auth (current user from session cookie or bearer token) ----

_http_bearer = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    auth_flow: Annotated[AuthFlowService, Depends(get_auth_flow_service)],
) -> UserEntity:
    """Return the session user; the cookie wins over the Authorization header.

    Raises AuthenticationException (401) when no token is presented, the
    token is invalid or expired, or the user no longer exists.
    """
    token = request.cookies.get(get_settings().session_cookie_name)
    if not token and credentials is not None:
        token = credentials.credentials
    if not token:
        raise AuthenticationException("Not authorized, no token")
    return await auth_flow.authenticate(token)
