"""Auth flows: registration, OTP login, password reset/change, account deletion.

Orchestrates the credential store, the OTP engine, the email notifier and
the session issuer. Every mutation is persisted before the notification is
awaited; if the notifier fails the error propagates (500) and the stored
state is kept, so the caller retries with the matching resend operation.
"""

from __future__ import annotations

import asyncio

from guardian_gate.application.dtos.auth import SessionResult
from guardian_gate.application.dtos.user import UserCreate, UserResult
from guardian_gate.application.interfaces.repositories import ICredentialStore
from guardian_gate.application.interfaces.services import (
    IAuthSecurity,
    IEmailNotifier,
    ISessionIssuer,
)
from guardian_gate.application.services.otp_service import OtpService
from guardian_gate.domain.entities import UserEntity
from guardian_gate.domain.enums import OtpPurpose
from guardian_gate.domain.exceptions import (
    AlreadyVerifiedException,
    AuthenticationException,
    DuplicateEmailException,
    EmailMismatchException,
    EmailNotVerifiedException,
    InvalidCredentialsException,
    PasswordMismatchException,
    UserNotFoundException,
)
from guardian_gate.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class AuthFlowService:
    """Flow controller for every user-facing auth operation."""

    def __init__(
        self,
        store: ICredentialStore,
        otp_service: OtpService,
        notifier: IEmailNotifier,
        auth_security: IAuthSecurity,
        session_issuer: ISessionIssuer,
    ) -> None:
        self._store = store
        self._otp = otp_service
        self._notifier = notifier
        self._auth_security = auth_security
        self._session_issuer = session_issuer

    # ---- Registration ----

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        confirm_password: str,
    ) -> UserResult:
        """Create an unverified user and email a verification code.

        Raises:
            PasswordMismatchException: password != confirm_password.
            DuplicateEmailException: email already registered.
        """
        _require_match(password, confirm_password)
        if await self._store.find_by_email(email) is not None:
            raise DuplicateEmailException()
        password_hash = await asyncio.to_thread(
            self._auth_security.hash_password, password
        )
        user = await self._store.create(
            UserCreate(name=name, email=email, password_hash=password_hash)
        )
        logger.info("User registered: user_id=%s", user.id)
        code = await self._otp.attach(user, OtpPurpose.VERIFY_EMAIL)
        await self._notifier.send_verification(user.email, user.name, code)
        return UserResult.from_entity(user)

    async def verify_email(self, email: str, token: str) -> SessionResult:
        """Mark the user verified, send the welcome email, and open a session."""
        user = await self._user_for_code(email, OtpPurpose.VERIFY_EMAIL)
        self._otp.validate(user, OtpPurpose.VERIFY_EMAIL, token)
        user.mark_verified()
        await self._otp.clear(user, OtpPurpose.VERIFY_EMAIL)
        logger.info("Email verified: user_id=%s", user.id)
        await self._notifier.send_welcome(user.email, user.name)
        return self._open_session(user)

    async def resend_verification(self, email: str) -> None:
        """Issue a new verification code, invalidating the previous one."""
        user = await self._require_user(email)
        if user.is_verified:
            raise AlreadyVerifiedException()
        code = await self._otp.attach(user, OtpPurpose.VERIFY_EMAIL)
        await self._notifier.send_verification(user.email, user.name, code)

    # ---- Login ----

    async def send_login_otp(self, email: str, password: str) -> UserResult:
        """Check the password and email a login code. Login always takes two steps."""
        user = await self._require_user(
            email, "No account found with this email. Please register first."
        )
        if not await self._password_matches(password, user):
            raise InvalidCredentialsException()
        if not user.is_verified:
            raise EmailNotVerifiedException()
        code = await self._otp.attach(user, OtpPurpose.LOGIN)
        await self._notifier.send_verification(
            user.email, user.name, code, OtpPurpose.LOGIN
        )
        return UserResult.from_entity(user)

    async def resend_login_otp(self, email: str) -> None:
        user = await self._require_user(email)
        code = await self._otp.attach(user, OtpPurpose.LOGIN)
        await self._notifier.send_verification(
            user.email, user.name, code, OtpPurpose.LOGIN
        )

    async def verify_login(self, email: str, token: str) -> SessionResult:
        user = await self._user_for_code(email, OtpPurpose.LOGIN)
        await self._otp.consume(user, OtpPurpose.LOGIN, token)
        logger.info("Login verified: user_id=%s", user.id)
        return self._open_session(user)

    # ---- Password reset ----

    async def forgot_password(self, email: str) -> None:
        user = await self._require_user(email, "No account found with this email")
        code = await self._otp.attach(user, OtpPurpose.RESET_PASSWORD)
        await self._notifier.send_password_reset(user.email, user.name, code)

    async def verify_reset_otp(self, email: str, token: str) -> None:
        """Check a reset code without consuming it; reset_password checks it again."""
        user = await self._user_for_code(email, OtpPurpose.RESET_PASSWORD)
        self._otp.validate(user, OtpPurpose.RESET_PASSWORD, token)

    async def reset_password(
        self,
        email: str,
        token: str,
        password: str,
        confirm_password: str,
    ) -> None:
        """Set a new password with a live reset code, then clear the code."""
        _require_match(password, confirm_password)
        user = await self._user_for_code(email, OtpPurpose.RESET_PASSWORD)
        self._otp.validate(user, OtpPurpose.RESET_PASSWORD, token)
        user.password_hash = await asyncio.to_thread(
            self._auth_security.hash_password, password
        )
        user.clear_otp(OtpPurpose.RESET_PASSWORD)
        await self._store.save(user)
        logger.info("Password reset: user_id=%s", user.id)

    # ---- Authenticated operations ----

    async def change_password(
        self,
        user_id: str,
        current_password: str,
        new_password: str,
        confirm_password: str,
    ) -> None:
        _require_match(new_password, confirm_password)
        user = await self._require_session_user(user_id)
        if not await self._password_matches(current_password, user):
            raise InvalidCredentialsException("Current password is incorrect")
        user.password_hash = await asyncio.to_thread(
            self._auth_security.hash_password, new_password
        )
        await self._store.save(user)
        logger.info("Password changed: user_id=%s", user.id)

    async def delete_account(self, user_id: str, email: str, password: str) -> None:
        """Delete the session user after re-confirming email and password."""
        user = await self._require_session_user(user_id)
        if user.email != email:
            raise EmailMismatchException()
        if not await self._password_matches(password, user):
            raise InvalidCredentialsException("Password is incorrect")
        await self._store.delete_by_id(user.id)
        logger.info("Account deleted: user_id=%s", user.id)

    async def get_self(self, user_id: str) -> UserResult:
        user = await self._require_session_user(user_id)
        return UserResult.from_entity(user)

    async def authenticate(self, session_token: str) -> UserEntity:
        """Resolve a session token to its user. Raises AuthenticationException."""
        user_id = self._session_issuer.resolve_user_id(session_token)
        return await self._require_session_user(user_id)

    # ---- Helpers ----

    async def _require_user(self, email: str, message: str = "User not found") -> UserEntity:
        user = await self._store.find_by_email(email)
        if user is None:
            raise UserNotFoundException(message, email=email)
        return user

    async def _user_for_code(self, email: str, purpose: OtpPurpose) -> UserEntity:
        user = await self._store.find_by_email(email)
        if user is None:
            raise self._otp.reject_unknown_user(purpose)
        return user

    async def _require_session_user(self, user_id: str) -> UserEntity:
        user = await self._store.find_by_id(user_id)
        if user is None:
            raise AuthenticationException("Not authorized, user no longer exists")
        return user

    async def _password_matches(self, password: str, user: UserEntity) -> bool:
        return await asyncio.to_thread(
            self._auth_security.verify_password, password, user.password_hash
        )

    def _open_session(self, user: UserEntity) -> SessionResult:
        session = self._session_issuer.issue(user.id)
        return SessionResult(user=UserResult.from_entity(user), session=session)


def _require_match(password: str, confirm_password: str) -> None:
    if password != confirm_password:
        raise PasswordMismatchException()
