"""OTP engine: generate, attach, validate, and clear one-time codes on a user.

State lives entirely in the user's per-purpose slot (token + expiry):

    empty --attach--> live --validate ok + clear--> empty
                      live --attach--> live (new code; old one no longer matches)
                      live --now >= expires--> dead (still stored, never validates)

Expiry is evaluated lazily at validation time; nothing evicts expired codes.
A failed validation leaves the slot untouched, so a wrong guess does not
burn a still-valid code.
"""

from __future__ import annotations

import secrets
from collections.abc import Callable, Mapping
from datetime import datetime, timedelta
from typing import NoReturn

from guardian_gate.application.interfaces.repositories import ICredentialStore
from guardian_gate.domain.entities import UserEntity
from guardian_gate.domain.enums import OtpPurpose
from guardian_gate.domain.exceptions import InvalidOrExpiredCodeException
from guardian_gate.shared.telemetry.logging import get_logger
from guardian_gate.shared.utils.datetime import ensure_utc, utc_now
from guardian_gate.shared.utils.generators import generate_numeric_code

logger = get_logger(__name__)

OTP_DIGITS = 6

DEFAULT_OTP_TTLS: Mapping[OtpPurpose, timedelta] = {
    OtpPurpose.VERIFY_EMAIL: timedelta(minutes=2),
    OtpPurpose.LOGIN: timedelta(minutes=2),
    OtpPurpose.RESET_PASSWORD: timedelta(minutes=10),
}

_INVALID_CODE_MESSAGES: Mapping[OtpPurpose, str] = {
    OtpPurpose.VERIFY_EMAIL: "Invalid or expired verification code",
    OtpPurpose.LOGIN: "Invalid or expired verification code",
    OtpPurpose.RESET_PASSWORD: "Invalid or expired reset code",
}


class OtpService:
    """One-time code lifecycle for a user record, one slot per OtpPurpose."""

    def __init__(
        self,
        store: ICredentialStore,
        ttls: Mapping[OtpPurpose, timedelta] | None = None,
        *,
        digits: int = OTP_DIGITS,
        now: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize with the store that persists attached/cleared codes.

        Args:
            store: Credential store used to persist slot changes.
            ttls: Optional per-purpose lifetimes; missing purposes use DEFAULT_OTP_TTLS.
            digits: Code length.
            now: Clock returning an aware UTC datetime (injectable for tests).
        """
        self._store = store
        self._ttls = {**DEFAULT_OTP_TTLS, **(ttls or {})}
        self._digits = digits
        self._now = now

    def ttl_for(self, purpose: OtpPurpose) -> timedelta:
        return self._ttls[purpose]

    def generate(self) -> str:
        """Return a fresh fixed-width numeric code (e.g. 100000..999999 for 6 digits)."""
        return generate_numeric_code(self._digits)

    async def attach(
        self,
        user: UserEntity,
        purpose: OtpPurpose,
        ttl: timedelta | None = None,
    ) -> str:
        """Put a new code in the purpose slot, persist the user, and return the code.

        Overwrites any previous code for the same purpose.
        """
        code = self.generate()
        expires = self._now() + (ttl if ttl is not None else self.ttl_for(purpose))
        user.set_otp(purpose, code, expires)
        await self._store.save(user)
        logger.info(
            "OTP attached: user_id=%s purpose=%s expires_at=%s",
            user.id,
            purpose.value,
            expires.isoformat(),
        )
        return code

    def validate(self, user: UserEntity, purpose: OtpPurpose, candidate: str) -> None:
        """Raise InvalidOrExpiredCodeException unless candidate is the live code for purpose.

        Does not modify the user.
        """
        token, expires = user.get_otp(purpose)
        if token is None or expires is None:
            self._reject(user, purpose, "no code issued")
        if not secrets.compare_digest(token.encode("utf-8"), candidate.encode("utf-8")):
            self._reject(user, purpose, "code mismatch")
        if self._now() >= ensure_utc(expires):
            self._reject(user, purpose, "code expired")

    async def clear(self, user: UserEntity, purpose: OtpPurpose) -> None:
        """Null the slot for purpose and persist the user."""
        user.clear_otp(purpose)
        await self._store.save(user)

    async def consume(self, user: UserEntity, purpose: OtpPurpose, candidate: str) -> None:
        """Validate then clear, so the same code cannot be used twice."""
        self.validate(user, purpose, candidate)
        await self.clear(user, purpose)

    def _reject(self, user: UserEntity, purpose: OtpPurpose, reason: str) -> NoReturn:
        logger.info(
            "OTP rejected: user_id=%s purpose=%s reason=%s",
            user.id,
            purpose.value,
            reason,
        )
        raise InvalidOrExpiredCodeException(
            purpose.value, _INVALID_CODE_MESSAGES[purpose]
        )

    def reject_unknown_user(self, purpose: OtpPurpose) -> InvalidOrExpiredCodeException:
        """Exception for a code presented for an email with no account (same message as a bad code)."""
        return InvalidOrExpiredCodeException(
            purpose.value, _INVALID_CODE_MESSAGES[purpose]
        )
