"""In-process IEmailNotifier that records every email instead of sending it."""

from dataclasses import dataclass

from guardian_gate.domain.enums import OtpPurpose


@dataclass(frozen=True)
class SentEmail:
    kind: str
    email: str
    name: str
    code: str | None = None
    purpose: OtpPurpose | None = None


class RecordingNotifier:
    def __init__(self) -> None:
        self.sent: list[SentEmail] = []
        self.fail_with: Exception | None = None

    def _record(self, email: SentEmail) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.sent.append(email)

    async def send_verification(
        self,
        email: str,
        name: str,
        code: str,
        purpose: OtpPurpose = OtpPurpose.VERIFY_EMAIL,
    ) -> None:
        self._record(SentEmail("verification", email, name, code, purpose))

    async def send_welcome(self, email: str, name: str) -> None:
        self._record(SentEmail("welcome", email, name))

    async def send_password_reset(self, email: str, name: str, code: str) -> None:
        self._record(
            SentEmail("password_reset", email, name, code, OtpPurpose.RESET_PASSWORD)
        )

    def last_code(self, email: str, kind: str | None = None) -> str:
        for sent in reversed(self.sent):
            if sent.email == email and sent.code is not None:
                if kind is None or sent.kind == kind:
                    return sent.code
        raise AssertionError(f"no code sent to {email}")

    def kinds(self, email: str) -> list[str]:
        return [s.kind for s in self.sent if s.email == email]
