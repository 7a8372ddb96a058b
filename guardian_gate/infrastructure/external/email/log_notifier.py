"""Email notifier that writes to the application log instead of sending."""

from guardian_gate.infrastructure.external.email.base import TemplatedEmailNotifier
from guardian_gate.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class LogOnlyEmailNotifier(TemplatedEmailNotifier):
    """Development notifier. Rendered bodies (and so codes) are logged at DEBUG only."""

    async def deliver(self, kind: str, to: str, subject: str, html: str) -> None:
        logger.info("Email (log backend): kind=%s to=%s subject=%r", kind, to, subject)
        logger.debug("Email body for %s:\n%s", to, html)
