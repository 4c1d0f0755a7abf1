"""Outbound email."""
from threading import Lock
from time import sleep
from typing import List, Optional
import logging

import resend  # blocking SDK

from photothing.app.config import Settings

logger = logging.getLogger(__name__)


class Emailer:
    """
    Base emailer. Sends are serialized through one lock because the
    underlying client is shared by every request thread.
    """

    def __init__(self):
        self._lock = Lock()

    def send_message(self, address: str, message: str, subject: str = "Photothing") -> bool:
        """Send ``message`` to ``address``. Returns False on permanent failure."""
        with self._lock:
            return self._deliver(address, subject, message)

    def _deliver(self, address: str, subject: str, message: str) -> bool:
        raise NotImplementedError


class LogOnlyEmailer(Emailer):
    """Logs messages instead of sending them and keeps a record for tests."""

    def __init__(self):
        super().__init__()
        self.sent_messages: List[str] = []

    def _deliver(self, address: str, subject: str, message: str) -> bool:
        logger.info("Sending message to '%s': '%s'", address, message)
        self.sent_messages.append(f"<{address}>::[{message}]")
        return True


class ResendEmailer(Emailer):
    """Send email via Resend."""

    def __init__(self, api_key: str, from_email: str, max_retries: int = 3, backoff_seconds: float = 1):
        super().__init__()
        resend.api_key = api_key
        self.from_email = from_email
        self.max_retries = max_retries
        self.backoff_seconds = backoff_seconds

    def _send_blocking(self, to: str, subject: str, html: str) -> dict:
        return resend.Emails.send({
            "from": self.from_email,
            "to": to,
            "subject": subject,
            "html": html,
        })

    def _deliver(self, address: str, subject: str, message: str) -> bool:
        html = f"<p>{message}</p>"
        backoff = self.backoff_seconds
        for attempt in range(1, self.max_retries + 1):
            try:
                resp = self._send_blocking(address, subject, html)
                logger.info("Sent email to %s (attempt %d) resp: %s", address, attempt, resp)
                return True
            except Exception as exc:
                # the SDK raises for network and auth problems alike
                logger.exception("Error sending email to %s (attempt %d): %s", address, attempt, exc)
                if attempt < self.max_retries:
                    sleep(backoff)
                    backoff *= 2
        logger.error("Failed to send email to %s after %d attempts.", address, self.max_retries)
        return False


def init_emailer(settings: Settings) -> Emailer:
    api_key: Optional[str] = settings.RESEND_API_KEY
    if not api_key:
        logger.warning("RESEND_API_KEY not set, using 'LogOnlyEmailer' placeholder")
        return LogOnlyEmailer()
    return ResendEmailer(api_key, settings.RESEND_FROM_EMAIL)
