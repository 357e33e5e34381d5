"""E-mail notification of failures."""

import logging
import smtplib
from email.message import EmailMessage
from typing import Optional

from metar_scraper.config import MAIL_SUBJECT, SMTP_PORT, SMTP_TIMEOUT

logger = logging.getLogger(__name__)


class MailNotifier:
    """
    Sends plain-text failure notices through an SMTP server.

    Does nothing unless sender, recipient and server are all set.
    """

    def __init__(
        self,
        mail_from: Optional[str] = None,
        mail_to: Optional[str] = None,
        mail_server: Optional[str] = None,
        port: int = SMTP_PORT,
        subject: str = MAIL_SUBJECT,
    ):
        self.mail_from = (mail_from or "").strip()
        self.mail_to = (mail_to or "").strip()
        self.mail_server = (mail_server or "").strip()
        self.port = port
        self.subject = subject

    @property
    def enabled(self) -> bool:
        return bool(self.mail_from and self.mail_to and self.mail_server)

    def build_message(self, body: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.mail_from
        message["To"] = self.mail_to
        message["Subject"] = self.subject
        message.set_content(body)
        return message

    def send(self, body: str) -> bool:
        """
        Send a notification.

        Args:
            body: Plain-text message

        Returns:
            True if the message was handed to the server
        """
        if not self.enabled:
            return False

        try:
            with smtplib.SMTP(self.mail_server, self.port, timeout=SMTP_TIMEOUT) as client:
                client.send_message(self.build_message(body))
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send notification via {self.mail_server}: {e}")
            return False

        return True
