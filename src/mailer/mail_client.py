"""
SMTP relay client for delivering summaries by e-mail.
"""

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from typing import List

logger = logging.getLogger(__name__)


class MailError(Exception):
    """Base error for mail delivery failures."""


class MailAuthError(MailError):
    """The SMTP relay rejected the configured account credentials."""


class MailClient:
    """Client for an authenticated SMTP relay (STARTTLS + LOGIN)."""

    def __init__(self, username: str, password: str, host: str = "smtp.gmail.com", port: int = 587):
        """
        Initialize the mail client.

        Args:
            username: Relay account, also used as the sender address
            password: Relay account password (app password for Gmail)
            host: SMTP relay host
            port: SMTP relay submission port
        """
        self.username = username
        self.password = password
        self.host = host
        self.port = port

    def build_message(self, recipients: List[str], subject: str, body: str) -> EmailMessage:
        """Build one message addressed to every recipient in a single To field."""
        message = EmailMessage()
        message["From"] = self.username
        message["To"] = ", ".join(recipients)
        message["Subject"] = subject
        message.set_content(body)
        return message

    def _send_sync(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port) as smtp:
            smtp.starttls()
            smtp.login(self.username, self.password)
            smtp.send_message(message)

    async def send(self, recipients: List[str], subject: str, body: str) -> None:
        """
        Send one message to all recipients.

        smtplib is blocking, so the delivery runs in the default executor.

        Raises:
            MailAuthError: relay rejected the credentials
            smtplib.SMTPException, OSError: any other delivery failure
        """
        message = self.build_message(recipients, subject, body)
        logger.info(f"Sending '{subject}' to {len(recipients)} recipient(s) via {self.host}:{self.port}")

        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, self._send_sync, message)
        except smtplib.SMTPAuthenticationError as e:
            logger.error(f"SMTP authentication failed for {self.username}: {e.smtp_code}")
            raise MailAuthError(str(e)) from e

        logger.info("Message accepted by relay")
