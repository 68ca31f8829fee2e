"""SMTP mail transport."""

from __future__ import annotations

import logging
from email.message import EmailMessage

import aiosmtplib

from ..exceptions import MailConfigurationError
from ..ports.renderer import IViewRenderer
from .base import ComposingMailer

logger = logging.getLogger(__name__)


class SmtpMailer(ComposingMailer):
    """
    Async SMTP mailer using aiosmtplib.

    Transport failures are logged and re-raised; retry policy belongs to
    the caller.
    """

    def __init__(
        self,
        host: str,
        port: int = 587,
        username: str | None = None,
        password: str | None = None,
        use_tls: bool = True,
        timeout: float = 10.0,
        from_email: str | None = None,
        renderer: IViewRenderer | None = None,
    ):
        super().__init__(renderer)
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout
        self.from_email = from_email

    async def _transmit(self, message: EmailMessage) -> None:
        if message["From"] is None:
            if not self.from_email:
                raise MailConfigurationError("Sender email (from_email) is required.")
            message["From"] = self.from_email

        recipient = message["To"]
        try:
            async with aiosmtplib.SMTP(
                hostname=self.host,
                port=self.port,
                timeout=self.timeout,
                start_tls=self.use_tls,
                username=self.username,
                password=self.password,
            ) as smtp:
                await smtp.send_message(message)
        except aiosmtplib.SMTPException as e:
            logger.error(f"Failed to send email to {recipient}: {str(e)}")
            raise

        logger.info(f"Email sent to {recipient} via SMTP")
