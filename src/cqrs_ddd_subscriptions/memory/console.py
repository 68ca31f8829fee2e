"""Console mailer for development debugging."""

from __future__ import annotations

import logging
from email.message import EmailMessage

from ..mail.base import ComposingMailer
from ..ports.renderer import IViewRenderer

logger = logging.getLogger(__name__)


class ConsoleMailer(ComposingMailer):
    """
    Development mailer that prints composed mail instead of sending it.
    """

    def __init__(self, renderer: IViewRenderer | None = None, output_to_stdout: bool = True):
        super().__init__(renderer)
        self.output_to_stdout = output_to_stdout

    async def _transmit(self, message: EmailMessage) -> None:
        output = [
            "═" * 50,
            "MAIL SENT",
            f"To:      {message['To'] or '(No Recipient)'}",
            f"Subject: {message['Subject'] or '(No Subject)'}",
        ]

        unsubscribe = message["List-Unsubscribe"]
        if unsubscribe:
            output.append(f"Unsubscribe: {unsubscribe}")

        body = message.get_body(preferencelist=("plain", "html"))
        if body is not None:
            output.append(f"Body:    {body.get_content().strip()}")

        files = [part.get_filename() for part in message.iter_attachments()]
        if files:
            output.append(f"Files:   {', '.join(str(f) for f in files)}")

        output.append("═" * 50)

        full_output = "\n".join(output)
        logger.info(full_output)

        if self.output_to_stdout:
            print(full_output)
