"""Builder callback that configures the transport-level email."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from email.message import EmailMessage
from email.utils import formataddr
from typing import Any

from .augmentation import apply_unsubscribe_header
from .capabilities import NotificationCapabilities, RecipientCapabilities
from .config import SubscriberMailConfig
from .messages import MailMessage

_PRIORITY_LABELS = {1: "Highest", 2: "High", 3: "Normal", 4: "Low", 5: "Lowest"}


def default_subject(notification: Any) -> str:
    """Derive a subject from the notification class: ``SMSReceived`` -> ``SMS Received``."""
    name = type(notification).__name__
    return re.sub(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])", " ", name)


def format_addresses(route: Any) -> list[str]:
    """
    Normalize a routing result into header-ready addresses.

    Accepts a single address, an iterable of addresses, or a mapping of
    address to display name.
    """
    if not route:
        return []
    if isinstance(route, str):
        return [route]
    if isinstance(route, Mapping):
        return [formataddr((str(name), str(addr))) for addr, name in route.items()]
    if isinstance(route, Iterable):
        return [str(addr) for addr in route]
    return [str(route)]


class MessageBuilder:
    """
    Callback handed to the mailer for one send.

    Addresses the email, sets subject, priority and attachments, runs the
    message's own callbacks, then applies the ``List-Unsubscribe`` header.
    """

    def __init__(
        self,
        notifiable: Any,
        notification: Any,
        message: MailMessage,
        route: Any,
        *,
        config: SubscriberMailConfig,
        capabilities: NotificationCapabilities,
        recipient: RecipientCapabilities,
    ):
        self.notifiable = notifiable
        self.notification = notification
        self.message = message
        self.route = route
        self.config = config
        self.capabilities = capabilities
        self.recipient = recipient

    def __call__(self, email_message: EmailMessage) -> None:
        self._address(email_message)
        email_message["Subject"] = self.message.subject or default_subject(self.notification)
        if self.message.priority is not None:
            label = _PRIORITY_LABELS.get(self.message.priority, "Normal")
            email_message["X-Priority"] = f"{self.message.priority} ({label})"
        for attachment in self.message.attachments:
            maintype, _, subtype = attachment.mimetype.partition("/")
            email_message.add_attachment(
                attachment.content,
                maintype=maintype,
                subtype=subtype or "octet-stream",
                filename=attachment.filename,
            )
        for callback in self.message.callbacks:
            callback(email_message)

        apply_unsubscribe_header(
            email_message,
            self.notification,
            self.notifiable,
            capabilities=self.capabilities,
            recipient=self.recipient,
        )

    def _address(self, email_message: EmailMessage) -> None:
        recipients = format_addresses(self.route)
        if recipients:
            email_message["To"] = ", ".join(recipients)

        from_address = self.message.from_address or self.config.from_address
        if from_address:
            from_name = self.message.from_name or self.config.from_name
            email_message["From"] = (
                formataddr((from_name, from_address)) if from_name else from_address
            )
        if self.message.reply_to:
            email_message["Reply-To"] = ", ".join(self.message.reply_to)
        if self.message.cc:
            email_message["Cc"] = ", ".join(self.message.cc)
        if self.message.bcc:
            email_message["Bcc"] = ", ".join(self.message.bcc)
