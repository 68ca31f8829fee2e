"""Subscriber mail channel: gates, augments and forwards mail notifications."""

from __future__ import annotations

import logging
from typing import Any

from .augmentation import augment_view_data
from .builder import MessageBuilder
from .capabilities import NotificationCapabilities, RecipientCapabilities
from .config import SubscriberMailConfig
from .correlation import get_correlation_id
from .exceptions import UnsupportedChannelError
from .gate import should_deliver
from .messages import Mailable, MailMessage
from .metadata import MetadataSanitizer, default_sanitizer
from .ports.mailer import IMailer
from .views import ViewResolver

logger = logging.getLogger(__name__)


class SubscriberMailChannel:
    """
    Mail channel that respects recipient subscriptions.

    For each (notifiable, notification) pair it:
    1. refuses notifications that cannot produce mail,
    2. silently drops notifications the recipient opted out of,
    3. injects unsubscribe links unless the notification is transactional,
    4. hands self-contained mailables the mailer, or renders the message
       and sends it with a builder that adds the ``List-Unsubscribe`` header.
    """

    def __init__(
        self,
        mailer: IMailer,
        views: ViewResolver,
        config: SubscriberMailConfig | None = None,
        sanitizer: MetadataSanitizer | None = None,
    ):
        self.mailer = mailer
        self.views = views
        self.config = config or views.config
        self.sanitizer = sanitizer or default_sanitizer

    @property
    def name(self) -> str:
        return self.config.channel

    async def send(self, notifiable: Any, notification: Any) -> None:
        channel = self.config.channel
        capabilities = NotificationCapabilities.inspect(notification, channel)
        recipient = RecipientCapabilities.inspect(notifiable)
        notification_type = type(notification).__name__

        if not capabilities.produces_mail:
            raise UnsupportedChannelError(channel, notification_type, "no to_mail() method")

        if not should_deliver(
            notification,
            notifiable,
            channel,
            capabilities=capabilities,
            recipient=recipient,
        ):
            logger.debug(f"Skipping {notification_type}: recipient is not subscribed")
            return

        message = notification.to_mail(notifiable)

        if isinstance(message, MailMessage):
            augment_view_data(
                message,
                notification,
                notifiable,
                capabilities=capabilities,
                recipient=recipient,
            )
        elif not isinstance(message, Mailable):
            raise UnsupportedChannelError(
                channel,
                notification_type,
                f"to_mail() returned unsupported {type(message).__name__}",
            )

        route = (
            notifiable.route_notification_for(channel, notification)
            if recipient.routes_notifications
            else None
        )

        if isinstance(message, MailMessage):
            if not route:
                logger.debug(f"Skipping {notification_type}: no {channel} route for recipient")
                return
            await self._send_message(
                notifiable, notification, message, route, capabilities, recipient
            )
            return

        await message.send(self.mailer)
        logger.debug(f"Mailable for {notification_type} sent itself")

    async def _send_message(
        self,
        notifiable: Any,
        notification: Any,
        message: MailMessage,
        route: Any,
        capabilities: NotificationCapabilities,
        recipient: RecipientCapabilities,
    ) -> None:
        view = await self.views.resolve(message)
        data = {**message.data(), **self.additional_message_data(notification)}
        builder = MessageBuilder(
            notifiable,
            notification,
            message,
            route,
            config=self.config,
            capabilities=capabilities,
            recipient=recipient,
        )
        await self.mailer.send(view, data, builder)

    def additional_message_data(self, notification: Any) -> dict[str, Any]:
        """Per-notification metadata merged into the render data."""
        return self.sanitizer.sanitize(
            {
                "notification_id": getattr(notification, "id", None),
                "notification_type": type(notification).__name__,
                "correlation_id": get_correlation_id(),
            }
        )
