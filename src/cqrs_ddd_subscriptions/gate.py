"""Subscription gate: decides whether a notification may be delivered."""

from __future__ import annotations

import logging
from typing import Any

from .capabilities import NotificationCapabilities, RecipientCapabilities
from .config import MAIL_CHANNEL

logger = logging.getLogger(__name__)


def should_deliver(
    notification: Any,
    notifiable: Any,
    channel: str = MAIL_CHANNEL,
    *,
    capabilities: NotificationCapabilities | None = None,
    recipient: RecipientCapabilities | None = None,
) -> bool:
    """
    Return False only when the recipient has opted out of this notification.

    Delivery is blocked when the notification is not transactional, asks
    for a subscription check on ``channel``, and a notifiable able to
    report its status says it does not want it. Anything that does not
    take part in subscriptions is delivered.

    Pre-resolved ``capabilities``/``recipient`` snapshots may be passed to
    avoid inspecting the values again.
    """
    capabilities = capabilities or NotificationCapabilities.inspect(notification, channel)
    recipient = recipient or RecipientCapabilities.inspect(notifiable)

    if capabilities.transactional:
        return True
    if not recipient.checks_subscription_status:
        return True
    if not capabilities.subscription_checkable:
        return True

    if notifiable.subscription_status(notification):
        return True

    logger.debug(
        f"{type(notifiable).__name__} opted out of {type(notification).__name__} on {channel}"
    )
    return False
