"""Unsubscribe augmentation for outgoing mail."""

from __future__ import annotations

import logging
from email.message import EmailMessage
from typing import Any

from .capabilities import NotificationCapabilities, RecipientCapabilities
from .messages import MailMessage

logger = logging.getLogger(__name__)

LIST_UNSUBSCRIBE_HEADER = "List-Unsubscribe"


def _offers_unsubscribe(
    capabilities: NotificationCapabilities, recipient: RecipientCapabilities
) -> bool:
    # Transactional mail never advertises an opt-out.
    return recipient.can_unsubscribe and not capabilities.transactional


def augment_view_data(
    message: MailMessage,
    notification: Any,
    notifiable: Any,
    *,
    capabilities: NotificationCapabilities | None = None,
    recipient: RecipientCapabilities | None = None,
) -> None:
    """Inject unsubscribe links into ``message.view_data`` in place."""
    capabilities = capabilities or NotificationCapabilities.inspect(notification)
    recipient = recipient or RecipientCapabilities.inspect(notifiable)
    if not _offers_unsubscribe(capabilities, recipient):
        return

    if capabilities.mailing_list is not None:
        message.view_data.unsubscribe_link_for_list = notifiable.unsubscribe_link(
            capabilities.mailing_list
        )
    message.view_data.unsubscribe_link_for_all = notifiable.unsubscribe_link()


def apply_unsubscribe_header(
    email_message: EmailMessage,
    notification: Any,
    notifiable: Any,
    *,
    capabilities: NotificationCapabilities | None = None,
    recipient: RecipientCapabilities | None = None,
) -> None:
    """
    Set ``List-Unsubscribe`` on the transport-level message.

    Uses the list-scoped link when the notification belongs to a mailing
    list, the unscoped link otherwise.
    """
    capabilities = capabilities or NotificationCapabilities.inspect(notification)
    recipient = recipient or RecipientCapabilities.inspect(notifiable)
    if not _offers_unsubscribe(capabilities, recipient):
        return

    link = notifiable.unsubscribe_link(capabilities.mailing_list)
    del email_message[LIST_UNSUBSCRIBE_HEADER]
    email_message[LIST_UNSUBSCRIBE_HEADER] = f"<{link}>"
    logger.debug(f"Added {LIST_UNSUBSCRIBE_HEADER} header for {type(notification).__name__}")
