"""
Capability protocols and predicates for notifications and notifiables.

Every check is structural: a value participates in a capability by
exposing the matching attribute or method, never by inheriting from a
particular class.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from .config import MAIL_CHANNEL

if TYPE_CHECKING:
    from .messages import Mailable, MailMessage


# ═══════════════════════════════════════════════════════════════
# NOTIFICATION CAPABILITIES
# ═══════════════════════════════════════════════════════════════


@runtime_checkable
class Transactional(Protocol):
    """Notification that must always be delivered (receipts, password resets)."""

    transactional: bool


@runtime_checkable
class SubscriptionCheckable(Protocol):
    """Notification that asks for the recipient's opt-in before sending."""

    def requires_subscription_check(self, channel: str) -> bool: ...


@runtime_checkable
class AppliesToMailingList(Protocol):
    """Notification that belongs to a specific mailing list."""

    def uses_mailing_list(self) -> str: ...


@runtime_checkable
class MailNotification(Protocol):
    """Notification that can produce a mail message."""

    def to_mail(self, notifiable: Any) -> MailMessage | Mailable: ...


# ═══════════════════════════════════════════════════════════════
# NOTIFIABLE CAPABILITIES
# ═══════════════════════════════════════════════════════════════


@runtime_checkable
class CanUnsubscribe(Protocol):
    """Notifiable that can generate unsubscribe links."""

    def unsubscribe_link(self, mailing_list: str | None = None) -> str: ...


@runtime_checkable
class SubscriptionStatusSource(Protocol):
    """Notifiable that knows whether it wants a given notification."""

    def subscription_status(self, notification: Any) -> bool: ...


@runtime_checkable
class RoutesNotifications(Protocol):
    """Notifiable that resolves a delivery address per channel."""

    def route_notification_for(self, channel: str, notification: Any) -> Any: ...


# ═══════════════════════════════════════════════════════════════
# PREDICATES
# ═══════════════════════════════════════════════════════════════


def is_transactional(notification: Any) -> bool:
    return isinstance(notification, Transactional) and bool(notification.transactional)


def is_subscription_checkable(notification: Any, channel: str = MAIL_CHANNEL) -> bool:
    """True when the notification declares the capability and asks for a check on ``channel``."""
    return isinstance(notification, SubscriptionCheckable) and bool(
        notification.requires_subscription_check(channel)
    )


def applies_to_mailing_list(notification: Any) -> str | None:
    if isinstance(notification, AppliesToMailingList):
        return notification.uses_mailing_list()
    return None


def can_unsubscribe(notifiable: Any) -> bool:
    return isinstance(notifiable, CanUnsubscribe)


def can_produce_mail(notification: Any) -> bool:
    return isinstance(notification, MailNotification)


def checks_subscription_status(notifiable: Any) -> bool:
    return isinstance(notifiable, SubscriptionStatusSource)


# ═══════════════════════════════════════════════════════════════
# SNAPSHOTS
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class NotificationCapabilities:
    """Capabilities of one notification, resolved once for one channel."""

    channel: str
    transactional: bool
    subscription_checkable: bool
    mailing_list: str | None
    produces_mail: bool

    @classmethod
    def inspect(cls, notification: Any, channel: str = MAIL_CHANNEL) -> NotificationCapabilities:
        return cls(
            channel=channel,
            transactional=is_transactional(notification),
            subscription_checkable=is_subscription_checkable(notification, channel),
            mailing_list=applies_to_mailing_list(notification),
            produces_mail=can_produce_mail(notification),
        )


@dataclass(frozen=True)
class RecipientCapabilities:
    """Capabilities of one notifiable."""

    can_unsubscribe: bool
    checks_subscription_status: bool
    routes_notifications: bool

    @classmethod
    def inspect(cls, notifiable: Any) -> RecipientCapabilities:
        return cls(
            can_unsubscribe=can_unsubscribe(notifiable),
            checks_subscription_status=checks_subscription_status(notifiable),
            routes_notifications=isinstance(notifiable, RoutesNotifications),
        )
