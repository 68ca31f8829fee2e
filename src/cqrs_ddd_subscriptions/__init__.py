"""Subscription-aware mail notifications for CQRS/DDD: opt-out gating and unsubscribe links."""

from __future__ import annotations

from .augmentation import LIST_UNSUBSCRIBE_HEADER, apply_unsubscribe_header, augment_view_data
from .builder import MessageBuilder
from .capabilities import (
    AppliesToMailingList,
    CanUnsubscribe,
    MailNotification,
    NotificationCapabilities,
    RecipientCapabilities,
    RoutesNotifications,
    SubscriptionCheckable,
    SubscriptionStatusSource,
    Transactional,
    applies_to_mailing_list,
    can_unsubscribe,
    is_subscription_checkable,
    is_transactional,
)
from .channel import SubscriberMailChannel
from .config import MAIL_CHANNEL, SubscriberMailConfig
from .dispatcher import NotificationDispatcher
from .exceptions import (
    ChannelNotRegisteredError,
    InvalidUnsubscribeLinkError,
    MailConfigurationError,
    NotificationError,
    UnsupportedChannelError,
)
from .gate import should_deliver
from .links import SignedUnsubscribeLinks, UnsubscribeRequest
from .mail import ComposingMailer, SmtpMailer
from .memory import ConsoleMailer, InMemoryMailer
from .messages import (
    UNSUBSCRIBE_LINK_FOR_ALL,
    UNSUBSCRIBE_LINK_FOR_LIST,
    AttachmentVO,
    Mailable,
    MailMessage,
    Rendered,
    ViewData,
    ViewSpec,
)
from .metadata import MetadataSanitizer
from .ports import IMailer, INotificationChannel, IViewRenderer
from .template import JinjaViewRenderer, StringFormatViewRenderer
from .views import ViewResolver

__all__ = [
    "LIST_UNSUBSCRIBE_HEADER",
    "MAIL_CHANNEL",
    "UNSUBSCRIBE_LINK_FOR_ALL",
    "UNSUBSCRIBE_LINK_FOR_LIST",
    "AppliesToMailingList",
    "AttachmentVO",
    "CanUnsubscribe",
    "ChannelNotRegisteredError",
    "ComposingMailer",
    "ConsoleMailer",
    "IMailer",
    "INotificationChannel",
    "IViewRenderer",
    "InMemoryMailer",
    "InvalidUnsubscribeLinkError",
    "JinjaViewRenderer",
    "MailConfigurationError",
    "MailMessage",
    "MailNotification",
    "Mailable",
    "MessageBuilder",
    "MetadataSanitizer",
    "NotificationCapabilities",
    "NotificationDispatcher",
    "NotificationError",
    "RecipientCapabilities",
    "Rendered",
    "RoutesNotifications",
    "SignedUnsubscribeLinks",
    "SmtpMailer",
    "StringFormatViewRenderer",
    "SubscriberMailChannel",
    "SubscriberMailConfig",
    "SubscriptionCheckable",
    "SubscriptionStatusSource",
    "Transactional",
    "UnsubscribeRequest",
    "UnsupportedChannelError",
    "ViewData",
    "ViewResolver",
    "ViewSpec",
    "apply_unsubscribe_header",
    "applies_to_mailing_list",
    "augment_view_data",
    "can_unsubscribe",
    "is_subscription_checkable",
    "is_transactional",
    "should_deliver",
]
