"""Exception hierarchy for subscribable notifications."""

from __future__ import annotations


class NotificationError(Exception):
    """Base exception for subscribable notification failures."""


class UnsupportedChannelError(NotificationError):
    """Raised when a notification cannot produce content for a channel."""

    def __init__(self, channel: str, notification_type: str, reason: str | None = None):
        self.channel = channel
        self.notification_type = notification_type
        self.reason = reason
        msg = f"Notification {notification_type} does not support the {channel} channel"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class ChannelNotRegisteredError(NotificationError):
    """Raised when a notification is routed to a channel nobody registered."""

    def __init__(self, channel: str):
        self.channel = channel
        super().__init__(f"No channel registered under {channel!r}")


class MailConfigurationError(NotificationError, ValueError):
    """Raised when a mailer is missing configuration needed to compose mail."""


class InvalidUnsubscribeLinkError(NotificationError):
    """Raised when an unsubscribe link fails signature verification."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid unsubscribe link: {reason}")
