"""Port definitions for the subscriber mail channel."""

from __future__ import annotations

from cqrs_ddd_subscriptions.ports.channel import INotificationChannel
from cqrs_ddd_subscriptions.ports.mailer import IMailer
from cqrs_ddd_subscriptions.ports.renderer import IViewRenderer

__all__ = [
    "IMailer",
    "INotificationChannel",
    "IViewRenderer",
]
