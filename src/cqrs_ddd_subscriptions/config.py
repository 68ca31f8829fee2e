"""Configuration for the subscriber mail channel."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

MAIL_CHANNEL = "mail"


class SubscriberMailConfig(BaseModel):
    """Immutable settings shared by the mail channel and its view resolver."""

    model_config = ConfigDict(frozen=True)

    # Name passed to requires_subscription_check() and route_notification_for()
    channel: str = MAIL_CHANNEL

    # Template ids rendered when a message carries no explicit view
    html_template: str = "subscriber/html.j2"
    text_template: str = "subscriber/text.j2"

    # Fallback sender when the message does not set one
    from_address: str | None = None
    from_name: str | None = None
