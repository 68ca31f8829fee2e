"""Fake notifications and notifiables shared by the tests."""

from __future__ import annotations

from cqrs_ddd_subscriptions.messages import MailMessage

UNSUBSCRIBE_BASE = "https://example/unsub"


# ── Notifiables ──────────────────────────────────────────────────


class Subscriber:
    """Notifiable with every capability: routing, status and unsubscribe links."""

    def __init__(self, email: str | None = "alice@example.com", subscribed: bool = True):
        self.email = email
        self.subscribed = subscribed
        self.status_checks: list[object] = []

    def route_notification_for(self, channel: str, notification: object) -> str | None:
        return self.email if channel == "mail" else None

    def subscription_status(self, notification: object) -> bool:
        self.status_checks.append(notification)
        return self.subscribed

    def unsubscribe_link(self, mailing_list: str | None = None) -> str:
        if mailing_list is None:
            return UNSUBSCRIBE_BASE
        return f"{UNSUBSCRIBE_BASE}?list={mailing_list}"


class PlainRecipient:
    """Notifiable that only knows its address."""

    def __init__(self, email: str | None = "bob@example.com"):
        self.email = email

    def route_notification_for(self, channel: str, notification: object) -> str | None:
        return self.email


class StatusOnlyRecipient(PlainRecipient):
    """Notifiable that reports subscription status but cannot unsubscribe."""

    def __init__(self, email: str | None = "carol@example.com", subscribed: bool = False):
        super().__init__(email)
        self.subscribed = subscribed

    def subscription_status(self, notification: object) -> bool:
        return self.subscribed


# ── Notifications ────────────────────────────────────────────────


class Digest:
    """Subscribable notification that is not tied to a mailing list."""

    def __init__(self, requires_check: bool = True):
        self.id = "digest-1"
        self.requires_check = requires_check

    def requires_subscription_check(self, channel: str) -> bool:
        return self.requires_check and channel == "mail"

    def to_mail(self, notifiable: object) -> MailMessage:
        return MailMessage(subject="Weekly digest").line("Here is what happened.")


class PromoOffer(Digest):
    """Subscribable notification on the "promo" mailing list."""

    def uses_mailing_list(self) -> str:
        return "promo"


class Receipt:
    """Transactional notification; also claims to be subscribable."""

    transactional = True

    def requires_subscription_check(self, channel: str) -> bool:
        return True

    def uses_mailing_list(self) -> str:
        return "billing"

    def to_mail(self, notifiable: object) -> MailMessage:
        return MailMessage(subject="Your receipt").line("Thanks for your order.")


class SmsOnly:
    """Notification without a mail representation."""

    def requires_subscription_check(self, channel: str) -> bool:
        return True

    def to_sms(self, notifiable: object) -> str:
        return "hi"


class FakeMailable:
    """Self-contained deliverable recording the mailer it was given."""

    def __init__(self) -> None:
        self.mailers: list[object] = []

    async def send(self, mailer: object) -> None:
        self.mailers.append(mailer)


class MailableNotification:
    def __init__(self) -> None:
        self.mailable = FakeMailable()

    def to_mail(self, notifiable: object) -> FakeMailable:
        return self.mailable


