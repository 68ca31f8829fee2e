"""Tests for capability predicates and snapshots."""

from fakes import (
    Digest,
    MailableNotification,
    PlainRecipient,
    PromoOffer,
    Receipt,
    SmsOnly,
    StatusOnlyRecipient,
    Subscriber,
)

from cqrs_ddd_subscriptions.capabilities import (
    NotificationCapabilities,
    RecipientCapabilities,
    applies_to_mailing_list,
    can_produce_mail,
    can_unsubscribe,
    is_subscription_checkable,
    is_transactional,
)


def test_transactional_requires_truthy_attribute():
    """Test transactional capability is read from the attribute value."""

    class NotReallyTransactional:
        transactional = False

    assert is_transactional(Receipt())
    assert not is_transactional(NotReallyTransactional())
    assert not is_transactional(Digest())


def test_subscription_checkable_needs_capability_and_flag():
    """Test checkable is true only when declared and requested for the channel."""
    assert is_subscription_checkable(Digest(), "mail")
    assert not is_subscription_checkable(Digest(requires_check=False), "mail")
    assert not is_subscription_checkable(Digest(), "sms")
    assert not is_subscription_checkable(MailableNotification(), "mail")


def test_applies_to_mailing_list():
    """Test mailing list id is returned only for list-scoped notifications."""
    assert applies_to_mailing_list(PromoOffer()) == "promo"
    assert applies_to_mailing_list(Digest()) is None


def test_capabilities_are_structural():
    """Test an unrelated class with the right method gains the capability."""

    class Anything:
        def unsubscribe_link(self, mailing_list=None):
            return "https://x"

        def to_mail(self, notifiable):
            return None

    assert can_unsubscribe(Anything())
    assert can_produce_mail(Anything())
    assert not can_unsubscribe(PlainRecipient())
    assert not can_produce_mail(SmsOnly())


def test_notification_snapshot():
    """Test NotificationCapabilities resolves every capability once."""
    caps = NotificationCapabilities.inspect(PromoOffer(), "mail")

    assert caps.channel == "mail"
    assert caps.transactional is False
    assert caps.subscription_checkable is True
    assert caps.mailing_list == "promo"
    assert caps.produces_mail is True


def test_recipient_snapshot():
    """Test RecipientCapabilities for full and partial notifiables."""
    full = RecipientCapabilities.inspect(Subscriber())
    partial = RecipientCapabilities.inspect(StatusOnlyRecipient())
    plain = RecipientCapabilities.inspect(PlainRecipient())

    assert full == RecipientCapabilities(True, True, True)
    assert partial == RecipientCapabilities(False, True, True)
    assert plain == RecipientCapabilities(False, False, True)
    assert RecipientCapabilities.inspect(object()).routes_notifications is False
