"""Test configuration for cqrs-ddd-subscriptions."""

from __future__ import annotations

import pytest

from cqrs_ddd_subscriptions.channel import SubscriberMailChannel
from cqrs_ddd_subscriptions.config import SubscriberMailConfig
from cqrs_ddd_subscriptions.memory.fake import InMemoryMailer
from cqrs_ddd_subscriptions.template.engines.string import StringFormatViewRenderer
from cqrs_ddd_subscriptions.views import ViewResolver


@pytest.fixture
def renderer() -> StringFormatViewRenderer:
    """String renderer registered under the default subscriber template ids."""
    return StringFormatViewRenderer(
        {
            "subscriber/html.j2": "<p>{subject}</p>",
            "subscriber/text.j2": "{subject}",
        }
    )


@pytest.fixture
def config() -> SubscriberMailConfig:
    return SubscriberMailConfig(from_address="noreply@example.com", from_name="Example")


@pytest.fixture
def mailer() -> InMemoryMailer:
    return InMemoryMailer()


@pytest.fixture
def channel(
    mailer: InMemoryMailer,
    renderer: StringFormatViewRenderer,
    config: SubscriberMailConfig,
) -> SubscriberMailChannel:
    """Mail channel wired to the in-memory mailer."""
    return SubscriberMailChannel(mailer, ViewResolver(renderer, config), config)
