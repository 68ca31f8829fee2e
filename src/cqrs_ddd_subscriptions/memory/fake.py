"""In-memory mailer for test assertions."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from email.message import EmailMessage
from typing import Any

from ..mail.base import ComposingMailer
from ..messages import MessageCallback, ViewSpec
from ..ports.renderer import IViewRenderer


@dataclass
class SentMail:
    """Record of a composed mail for test assertions."""

    view: ViewSpec | None
    data: dict[str, Any]
    message: EmailMessage

    @property
    def to(self) -> str | None:
        return self.header("To")

    def header(self, name: str) -> str | None:
        value = self.message[name]
        return None if value is None else str(value)


class InMemoryMailer(ComposingMailer):
    """
    Test double (Fake) that keeps every composed message.
    """

    def __init__(self, renderer: IViewRenderer | None = None) -> None:
        super().__init__(renderer)
        self.sent: list[SentMail] = []

    async def send(
        self,
        view: ViewSpec,
        data: Mapping[str, Any],
        callback: MessageCallback | None = None,
    ) -> None:
        message = await self.compose(view, data)
        if callback is not None:
            callback(message)
        self.sent.append(SentMail(view, dict(data), message))

    async def _transmit(self, message: EmailMessage) -> None:
        # Messages handed over without a view, e.g. by a subclass
        self.sent.append(SentMail(None, {}, message))

    def assert_sent(self, to: str, count: int = 1) -> None:
        """Helper for test assertions."""
        matches = [m for m in self.sent if m.to == to]
        if len(matches) != count:
            raise AssertionError(
                f"Expected {count} messages to {to}, but found {len(matches)}."
            )

    def clear(self) -> None:
        """Clear all recorded messages."""
        self.sent.clear()
