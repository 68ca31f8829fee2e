"""Shared composition logic for mailers."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Mapping
from email.message import EmailMessage
from typing import Any

from ..exceptions import MailConfigurationError
from ..messages import MessageCallback, Rendered, ViewSpec
from ..ports.mailer import IMailer
from ..ports.renderer import IViewRenderer


class ComposingMailer(IMailer):
    """
    Base mailer: compose an EmailMessage, run the callback once, transmit.

    Named views are rendered through ``renderer``; ``Rendered`` parts are
    used as-is.
    """

    def __init__(self, renderer: IViewRenderer | None = None):
        self.renderer = renderer

    async def send(
        self,
        view: ViewSpec,
        data: Mapping[str, Any],
        callback: MessageCallback | None = None,
    ) -> None:
        message = await self.compose(view, data)
        if callback is not None:
            callback(message)
        await self._transmit(message)

    async def compose(self, view: ViewSpec, data: Mapping[str, Any]) -> EmailMessage:
        """Build the transport-level message body from ``view``."""
        if isinstance(view, str):
            html, text = await self._render_part(view, data), None
        else:
            html = await self._render_part(view.get("html"), data)
            text = await self._render_part(view.get("text"), data)

        message = EmailMessage()
        if html is not None and text is not None:
            message.set_content(text, subtype="plain", charset="utf-8")
            message.add_alternative(html, subtype="html", charset="utf-8")
        elif html is not None:
            message.set_content(html, subtype="html", charset="utf-8")
        else:
            message.set_content(text or "", charset="utf-8")
        return message

    async def _render_part(self, part: str | None, data: Mapping[str, Any]) -> str | None:
        if part is None or isinstance(part, Rendered):
            return part
        if self.renderer is None:
            raise MailConfigurationError(
                f"{type(self).__name__} needs a renderer to render view {part!r}"
            )
        return await self.renderer.render(part, data)

    @abstractmethod
    async def _transmit(self, message: EmailMessage) -> None:
        """Deliver a fully built message."""
