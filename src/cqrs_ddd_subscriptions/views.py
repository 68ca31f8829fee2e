"""View resolution for structured mail messages."""

from __future__ import annotations

import logging

from .config import SubscriberMailConfig
from .messages import MailMessage, Rendered, ViewSpec
from .ports.renderer import IViewRenderer

logger = logging.getLogger(__name__)


class ViewResolver:
    """
    Resolves the content of a MailMessage.

    An explicit ``message.view`` is passed through untouched. Otherwise
    the configured html and text templates are rendered on every call.
    """

    def __init__(
        self,
        renderer: IViewRenderer,
        config: SubscriberMailConfig | None = None,
    ):
        self.renderer = renderer
        self.config = config or SubscriberMailConfig()

    async def resolve(self, message: MailMessage) -> ViewSpec:
        if message.view:
            return message.view

        data = message.data()
        html = await self.renderer.render(self.config.html_template, data)
        text = await self.renderer.render(self.config.text_template, data)
        logger.debug(
            f"Rendered {self.config.html_template} and {self.config.text_template} "
            "for mail message"
        )
        return {"html": Rendered(html), "text": Rendered(text)}
