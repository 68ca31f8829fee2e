"""Zero-dependency string format renderer."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ...ports.renderer import IViewRenderer

logger = logging.getLogger(__name__)


class StringFormatViewRenderer(IViewRenderer):
    """
    Renders in-memory templates with ``str.format``.

    Useful for tests and for inline templates that need no control flow.
    """

    def __init__(self, templates: Mapping[str, str] | None = None) -> None:
        self._templates: dict[str, str] = dict(templates or {})

    def register(self, template_id: str, source: str) -> None:
        self._templates[template_id] = source

    async def render(self, template_id: str, data: Mapping[str, Any]) -> str:
        """Render template using str.format()."""
        try:
            source = self._templates[template_id]
        except KeyError:
            logger.error(f"Template not registered: {template_id}")
            raise
        try:
            return source.format(**data)
        except KeyError as e:
            logger.error(f"Missing template variable {e} in {template_id}")
            raise
