"""View renderer port."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IViewRenderer(Protocol):
    """Protocol for rendering a named template with a data mapping."""

    async def render(self, template_id: str, data: Mapping[str, Any]) -> str:
        """Render template ``template_id`` with ``data``."""
        ...
