"""Jinja2 view renderer."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import ChoiceLoader, Environment, FileSystemLoader

from ...ports.renderer import IViewRenderer

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"


def _autoescape(template_name: str | None) -> bool:
    # subscriber/html.j2, email.html, email.html.j2 are HTML; text templates are not
    if template_name is None:
        return False
    basename = template_name.rsplit("/", 1)[-1]
    return basename.startswith("html") or ".html" in basename


class JinjaViewRenderer(IViewRenderer):
    """
    Renders named templates with Jinja2.

    Templates are looked up in ``templates_dir`` first, then in the
    packaged defaults (``subscriber/html.j2`` and ``subscriber/text.j2``).
    """

    def __init__(self, templates_dir: Path | str | None = None):
        search_path = [str(templates_dir)] if templates_dir is not None else []
        search_path.append(str(DEFAULT_TEMPLATES_DIR))
        self._env = Environment(
            loader=ChoiceLoader([FileSystemLoader(path) for path in search_path]),
            autoescape=_autoescape,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    async def render(self, template_id: str, data: Mapping[str, Any]) -> str:
        """Render template using Jinja2."""
        try:
            template = self._env.get_template(template_id)
            return template.render(**data)
        except Exception as e:
            logger.error(f"Jinja2 rendering of {template_id} failed: {e}")
            raise
