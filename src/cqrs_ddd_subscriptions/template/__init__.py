"""View renderers for mail templates."""

from __future__ import annotations

from .engines.jinja import DEFAULT_TEMPLATES_DIR, JinjaViewRenderer
from .engines.string import StringFormatViewRenderer

__all__ = [
    "DEFAULT_TEMPLATES_DIR",
    "JinjaViewRenderer",
    "StringFormatViewRenderer",
]
