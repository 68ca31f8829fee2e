"""Template rendering engines."""

from __future__ import annotations

from .jinja import JinjaViewRenderer
from .string import StringFormatViewRenderer

__all__ = ["JinjaViewRenderer", "StringFormatViewRenderer"]
