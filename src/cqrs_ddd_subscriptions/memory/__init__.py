"""Memory adapters for testing and development."""

from __future__ import annotations

from .console import ConsoleMailer
from .fake import InMemoryMailer, SentMail

__all__ = ["ConsoleMailer", "InMemoryMailer", "SentMail"]
