"""Mail transports."""

from __future__ import annotations

from .base import ComposingMailer
from .smtp import SmtpMailer

__all__ = ["ComposingMailer", "SmtpMailer"]
