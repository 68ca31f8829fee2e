"""Mail transport port."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from ..messages import MessageCallback, ViewSpec


@runtime_checkable
class IMailer(Protocol):
    """
    Transport that composes and sends one email.

    Implementations build the transport-level message from ``view`` and
    ``data``, invoke ``callback`` on it exactly once, then transmit.
    Transport errors must propagate to the caller.
    """

    async def send(
        self,
        view: ViewSpec,
        data: Mapping[str, Any],
        callback: MessageCallback | None = None,
    ) -> None:
        """Compose and send the message."""
        ...
