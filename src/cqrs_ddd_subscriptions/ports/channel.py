"""Notification channel port."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class INotificationChannel(Protocol):
    """A delivery channel such as mail."""

    async def send(self, notifiable: Any, notification: Any) -> None:
        """Deliver ``notification`` to ``notifiable`` or decide not to."""
        ...
