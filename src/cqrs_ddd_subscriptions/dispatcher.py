"""Routes notifications to registered channels."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .config import MAIL_CHANNEL
from .correlation import correlation_scope
from .exceptions import ChannelNotRegisteredError
from .ports.channel import INotificationChannel

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """
    Sends a notification to one or more notifiables over the channels
    returned by ``notification.via(notifiable)``.

    Channels run one after another; the first exception aborts the
    dispatch and propagates to the caller.
    """

    def __init__(
        self,
        channels: Mapping[str, INotificationChannel] | None = None,
        default_channels: Sequence[str] = (MAIL_CHANNEL,),
    ):
        self._channels: dict[str, INotificationChannel] = dict(channels or {})
        self.default_channels = tuple(default_channels)

    def register(self, name: str, channel: INotificationChannel) -> None:
        self._channels[name] = channel

    def channel(self, name: str) -> INotificationChannel:
        try:
            return self._channels[name]
        except KeyError:
            raise ChannelNotRegisteredError(name) from None

    async def send(self, notifiables: Any, notification: Any) -> None:
        with correlation_scope() as correlation_id:
            for notifiable in self._as_list(notifiables):
                for name in self._channels_for(notifiable, notification):
                    logger.debug(
                        f"Dispatching {type(notification).__name__} via {name} "
                        f"(correlation_id={correlation_id})"
                    )
                    await self.channel(name).send(notifiable, notification)

    def _channels_for(self, notifiable: Any, notification: Any) -> list[str]:
        via = getattr(notification, "via", None)
        if callable(via):
            return list(via(notifiable))
        return list(self.default_channels)

    @staticmethod
    def _as_list(notifiables: Any) -> list[Any]:
        if isinstance(notifiables, (list, tuple, set, frozenset)):
            return list(notifiables)
        return [notifiables]
