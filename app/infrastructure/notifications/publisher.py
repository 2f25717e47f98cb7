"""Utility helpers to push notifications to bus subscribers."""

from __future__ import annotations

from typing import Any, Iterable

from app.domain.entities import Notification

from . import topics
from .bus import EventBus


class NotificationPublisher:
    """Serialize notifications and hand them to the event bus."""

    def __init__(self, bus: EventBus) -> None:
        self._bus = bus

    def dispatch(self, notification: Notification) -> None:
        """Schedule the ``notifications.new`` event for ``notification``."""

        self._bus.emit(topics.NEW, self._serialize(notification))

    async def broadcast_inbox(self, notifications: Iterable[Notification]) -> None:
        """Publish the full inbox snapshot on ``notifications.all``."""

        await self._bus.publish(
            topics.INBOX, [self._serialize(notification) for notification in notifications]
        )

    @staticmethod
    def _serialize(notification: Notification) -> dict[str, Any]:
        return {
            "id": notification.id,
            "message": notification.message,
            "level": notification.level,
            "module_id": notification.module_id,
            "icon": notification.icon,
            "name": notification.name,
            "url": notification.url,
            "created_at": notification.created_at.isoformat()
            if notification.created_at
            else None,
            "sound": notification.sound,
            "read": notification.read,
            "archived": notification.archived,
        }


__all__ = [
    "NotificationPublisher",
]
