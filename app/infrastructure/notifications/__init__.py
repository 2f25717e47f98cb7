"""Event bus plumbing for the notification hub."""

from . import topics
from .bus import EventBus, Handler
from .publisher import NotificationPublisher

__all__ = [
    "EventBus",
    "Handler",
    "NotificationPublisher",
    "topics",
]
