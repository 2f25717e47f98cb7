"""Repository implementations for infrastructure layer."""

from .notification_repository import DEFAULT_PAGE_SIZE, NotificationRepository

__all__ = ["NotificationRepository", "DEFAULT_PAGE_SIZE"]
