"""Public entry points of the notification hub."""

from .service import NotificationService, SessionFactory

__all__ = ["NotificationService", "SessionFactory"]
