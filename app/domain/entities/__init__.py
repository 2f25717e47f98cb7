"""Domain entities exposed by the application."""

from .module import Module
from .notification import (
    LEVEL_ERROR,
    LEVEL_INFO,
    LEVEL_SUCCESS,
    LEVEL_WARNING,
    NOTIFICATION_LEVELS,
    Notification,
    normalize_level,
)

__all__ = [
    "Module",
    "Notification",
    "normalize_level",
    "NOTIFICATION_LEVELS",
    "LEVEL_INFO",
    "LEVEL_SUCCESS",
    "LEVEL_ERROR",
    "LEVEL_WARNING",
]
