"""Domain entity representing a hub notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

LEVEL_INFO = "info"
LEVEL_SUCCESS = "success"
LEVEL_ERROR = "error"
LEVEL_WARNING = "warning"

NOTIFICATION_LEVELS = (LEVEL_INFO, LEVEL_SUCCESS, LEVEL_ERROR, LEVEL_WARNING)


def normalize_level(level: object) -> str:
    """Return the lowercase notification level, falling back to ``info``."""

    if not isinstance(level, str):
        return LEVEL_INFO
    normalized = level.strip().lower()
    if normalized not in NOTIFICATION_LEVELS:
        return LEVEL_INFO
    return normalized


@dataclass
class Notification:
    """Short user-facing message attributed to the module that raised it."""

    id: str
    message: str
    level: str
    module_id: str
    icon: str
    name: str
    url: str
    created_at: datetime | None = None
    sound: bool = False
    read: bool = False
    archived: bool = False


__all__ = [
    "Notification",
    "normalize_level",
    "NOTIFICATION_LEVELS",
    "LEVEL_INFO",
    "LEVEL_SUCCESS",
    "LEVEL_ERROR",
    "LEVEL_WARNING",
]
