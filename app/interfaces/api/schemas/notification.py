"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NotificationCreate(BaseModel):
    """Payload used to raise a new notification."""

    message: str | None = Field(default=None, description="Body of the notification")
    redirect_url: str | None = Field(
        default=None, description="URL opened when the notification is clicked"
    )
    level: str | None = Field(default=None, description="info, success, error or warning")
    enable_sound: bool = False
    caller: str | None = Field(
        default=None, description="Name of the module raising the notification"
    )


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    message: str
    level: str
    module_id: str
    icon: str | None = None
    name: str | None = None
    url: str | None = None
    created_at: datetime
    sound: bool = False
    read: bool = False
    archived: bool = False


__all__ = ["NotificationCreate", "NotificationRead"]
