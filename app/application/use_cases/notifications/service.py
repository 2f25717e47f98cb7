"""Notification hub: create, query and resolve notifications."""

from __future__ import annotations

import logging
import os
import uuid
import warnings
from collections.abc import Callable, Sequence
from typing import Any

from anyio import to_thread
from sqlalchemy.orm import Session

from app.config import Settings, get_settings
from app.domain.entities import Module, Notification, normalize_level
from app.domain.exceptions import ValidationError
from app.infrastructure.module_registry import ModuleRegistry
from app.infrastructure.notifications import EventBus, NotificationPublisher, topics
from app.infrastructure.repositories import NotificationRepository

SessionFactory = Callable[[], Session]

logger = logging.getLogger(__name__)


class NotificationService:
    """Store notifications raised by modules and keep bus subscribers in sync.

    Every collaborator is injected: the session factory opening one session
    per operation, the module registry used to attribute notifications, the
    event bus and the logger receiving one line per created notification.
    """

    def __init__(
        self,
        session_factory: SessionFactory,
        *,
        modules: ModuleRegistry | None = None,
        events: EventBus | None = None,
        log: logging.Logger | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._modules = modules if modules is not None else ModuleRegistry()
        self._events = events
        self._publisher = NotificationPublisher(events) if events is not None else None
        self._logger = log if log is not None else logger
        self._settings = settings or get_settings()

    @property
    def modules(self) -> ModuleRegistry:
        return self._modules

    @property
    def events(self) -> EventBus | None:
        return self._events

    def create(
        self,
        message: Any,
        redirect_url: str | None = None,
        level: str | None = None,
        enable_sound: bool = False,
        *,
        caller: str | os.PathLike[str] | None = None,
    ) -> Notification:
        """Create and append a new notification in the hub.

        ``caller`` names the module raising the notification, either by module
        name or by a file path inside its root. Unknown callers are attributed
        to the default identity. Emits ``notifications.new``.
        """

        if not message or not isinstance(message, str) or not message.strip():
            raise ValidationError("'message' is mandatory and should be a string")

        level = normalize_level(level)
        module = self._modules.resolve(caller)
        module_id, icon, name, url = self._attribution(module, redirect_url)

        notification = Notification(
            id=str(uuid.uuid4()),
            message=message,
            level=level,
            module_id=module_id,
            icon=icon,
            name=name,
            url=url,
            sound=bool(enable_sound),
            read=False,
            archived=False,
        )

        with self._session_factory() as session:
            saved = NotificationRepository(session).create(notification)

        log_method = getattr(self._logger, saved.level, None) or self._logger.info
        log_method("[notification::%s] %s", saved.module_id, saved.message)

        if self._publisher is not None:
            self._publisher.dispatch(saved)
        return saved

    def get_inbox(self) -> Sequence[Notification]:
        """Return the most recent non-archived notifications, newest first."""

        with self._session_factory() as session:
            return NotificationRepository(session).list(
                archived=False, limit=self._settings.inbox_limit
            )

    def get_archived(self) -> Sequence[Notification]:
        """Return the most recent archived notifications, newest first."""

        with self._session_factory() as session:
            return NotificationRepository(session).list(
                archived=True, limit=self._settings.inbox_limit
            )

    def archive(self, notification_id: str) -> None:
        """Archive a single notification. Unknown ids are ignored."""

        with self._session_factory() as session:
            NotificationRepository(session).archive(notification_id)

    def archive_all(self) -> None:
        with self._session_factory() as session:
            NotificationRepository(session).archive_all()

    def mark_as_read(self, notification_id: str) -> None:
        """Mark a single notification as read without archiving it."""

        with self._session_factory() as session:
            NotificationRepository(session).mark_as_read(notification_id)

    def mark_all_as_read(self) -> None:
        with self._session_factory() as session:
            NotificationRepository(session).mark_all_as_read()

    # Deprecated surface kept for modules written against the first hub API.

    def load(self) -> Sequence[Notification]:
        warnings.warn(
            "NotificationService.load() is deprecated, use get_inbox()",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.get_inbox()

    def send(
        self,
        message: Any,
        url: str | None = None,
        level: str | None = None,
        sound: bool = False,
        *,
        caller: str | os.PathLike[str] | None = None,
    ) -> Notification:
        warnings.warn(
            "NotificationService.send() is deprecated, use create()",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.create(
            message, redirect_url=url, level=level, enable_sound=sound, caller=caller
        )

    def bind_events(self, bus: EventBus | None = None) -> None:
        """Subscribe the hub to the inbound request topics of ``bus``.

        Every handler answers with the full refreshed inbox on
        ``notifications.all``.
        """

        bus = bus if bus is not None else self._events
        if bus is None:
            raise RuntimeError("An event bus is required to bind notification events")
        if self._events is None:
            self._events = bus
            self._publisher = NotificationPublisher(bus)

        bus.on(topics.REQUEST_ALL, self._on_request_all)
        bus.on(topics.REQUEST_READ, self._on_request_read)
        bus.on(topics.REQUEST_READ_ALL, self._on_request_read_all)
        bus.on(topics.REQUEST_TRASH, self._on_request_trash)
        bus.on(topics.REQUEST_TRASH_ALL, self._on_request_trash_all)

    async def _on_request_all(self, _payload: Any = None) -> None:
        await self._broadcast_inbox()

    async def _on_request_read(self, payload: Any) -> None:
        await to_thread.run_sync(self.mark_as_read, _extract_id(payload))
        await self._broadcast_inbox()

    async def _on_request_read_all(self, _payload: Any = None) -> None:
        await to_thread.run_sync(self.mark_all_as_read)
        await self._broadcast_inbox()

    async def _on_request_trash(self, payload: Any) -> None:
        await to_thread.run_sync(self.archive, _extract_id(payload))
        await self._broadcast_inbox()

    async def _on_request_trash_all(self, _payload: Any = None) -> None:
        await to_thread.run_sync(self.archive_all)
        await self._broadcast_inbox()

    async def _broadcast_inbox(self) -> None:
        inbox = await to_thread.run_sync(self.get_inbox)
        await self._publisher.broadcast_inbox(inbox)

    def _attribution(
        self, module: Module | None, redirect_url: str | None
    ) -> tuple[str, str, str, str]:
        has_url = isinstance(redirect_url, str) and bool(redirect_url)
        if module is None:
            return (
                self._settings.default_module_id,
                self._settings.default_module_icon,
                self._settings.default_module_name,
                redirect_url if has_url else self._settings.default_redirect_url,
            )
        return (
            module.name,
            module.menu_icon,
            module.menu_text,
            redirect_url if has_url else module.default_url,
        )


def _extract_id(payload: Any) -> str:
    if isinstance(payload, dict):
        payload = payload.get("id")
    return str(payload)


__all__ = ["NotificationService", "SessionFactory"]
