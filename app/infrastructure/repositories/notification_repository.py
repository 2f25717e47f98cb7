"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import update
from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.models import NotificationModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

DEFAULT_PAGE_SIZE = 100


class NotificationRepository:
    """Provide the queries and updates backing the notification hub."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        archived: bool,
        limit: int | None = DEFAULT_PAGE_SIZE,
    ) -> Sequence[Notification]:
        """Return notifications matching ``archived``, newest first."""

        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.archived == archived)
            .order_by(NotificationModel.created_on.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get(self, notification_id: str) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        if model is None:
            return None
        return self._to_entity(model)

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel()
        self._apply_entity_to_model(model, notification)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_as_read(self, notification_id: str) -> int:
        return self._update({NotificationModel.read: True}, notification_id)

    def mark_all_as_read(self) -> int:
        return self._update({NotificationModel.read: True})

    def archive(self, notification_id: str) -> int:
        return self._update({NotificationModel.archived: True}, notification_id)

    def archive_all(self) -> int:
        return self._update({NotificationModel.archived: True})

    def _update(self, values: dict, notification_id: str | None = None) -> int:
        """Run a single ``UPDATE`` and return the number of matched rows.

        Unknown identifiers match nothing and are not reported as errors.
        """

        statement = update(NotificationModel).values(values)
        if notification_id is not None:
            statement = statement.where(NotificationModel.id == notification_id)
        result = self.session.execute(
            statement.execution_options(synchronize_session=False)
        )
        self.session.commit()
        return result.rowcount

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel, notification: Notification
    ) -> None:
        model.id = notification.id
        model.message = notification.message
        model.level = notification.level
        model.module_id = notification.module_id
        model.module_icon = notification.icon
        model.module_name = notification.name
        model.redirect_url = notification.url
        model.created_on = ensure_app_naive_datetime(
            notification.created_at or now_in_app_timezone()
        )
        model.sound = bool(notification.sound)
        model.read = bool(notification.read)
        model.archived = bool(notification.archived)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            message=model.message,
            level=model.level,
            module_id=model.module_id,
            icon=model.module_icon,
            name=model.module_name,
            url=model.redirect_url,
            created_at=ensure_app_timezone(model.created_on),
            sound=bool(model.sound),
            read=bool(model.read),
            archived=bool(model.archived),
        )


__all__ = ["NotificationRepository", "DEFAULT_PAGE_SIZE"]
