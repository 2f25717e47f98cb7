"""Endpoints exposing the notification hub over HTTP."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.application.use_cases.notifications import NotificationService
from app.domain.entities import Notification
from app.domain.exceptions import ValidationError
from app.interfaces.api.dependencies import get_notification_service
from app.interfaces.api.schemas import NotificationCreate, NotificationRead

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


@router.get("/", response_model=list[NotificationRead])
def list_inbox(
    service: NotificationService = Depends(get_notification_service),
) -> list[NotificationRead]:
    """Return the most recent non-archived notifications."""

    return [_notification_to_schema(n) for n in service.get_inbox()]


@router.get("/archived", response_model=list[NotificationRead])
def list_archived(
    service: NotificationService = Depends(get_notification_service),
) -> list[NotificationRead]:
    """Return the most recent archived notifications."""

    return [_notification_to_schema(n) for n in service.get_archived()]


@router.post("/", response_model=NotificationRead, status_code=status.HTTP_201_CREATED)
def create_notification(
    payload: NotificationCreate,
    service: NotificationService = Depends(get_notification_service),
) -> NotificationRead:
    """Raise a new notification."""

    try:
        notification = service.create(
            payload.message,
            redirect_url=payload.redirect_url,
            level=payload.level,
            enable_sound=payload.enable_sound,
            caller=payload.caller,
        )
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return _notification_to_schema(notification)


@router.post("/read-all", status_code=status.HTTP_204_NO_CONTENT)
def mark_all_as_read(
    service: NotificationService = Depends(get_notification_service),
) -> Response:
    service.mark_all_as_read()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/archive-all", status_code=status.HTTP_204_NO_CONTENT)
def archive_all(
    service: NotificationService = Depends(get_notification_service),
) -> Response:
    service.archive_all()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{notification_id}/read", status_code=status.HTTP_204_NO_CONTENT)
def mark_as_read(
    notification_id: str,
    service: NotificationService = Depends(get_notification_service),
) -> Response:
    """Mark the notification as read. Unknown ids are ignored."""

    service.mark_as_read(notification_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{notification_id}/archive", status_code=status.HTTP_204_NO_CONTENT)
def archive(
    notification_id: str,
    service: NotificationService = Depends(get_notification_service),
) -> Response:
    """Archive the notification. Unknown ids are ignored."""

    service.archive(notification_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
