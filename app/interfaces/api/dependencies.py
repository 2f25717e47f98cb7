"""FastAPI dependency utilities."""

from fastapi import HTTPException, Request, status

from app.application.use_cases.notifications import NotificationService


def get_notification_service(request: Request) -> NotificationService:
    """Return the notification service composed by the application factory."""

    service = getattr(request.app.state, "notification_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Notification hub is not configured",
        )
    return service
