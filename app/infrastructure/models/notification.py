"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, String, Text

from app.infrastructure.database import Base


class NotificationModel(Base):
    """Database representation for hub notifications."""

    __tablename__ = "notifications"

    id = Column(String(36), primary_key=True)
    message = Column(Text, nullable=False)
    level = Column(String(16), nullable=False, default="info")
    module_id = Column(String(120), nullable=False)
    module_icon = Column(String(120), nullable=True)
    module_name = Column(String(120), nullable=True)
    redirect_url = Column(String(255), nullable=True)
    created_on = Column(DateTime(), nullable=False, index=True)
    sound = Column(Boolean, nullable=False, default=False)
    read = Column(Boolean, nullable=False, default=False)
    archived = Column(Boolean, nullable=False, default=False, index=True)


__all__ = ["NotificationModel"]
