"""SQLAlchemy ORM model for in-app notifications."""

import uuid as uuid_module
from datetime import UTC, datetime, timedelta
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from plantcare.database.core import Base
from plantcare.database.plants.models import Plant
from plantcare.database.reminders.models import Reminder
from plantcare.enums import NotificationPriority

# Notifications without an explicit expiry are removed after this long
DEFAULT_EXPIRY = timedelta(days=30)


def default_expiry(now: datetime | None = None) -> datetime:
    """Compute the default expiry for a notification created at now.

    :param now: Creation time (defaults to now).
    :returns: Expiry timestamp.
    """
    if now is None:
        now = datetime.now(UTC)
    return now + DEFAULT_EXPIRY


class Notification(Base):
    """ORM model for an in-app notification.

    Expired notifications are purged by a periodic task.
    """

    __tablename__ = "notifications"

    id: Mapped[uuid_module.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid_module.uuid4,
    )
    user_id: Mapped[uuid_module.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    notification_type: Mapped[str] = mapped_column(
        "type",
        String(20),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
    )
    message: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    read: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )
    data: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
    )
    related_plant_id: Mapped[uuid_module.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("plants.id", ondelete="SET NULL"),
        nullable=True,
    )
    related_reminder_id: Mapped[uuid_module.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("reminders.id", ondelete="SET NULL"),
        nullable=True,
    )
    priority: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        default=NotificationPriority.MEDIUM.value,
    )
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: default_expiry(),
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )

    related_plant: Mapped[Plant | None] = relationship(Plant)
    related_reminder: Mapped[Reminder | None] = relationship(Reminder)

    __table_args__ = (
        Index("idx_notifications_user_read_created", "user_id", "read", "created_at"),
        Index("idx_notifications_user_type", "user_id", "type"),
        Index("idx_notifications_expires_at", "expires_at"),
    )

    def __repr__(self) -> str:
        """Return string representation of the notification."""
        return (
            f"<Notification(id={self.id}, type={self.notification_type}, "
            f"priority={self.priority}, read={self.read})>"
        )
