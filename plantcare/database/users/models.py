"""SQLAlchemy ORM model for application users."""

import uuid as uuid_module
from datetime import UTC, datetime

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from plantcare.database.core import Base
from plantcare.enums import NotificationType

# Notification settings column for each notification type. SYSTEM has no
# opt-out.
NOTIFICATION_SETTING_COLUMNS: dict[NotificationType, str] = {
    NotificationType.REMINDER: "notify_reminders",
    NotificationType.PLANT_CARE: "notify_plant_care",
    NotificationType.WEATHER_ALERT: "notify_weather_alerts",
    NotificationType.AI_INSIGHT: "notify_ai_insights",
}

# All user-editable notification settings
NOTIFICATION_SETTING_FIELDS = frozenset(
    {
        "notifications_enabled",
        "notify_email",
        "notify_push",
        *NOTIFICATION_SETTING_COLUMNS.values(),
    }
)


class User(Base):
    """ORM model for a user and their notification preferences.

    Credentials are owned by the authentication layer; only the hash is stored.
    """

    __tablename__ = "users"

    id: Mapped[uuid_module.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid_module.uuid4,
    )
    name: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
    )
    email: Mapped[str] = mapped_column(
        String(320),
        nullable=False,
        unique=True,
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    notifications_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    notify_email: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    notify_push: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    notify_reminders: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    notify_plant_care: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    notify_weather_alerts: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    notify_ai_insights: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )

    def allows_notification(self, notification_type: NotificationType | str) -> bool:
        """Check whether the user accepts in-app notifications of a type.

        :param notification_type: The notification type.
        :returns: True if a notification of this type may be created.
        """
        if self.notifications_enabled is False:
            return False

        column = NOTIFICATION_SETTING_COLUMNS.get(NotificationType(notification_type))
        if column is None:
            return True
        return getattr(self, column) is not False

    @property
    def wants_reminder_emails(self) -> bool:
        """Check whether reminder emails should be sent to this user."""
        return (
            self.notifications_enabled is not False
            and self.notify_email is not False
            and self.notify_reminders is not False
        )

    def __repr__(self) -> str:
        """Return string representation of the user."""
        return f"<User(id={self.id}, email={self.email!r})>"
