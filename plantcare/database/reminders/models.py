"""SQLAlchemy ORM model for plant care reminders."""

import uuid as uuid_module
from datetime import UTC, datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from plantcare.database.core import Base
from plantcare.database.plants.models import Plant
from plantcare.database.users.models import User
from plantcare.enums import ReminderType

# Interval used when a recurring reminder has no recurring_days set
DEFAULT_RECURRING_DAYS = 1


class Reminder(Base):
    """ORM model for a plant care reminder.

    A reminder is due once scheduled_date has passed and it is not completed.
    One-time reminders are completed after they fire; recurring reminders
    move scheduled_date forward by recurring_days instead.
    """

    __tablename__ = "reminders"

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
    plant_id: Mapped[uuid_module.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("plants.id", ondelete="CASCADE"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    reminder_type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
    )
    scheduled_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
    is_completed: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )
    is_recurring: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )
    recurring_days: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )

    user: Mapped[User] = relationship(User)
    plant: Mapped[Plant] = relationship(Plant)

    __table_args__ = (
        Index("idx_reminders_due", "is_completed", "scheduled_date"),
        Index("idx_reminders_user_id", "user_id"),
        Index("idx_reminders_plant_id", "plant_id"),
    )

    @property
    def interval_days(self) -> int:
        """Days between occurrences of a recurring reminder."""
        return self.recurring_days or DEFAULT_RECURRING_DAYS

    @property
    def type_label(self) -> str:
        """Human readable reminder type, e.g. "watering"."""
        return ReminderType(self.reminder_type).value.replace("_", " ")

    def __repr__(self) -> str:
        """Return string representation of the reminder."""
        recurrence = f"every {self.interval_days}d" if self.is_recurring else "one-time"
        return (
            f"<Reminder(id={self.id}, title={self.title!r}, type={self.reminder_type}, "
            f"{recurrence}, completed={self.is_completed})>"
        )
