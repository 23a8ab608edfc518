"""Database operations for plant care reminders."""

from __future__ import annotations

import logging
import uuid as uuid_module
from datetime import UTC, datetime, timedelta

from sqlalchemy.orm import Session, joinedload

from plantcare.database.reminders.models import Reminder
from plantcare.enums import ReminderType

logger = logging.getLogger(__name__)


def create_reminder(  # noqa: PLR0913 - mirrors the reminder columns
    session: Session,
    user_id: uuid_module.UUID,
    plant_id: uuid_module.UUID,
    title: str,
    reminder_type: ReminderType | str,
    scheduled_date: datetime,
    description: str | None = None,
    is_recurring: bool = False,
    recurring_days: int | None = None,
) -> Reminder:
    """Create a new reminder.

    :param session: Database session.
    :param user_id: Owner user ID.
    :param plant_id: The plant the reminder is for.
    :param title: Short reminder title.
    :param reminder_type: Kind of care (watering, fertilizing, ...).
    :param scheduled_date: When the reminder becomes due.
    :param description: Optional longer description.
    :param is_recurring: Whether the reminder repeats.
    :param recurring_days: Days between repeats for recurring reminders.
    :returns: The created reminder.
    :raises ValueError: If the type is unknown or recurring_days is not positive.
    """
    reminder_type = ReminderType(reminder_type)
    if recurring_days is not None and recurring_days < 1:
        raise ValueError(f"recurring_days must be at least 1, got {recurring_days}")

    reminder = Reminder(
        user_id=user_id,
        plant_id=plant_id,
        title=title,
        description=description,
        reminder_type=reminder_type.value,
        scheduled_date=scheduled_date,
        is_recurring=is_recurring,
        recurring_days=recurring_days,
    )
    session.add(reminder)
    session.flush()
    logger.info(
        f"Created reminder: id={reminder.id}, type={reminder_type.value}, "
        f"recurring={is_recurring}, scheduled_date={scheduled_date}"
    )
    return reminder


def get_reminder_by_id(
    session: Session,
    reminder_id: uuid_module.UUID,
) -> Reminder | None:
    """Get a reminder by ID.

    :param session: Database session.
    :param reminder_id: Reminder ID.
    :returns: The reminder or None if not found.
    """
    return session.query(Reminder).filter(Reminder.id == reminder_id).first()


def get_due_reminders(
    session: Session,
    now: datetime | None = None,
) -> list[Reminder]:
    """Get incomplete reminders whose scheduled date has passed.

    The owning user and plant are loaded in the same query. The reminder rows
    stay locked until the session ends, and rows locked by another session
    are skipped, so concurrent checks never pick up the same reminder.

    :param session: Database session.
    :param now: Current time (defaults to now).
    :returns: Due reminders, oldest first.
    """
    if now is None:
        now = datetime.now(UTC)

    return (
        session.query(Reminder)
        .options(joinedload(Reminder.user), joinedload(Reminder.plant))
        .filter(
            Reminder.scheduled_date <= now,
            Reminder.is_completed.is_(False),
        )
        .order_by(Reminder.scheduled_date.asc())
        .with_for_update(skip_locked=True, of=Reminder)
        .all()
    )


def list_reminders_for_plant(
    session: Session,
    plant_id: uuid_module.UUID,
    include_completed: bool = False,
) -> list[Reminder]:
    """List reminders for a plant ordered by scheduled date.

    :param session: Database session.
    :param plant_id: Plant ID.
    :param include_completed: Include completed reminders.
    :returns: List of reminders.
    """
    query = session.query(Reminder).filter(Reminder.plant_id == plant_id)
    if not include_completed:
        query = query.filter(Reminder.is_completed.is_(False))
    return query.order_by(Reminder.scheduled_date.asc()).all()


def mark_reminder_completed(session: Session, reminder: Reminder) -> None:
    """Mark a reminder as completed.

    :param session: Database session.
    :param reminder: The reminder to complete.
    """
    reminder.is_completed = True
    session.flush()
    logger.info(f"Marked reminder completed: id={reminder.id}")


def advance_recurring_reminder(
    session: Session,
    reminder: Reminder,
    now: datetime | None = None,
) -> datetime:
    """Move a recurring reminder's scheduled date to its next occurrence.

    The date is advanced in steps of the reminder interval until it is after
    now, so a reminder that was missed for several intervals fires once.

    :param session: Database session.
    :param reminder: The recurring reminder.
    :param now: Current time (defaults to now).
    :returns: The new scheduled date.
    """
    if now is None:
        now = datetime.now(UTC)

    step = timedelta(days=reminder.interval_days)
    next_date = reminder.scheduled_date + step
    while next_date <= now:
        next_date += step

    reminder.scheduled_date = next_date
    session.flush()
    logger.info(f"Advanced recurring reminder: id={reminder.id}, next={next_date}")
    return next_date
