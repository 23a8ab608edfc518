"""Database operations for in-app notifications.

The create_* helpers are used by background jobs and services; each respects
the recipient's notification preferences and returns None when the user has
opted out.
"""

from __future__ import annotations

import logging
import uuid as uuid_module
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import func
from sqlalchemy.orm import Session

from plantcare.database.notifications.models import Notification, default_expiry
from plantcare.database.plants.models import Plant
from plantcare.database.reminders.models import Reminder
from plantcare.database.users.models import User
from plantcare.enums import NotificationPriority, NotificationType

logger = logging.getLogger(__name__)


def create_notification(  # noqa: PLR0913 - mirrors the notification columns
    session: Session,
    user: User,
    notification_type: NotificationType | str,
    title: str,
    message: str,
    priority: NotificationPriority | str = NotificationPriority.MEDIUM,
    data: dict[str, Any] | None = None,
    related_plant_id: uuid_module.UUID | None = None,
    related_reminder_id: uuid_module.UUID | None = None,
    expires_at: datetime | None = None,
) -> Notification | None:
    """Create a notification for a user if their preferences allow it.

    :param session: Database session.
    :param user: Recipient.
    :param notification_type: Notification category.
    :param title: Short title.
    :param message: Notification body.
    :param priority: Display priority.
    :param data: Extra structured payload.
    :param related_plant_id: Optional plant the notification is about.
    :param related_reminder_id: Optional reminder the notification is about.
    :param expires_at: Expiry time; defaults to 30 days from now.
    :returns: The created notification, or None if the user opted out.
    """
    notification_type = NotificationType(notification_type)
    if not user.allows_notification(notification_type):
        logger.debug(
            f"Notification skipped by user preferences: user_id={user.id}, "
            f"type={notification_type.value}"
        )
        return None

    notification = Notification(
        user_id=user.id,
        notification_type=notification_type.value,
        title=title,
        message=message,
        priority=NotificationPriority(priority).value,
        data=data or {},
        related_plant_id=related_plant_id,
        related_reminder_id=related_reminder_id,
        expires_at=expires_at or default_expiry(),
    )
    session.add(notification)
    session.flush()
    logger.info(
        f"Created notification: id={notification.id}, user_id={user.id}, "
        f"type={notification_type.value}"
    )
    return notification


def create_reminder_notification(
    session: Session,
    reminder: Reminder,
) -> Notification | None:
    """Create the in-app notification for a due reminder.

    :param session: Database session.
    :param reminder: The reminder (with user and plant loaded).
    :returns: The notification, or None if the user opted out.
    """
    plant_suffix = f" - {reminder.plant.name}" if reminder.plant is not None else ""
    priority = NotificationPriority.LOW if reminder.is_completed else NotificationPriority.HIGH

    return create_notification(
        session,
        user=reminder.user,
        notification_type=NotificationType.REMINDER,
        title=f"Reminder: {reminder.title}",
        message=f"It's time to {reminder.type_label} your plant{plant_suffix}",
        priority=priority,
        data={
            "reminder_type": reminder.reminder_type,
            "scheduled_date": reminder.scheduled_date.isoformat(),
        },
        related_plant_id=reminder.plant_id,
        related_reminder_id=reminder.id,
    )


def create_plant_care_notification(
    session: Session,
    plant: Plant,
    care_type: str,
    message: str,
) -> Notification | None:
    """Create a plant care notification.

    :param session: Database session.
    :param plant: The plant (with user loaded).
    :param care_type: Kind of care being suggested.
    :param message: Notification body.
    :returns: The notification, or None if the user opted out.
    """
    return create_notification(
        session,
        user=plant.user,
        notification_type=NotificationType.PLANT_CARE,
        title=f"Plant Care: {plant.name}",
        message=message,
        priority=NotificationPriority.MEDIUM,
        data={"care_type": care_type, "plant_name": plant.name},
        related_plant_id=plant.id,
    )


def create_weather_alert_notification(
    session: Session,
    user: User,
    alert: str,
    weather: dict[str, Any],
) -> Notification | None:
    """Create a weather alert notification.

    :param session: Database session.
    :param user: Recipient.
    :param alert: Short description of the weather risk.
    :param weather: Weather data the alert is based on.
    :returns: The notification, or None if the user opted out.
    """
    return create_notification(
        session,
        user=user,
        notification_type=NotificationType.WEATHER_ALERT,
        title="Weather Alert",
        message=f"Weather conditions may affect your plants. {alert}",
        priority=NotificationPriority.MEDIUM,
        data={"weather": weather},
    )


def create_ai_insight_notification(
    session: Session,
    user: User,
    message: str,
    insight: dict[str, Any] | None = None,
) -> Notification | None:
    """Create an AI insight notification.

    :param session: Database session.
    :param user: Recipient.
    :param message: The insight text.
    :param insight: Optional structured insight payload.
    :returns: The notification, or None if the user opted out.
    """
    return create_notification(
        session,
        user=user,
        notification_type=NotificationType.AI_INSIGHT,
        title="AI Plant Insight",
        message=message,
        priority=NotificationPriority.LOW,
        data={"insight": insight or {"message": message}},
    )


def count_unread(session: Session, user_id: uuid_module.UUID) -> int:
    """Count a user's unread notifications.

    :param session: Database session.
    :param user_id: User ID.
    :returns: Number of unread notifications.
    """
    count = (
        session.query(func.count(Notification.id))
        .filter(Notification.user_id == user_id, Notification.read.is_(False))
        .scalar()
    )
    return int(count or 0)


def delete_expired_notifications(
    session: Session,
    now: datetime | None = None,
) -> int:
    """Delete notifications whose expiry has passed.

    :param session: Database session.
    :param now: Current time (defaults to now).
    :returns: Number of notifications deleted.
    """
    if now is None:
        now = datetime.now(UTC)

    deleted = (
        session.query(Notification)
        .filter(Notification.expires_at <= now)
        .delete(synchronize_session=False)
    )
    session.flush()
    logger.info(f"Deleted expired notifications: count={deleted}")
    return deleted
