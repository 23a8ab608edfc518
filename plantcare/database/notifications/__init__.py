"""Database model and operations for in-app notifications."""

from plantcare.database.notifications.models import DEFAULT_EXPIRY, Notification
from plantcare.database.notifications.operations import (
    count_unread,
    create_ai_insight_notification,
    create_notification,
    create_plant_care_notification,
    create_reminder_notification,
    create_weather_alert_notification,
    delete_expired_notifications,
)

__all__ = [
    # Models
    "DEFAULT_EXPIRY",
    "Notification",
    # Operations
    "count_unread",
    "create_ai_insight_notification",
    "create_notification",
    "create_plant_care_notification",
    "create_reminder_notification",
    "create_weather_alert_notification",
    "delete_expired_notifications",
]
