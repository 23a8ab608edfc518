"""Central enum definitions for the project."""

from enum import StrEnum


class ReminderType(StrEnum):
    """Kinds of plant care a reminder can be about."""

    WATERING = "watering"
    FERTILIZING = "fertilizing"
    PRUNING = "pruning"
    REPOTTING = "repotting"
    CUSTOM = "custom"


class NotificationType(StrEnum):
    """Categories of in-app notification."""

    REMINDER = "reminder"
    PLANT_CARE = "plant_care"
    WEATHER_ALERT = "weather_alert"
    SYSTEM = "system"
    AI_INSIGHT = "ai_insight"


class NotificationPriority(StrEnum):
    """Display priority of a notification."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"
