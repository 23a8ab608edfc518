"""Database model and operations for plant care reminders."""

from plantcare.database.reminders.models import DEFAULT_RECURRING_DAYS, Reminder
from plantcare.database.reminders.operations import (
    advance_recurring_reminder,
    create_reminder,
    get_due_reminders,
    get_reminder_by_id,
    list_reminders_for_plant,
    mark_reminder_completed,
)

__all__ = [
    # Models
    "DEFAULT_RECURRING_DAYS",
    "Reminder",
    # Operations
    "advance_recurring_reminder",
    "create_reminder",
    "get_due_reminders",
    "get_reminder_by_id",
    "list_reminders_for_plant",
    "mark_reminder_completed",
]
