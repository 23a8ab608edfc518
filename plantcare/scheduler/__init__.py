"""Periodic processing of due plant care reminders."""

from plantcare.scheduler.models import ReminderCheckResult, ReminderOutcome, SchedulerStatus
from plantcare.scheduler.service import (
    ReminderProcessingTimeoutError,
    ReminderScheduler,
    get_reminder_scheduler,
)

__all__ = [
    "ReminderCheckResult",
    "ReminderOutcome",
    "ReminderProcessingTimeoutError",
    "ReminderScheduler",
    "SchedulerStatus",
    "get_reminder_scheduler",
]
