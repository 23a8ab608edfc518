"""Celery orchestration for scheduled reminder processing."""

from plantcare.orchestration.celery_app import celery_app
from plantcare.orchestration.tasks import (
    check_reminders_task,
    purge_expired_notifications_task,
)

__all__ = [
    "celery_app",
    "check_reminders_task",
    "purge_expired_notifications_task",
]
