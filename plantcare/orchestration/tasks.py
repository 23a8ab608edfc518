"""Celery tasks for reminder processing and notification housekeeping."""

import logging
from typing import Any

from celery import Celery, Task
from celery.schedules import crontab

from plantcare.database.connection import get_session
from plantcare.database.notifications import delete_expired_notifications
from plantcare.orchestration.celery_app import celery_app
from plantcare.scheduler import get_reminder_scheduler
from plantcare.scheduler.config import get_scheduler_settings

logger = logging.getLogger(__name__)


@celery_app.task(bind=True, name="plantcare.orchestration.tasks.check_reminders_task")
def check_reminders_task(self: Task) -> dict[str, Any]:
    """Process all due reminders.

    Not retried automatically: the next beat tick picks up anything that failed.

    :param self: The Celery task instance (bound).
    :returns: Dictionary with processing statistics.
    """
    logger.info("Starting reminder check task")

    try:
        result = get_reminder_scheduler().check_reminders()
    except Exception as exc:
        logger.exception(f"Reminder check task failed: {exc}")
        raise

    if result is None:
        return {"skipped": True}

    stats = result.to_dict()
    logger.info(f"Reminder check task complete: {stats}")
    return stats


@celery_app.task(bind=True, name="plantcare.orchestration.tasks.purge_expired_notifications_task")
def purge_expired_notifications_task(self: Task) -> dict[str, int]:
    """Delete notifications whose expiry time has passed.

    :param self: The Celery task instance (bound).
    :returns: Dictionary with the number of notifications deleted.
    """
    logger.info("Starting expired notification purge task")

    try:
        with get_session() as session:
            deleted = delete_expired_notifications(session)
    except Exception as exc:
        logger.exception(f"Expired notification purge failed: {exc}")
        raise

    return {"deleted": deleted}


@celery_app.on_after_configure.connect
def setup_periodic_tasks(sender: Celery, **kwargs: Any) -> None:
    """Set up periodic tasks."""
    config = get_scheduler_settings()
    sender.add_periodic_task(
        crontab(minute=f"*/{config.interval_minutes}"),
        check_reminders_task.s(),
        name="check-reminders",
    )
    sender.add_periodic_task(
        crontab(minute=config.notification_purge_minute),
        purge_expired_notifications_task.s(),
        name="purge-expired-notifications",
    )
