"""Reminder scheduler: finds due reminders, notifies users and reschedules."""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from datetime import UTC, datetime
from functools import lru_cache

from sqlalchemy.orm import Session

from plantcare.database.connection import get_session
from plantcare.database.notifications import create_reminder_notification
from plantcare.database.reminders import (
    Reminder,
    advance_recurring_reminder,
    get_due_reminders,
    mark_reminder_completed,
)
from plantcare.email import EmailClient, EmailClientError
from plantcare.scheduler.config import SchedulerConfig, get_scheduler_settings
from plantcare.scheduler.models import ReminderCheckResult, ReminderOutcome, SchedulerStatus

logger = logging.getLogger(__name__)

UNKNOWN_PLANT_NAME = "Unknown Plant"


class ReminderProcessingTimeoutError(Exception):
    """Raised when sending a reminder email exceeds the per-item timeout."""


class ReminderScheduler:
    """Processes due reminders, one check at a time per process."""

    def __init__(
        self,
        email_client: EmailClient | None = None,
        config: SchedulerConfig | None = None,
    ) -> None:
        """Initialise the scheduler.

        :param email_client: Client used for reminder emails.
        :param config: Scheduler settings. Defaults to the cached environment settings.
        """
        self._config = config or get_scheduler_settings()
        self._email_client = email_client or EmailClient()
        self._executor = ThreadPoolExecutor(
            max_workers=self._config.email_workers,
            thread_name_prefix="reminder-email",
        )
        self._lock = threading.Lock()
        self._started_at = time.monotonic()
        self.last_execution: datetime | None = None
        self.execution_count = 0
        self.error_count = 0

    @property
    def is_processing(self) -> bool:
        """Check whether a reminder check is currently running."""
        return self._lock.locked()

    def check_reminders(self, now: datetime | None = None) -> ReminderCheckResult | None:
        """Process every due reminder once.

        Returns None without doing anything when a check is already running.
        A failing reminder is logged, counted and left as it was so the next
        check retries it.

        :param now: Current time (defaults to now).
        :returns: Statistics for the check, or None if it was skipped.
        :raises Exception: Any failure outside the per-reminder loop, after
            it is counted and logged.
        """
        if not self._lock.acquire(blocking=False):
            logger.info("Reminder check already in progress, skipping")
            return None

        try:
            if now is None:
                now = datetime.now(UTC)
            self.last_execution = now
            self.execution_count += 1
            start = time.perf_counter()
            result = ReminderCheckResult()

            with get_session() as session:
                reminders = get_due_reminders(session, now)
                result.found = len(reminders)
                logger.info(f"Found {result.found} due reminders")

                for reminder in reminders:
                    self._process_with_savepoint(session, reminder, now, result)

            result.duration_ms = round((time.perf_counter() - start) * 1000, 1)
            logger.info(
                f"Reminder check complete: processed={result.processed}, "
                f"errors={result.errors}, emails={result.emails_sent}, "
                f"duration={result.duration_ms}ms"
            )
            return result

        except Exception as e:
            self.error_count += 1
            logger.exception(f"Reminder check failed: {e}")
            raise

        finally:
            self._lock.release()

    def _process_with_savepoint(
        self,
        session: Session,
        reminder: Reminder,
        now: datetime,
        result: ReminderCheckResult,
    ) -> None:
        """Process one reminder, rolling back its changes if it fails."""
        try:
            with session.begin_nested():
                outcome = self.process_reminder(session, reminder, now)
        except Exception as e:
            error_msg = f"Failed to process reminder {reminder.id}: {e}"
            logger.exception(error_msg)
            result.errors += 1
            result.error_messages.append(error_msg)
            return

        result.processed += 1
        result.emails_sent += int(outcome.email_sent)
        result.notifications_created += int(outcome.notification_created)

    def process_reminder(
        self,
        session: Session,
        reminder: Reminder,
        now: datetime,
    ) -> ReminderOutcome:
        """Notify the owner of a due reminder and reschedule or complete it.

        :param session: Database session.
        :param reminder: The due reminder, with user and plant loaded.
        :param now: Current time.
        :returns: What was sent and created.
        :raises ReminderProcessingTimeoutError: If the email send exceeds the item timeout.
        """
        email_sent = self._send_reminder_email(reminder)

        notification = create_reminder_notification(session, reminder)

        if reminder.is_recurring:
            next_date = advance_recurring_reminder(session, reminder, now)
            logger.info(f"Rescheduled recurring reminder: id={reminder.id}, next={next_date}")
        else:
            mark_reminder_completed(session, reminder)

        return ReminderOutcome(
            email_sent=email_sent,
            notification_created=notification is not None,
        )

    def _send_reminder_email(self, reminder: Reminder) -> bool:
        """Send the reminder email when the owner wants one.

        Delivery failures are logged and reported as not sent.

        :param reminder: The due reminder.
        :returns: True if an email was sent.
        :raises ReminderProcessingTimeoutError: If the send exceeds the item timeout.
        """
        user = reminder.user
        if user is None or not user.email or not user.wants_reminder_emails:
            return False
        if not self._email_client.is_configured:
            logger.debug(f"Email not configured, skipping reminder email: id={reminder.id}")
            return False

        future = self._executor.submit(
            self._email_client.send_reminder_email,
            user.email,
            user.name,
            reminder.plant.name if reminder.plant is not None else UNKNOWN_PLANT_NAME,
            reminder.title,
            reminder.description,
        )
        timeout = self._config.item_timeout_seconds
        try:
            future.result(timeout=timeout)
        except FutureTimeoutError as e:
            future.cancel()
            raise ReminderProcessingTimeoutError(
                f"Reminder email timed out after {timeout}s"
            ) from e
        except EmailClientError as e:
            logger.warning(f"Reminder email not delivered: id={reminder.id}, error={e}")
            return False
        return True

    def manual_check(self) -> ReminderCheckResult | None:
        """Run a reminder check on demand.

        :returns: Statistics for the check, or None if one was already running.
        """
        logger.info("Manual reminder check triggered")
        return self.check_reminders()

    def get_status(self) -> SchedulerStatus:
        """Get the scheduler status for this process.

        :returns: Current status.
        """
        return SchedulerStatus(
            is_processing=self.is_processing,
            last_execution=self.last_execution,
            execution_count=self.execution_count,
            error_count=self.error_count,
            uptime_seconds=round(time.monotonic() - self._started_at, 1),
        )

    def reset_error_count(self) -> None:
        """Reset the error counter to zero."""
        self.error_count = 0
        logger.info("Reminder scheduler error count reset")


@lru_cache
def get_reminder_scheduler() -> ReminderScheduler:
    """Get the process-wide reminder scheduler.

    :returns: The shared ReminderScheduler instance.
    """
    return ReminderScheduler()
