"""Tests for reminder database operations."""

import unittest
from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock, patch
from uuid import uuid4

from sqlalchemy.dialects import postgresql
from sqlalchemy.orm import Query, Session

from plantcare.database.reminders.models import Reminder
from plantcare.database.reminders.operations import (
    advance_recurring_reminder,
    create_reminder,
    get_due_reminders,
    get_reminder_by_id,
    list_reminders_for_plant,
    mark_reminder_completed,
)
from plantcare.enums import ReminderType

NOW = datetime(2025, 3, 1, 9, 0, tzinfo=UTC)


def _reminder(**overrides: object) -> Reminder:
    fields: dict[str, object] = {
        "id": uuid4(),
        "user_id": uuid4(),
        "plant_id": uuid4(),
        "title": "Water Monty",
        "reminder_type": "watering",
        "scheduled_date": NOW - timedelta(hours=1),
        "is_completed": False,
        "is_recurring": False,
    }
    fields.update(overrides)
    return Reminder(**fields)


class TestCreateReminder(unittest.TestCase):
    """Tests for create_reminder operation."""

    def test_creates_one_time_reminder(self) -> None:
        """Test creating a one-time reminder."""
        mock_session = MagicMock()

        reminder = create_reminder(
            mock_session,
            user_id=uuid4(),
            plant_id=uuid4(),
            title="Feed",
            reminder_type=ReminderType.FERTILIZING,
            scheduled_date=NOW,
        )

        self.assertEqual(reminder.reminder_type, "fertilizing")
        self.assertFalse(reminder.is_recurring)
        mock_session.add.assert_called_once_with(reminder)
        mock_session.flush.assert_called_once()

    def test_accepts_string_type(self) -> None:
        """Test that a raw string type is accepted."""
        reminder = create_reminder(
            MagicMock(),
            user_id=uuid4(),
            plant_id=uuid4(),
            title="Trim",
            reminder_type="pruning",
            scheduled_date=NOW,
            is_recurring=True,
            recurring_days=14,
        )

        self.assertEqual(reminder.reminder_type, "pruning")
        self.assertEqual(reminder.interval_days, 14)

    def test_rejects_unknown_type(self) -> None:
        """Test that an unknown type raises ValueError."""
        with self.assertRaises(ValueError):
            create_reminder(
                MagicMock(),
                user_id=uuid4(),
                plant_id=uuid4(),
                title="Sing",
                reminder_type="singing",
                scheduled_date=NOW,
            )

    def test_rejects_non_positive_interval(self) -> None:
        """Test that recurring_days below 1 raises ValueError."""
        with self.assertRaises(ValueError):
            create_reminder(
                MagicMock(),
                user_id=uuid4(),
                plant_id=uuid4(),
                title="Water",
                reminder_type="watering",
                scheduled_date=NOW,
                is_recurring=True,
                recurring_days=0,
            )


class TestReminderModel(unittest.TestCase):
    """Tests for Reminder model properties."""

    def test_interval_defaults_to_one_day(self) -> None:
        """Test that a recurring reminder without days repeats daily."""
        self.assertEqual(_reminder(is_recurring=True).interval_days, 1)

    def test_type_label(self) -> None:
        """Test the human readable type label."""
        self.assertEqual(_reminder(reminder_type="repotting").type_label, "repotting")


class TestReminderQueries(unittest.TestCase):
    """Tests for reminder query operations."""

    def test_get_reminder_by_id(self) -> None:
        """Test that a reminder is returned when found."""
        mock_session = MagicMock()
        reminder = _reminder()
        mock_session.query.return_value.filter.return_value.first.return_value = reminder

        self.assertEqual(get_reminder_by_id(mock_session, reminder.id), reminder)

    def test_get_due_reminders(self) -> None:
        """Test that due reminders are loaded with their user and plant."""
        mock_session = MagicMock()
        reminders = [_reminder()]
        query = mock_session.query.return_value.options.return_value
        ordered = query.filter.return_value.order_by.return_value
        ordered.with_for_update.return_value.all.return_value = reminders

        result = get_due_reminders(mock_session, NOW)

        self.assertEqual(result, reminders)
        mock_session.query.return_value.options.assert_called_once()
        ordered.with_for_update.assert_called_once_with(skip_locked=True, of=Reminder)

    def test_due_reminders_skip_rows_locked_by_another_check(self) -> None:
        """Test that only the reminder rows are locked and locked rows are skipped."""
        captured: list[Query] = []

        def capture(query: Query) -> list[Reminder]:
            captured.append(query)
            return []

        with patch.object(Query, "all", autospec=True, side_effect=capture):
            get_due_reminders(Session(), NOW)

        sql = str(captured[0].statement.compile(dialect=postgresql.dialect()))
        self.assertIn("FOR UPDATE OF reminders SKIP LOCKED", sql)

    def test_list_reminders_excludes_completed_by_default(self) -> None:
        """Test that completed reminders are filtered out by default."""
        mock_session = MagicMock()
        query = mock_session.query.return_value.filter.return_value
        query.filter.return_value.order_by.return_value.all.return_value = []

        list_reminders_for_plant(mock_session, uuid4())

        query.filter.assert_called_once()

    def test_list_reminders_including_completed(self) -> None:
        """Test that include_completed skips the completion filter."""
        mock_session = MagicMock()
        query = mock_session.query.return_value.filter.return_value
        query.order_by.return_value.all.return_value = []

        list_reminders_for_plant(mock_session, uuid4(), include_completed=True)

        query.filter.assert_not_called()


class TestCompleteAndAdvance(unittest.TestCase):
    """Tests for completing and rescheduling reminders."""

    def test_mark_completed(self) -> None:
        """Test that a reminder is marked completed."""
        mock_session = MagicMock()
        reminder = _reminder()

        mark_reminder_completed(mock_session, reminder)

        self.assertTrue(reminder.is_completed)
        mock_session.flush.assert_called_once()

    def test_advance_by_one_interval(self) -> None:
        """Test advancing a reminder that is due now."""
        reminder = _reminder(is_recurring=True, recurring_days=7)
        scheduled = reminder.scheduled_date

        next_date = advance_recurring_reminder(MagicMock(), reminder, NOW)

        self.assertEqual(next_date, scheduled + timedelta(days=7))
        self.assertEqual(reminder.scheduled_date, next_date)

    def test_advance_skips_missed_intervals(self) -> None:
        """Test that a long-overdue reminder lands on the first date after now."""
        reminder = _reminder(
            is_recurring=True,
            recurring_days=2,
            scheduled_date=NOW - timedelta(days=9),
        )

        next_date = advance_recurring_reminder(MagicMock(), reminder, NOW)

        self.assertEqual(next_date, NOW + timedelta(days=1))
        self.assertGreater(next_date, NOW)

    def test_advance_lands_strictly_after_now(self) -> None:
        """Test that a date exactly on now is advanced again."""
        reminder = _reminder(
            is_recurring=True,
            recurring_days=1,
            scheduled_date=NOW - timedelta(days=1),
        )

        next_date = advance_recurring_reminder(MagicMock(), reminder, NOW)

        self.assertEqual(next_date, NOW + timedelta(days=1))


if __name__ == "__main__":
    unittest.main()
