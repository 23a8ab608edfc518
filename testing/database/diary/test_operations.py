"""Tests for diary entry database operations."""

import unittest
from unittest.mock import MagicMock
from uuid import uuid4

from plantcare.database.diary.models import DiaryEntry
from plantcare.database.diary.operations import (
    create_diary_entry,
    get_latest_activity,
    list_diary_entries_for_plant,
)


class TestCreateDiaryEntry(unittest.TestCase):
    """Tests for create_diary_entry operation."""

    def test_normalises_activity(self) -> None:
        """Test that the activity is stripped and lowercased."""
        mock_session = MagicMock()

        entry = create_diary_entry(
            mock_session,
            user_id=uuid4(),
            plant_id=uuid4(),
            title="Repotted",
            content="Moved to a 20cm pot",
            activity=" Repotting ",
        )

        self.assertEqual(entry.activity, "repotting")
        mock_session.add.assert_called_once_with(entry)
        mock_session.flush.assert_called_once()

    def test_activity_is_optional(self) -> None:
        """Test that an entry without an activity keeps it as None."""
        entry = create_diary_entry(
            MagicMock(), user_id=uuid4(), plant_id=uuid4(), title="New leaf", content="!"
        )

        self.assertIsNone(entry.activity)


class TestDiaryQueries(unittest.TestCase):
    """Tests for diary query operations."""

    def test_list_entries_with_limit(self) -> None:
        """Test that a limit is applied when given."""
        mock_session = MagicMock()
        ordered = mock_session.query.return_value.filter.return_value.order_by.return_value
        ordered.limit.return_value.all.return_value = []

        list_diary_entries_for_plant(mock_session, uuid4(), limit=5)

        ordered.limit.assert_called_once_with(5)

    def test_list_entries_without_limit(self) -> None:
        """Test that no limit is applied by default."""
        mock_session = MagicMock()
        ordered = mock_session.query.return_value.filter.return_value.order_by.return_value
        ordered.all.return_value = []

        list_diary_entries_for_plant(mock_session, uuid4())

        ordered.limit.assert_not_called()

    def test_get_latest_activity(self) -> None:
        """Test that the latest matching entry is returned."""
        mock_session = MagicMock()
        entry = DiaryEntry(id=uuid4(), title="Pruned", content="", activity="pruning")
        ordered = mock_session.query.return_value.filter.return_value.order_by.return_value
        ordered.first.return_value = entry

        self.assertEqual(get_latest_activity(mock_session, uuid4(), "Pruning"), entry)


if __name__ == "__main__":
    unittest.main()
