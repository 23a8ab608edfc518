"""Database model and operations for plant diary entries."""

from plantcare.database.diary.models import DiaryEntry
from plantcare.database.diary.operations import (
    create_diary_entry,
    get_latest_activity,
    list_diary_entries_for_plant,
)

__all__ = [
    # Models
    "DiaryEntry",
    # Operations
    "create_diary_entry",
    "get_latest_activity",
    "list_diary_entries_for_plant",
]
