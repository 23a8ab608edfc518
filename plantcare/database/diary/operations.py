"""Database operations for plant diary entries."""

from __future__ import annotations

import logging
import uuid as uuid_module

from sqlalchemy.orm import Session

from plantcare.database.diary.models import DiaryEntry

logger = logging.getLogger(__name__)


def create_diary_entry(  # noqa: PLR0913 - mirrors the entry columns
    session: Session,
    user_id: uuid_module.UUID,
    plant_id: uuid_module.UUID,
    title: str,
    content: str,
    activity: str | None = None,
    photo_url: str | None = None,
) -> DiaryEntry:
    """Create a diary entry for a plant.

    :param session: Database session.
    :param user_id: Author user ID.
    :param plant_id: The plant the entry is about.
    :param title: Entry title.
    :param content: Entry body.
    :param activity: Optional care activity (lowercased).
    :param photo_url: Optional photo URL.
    :returns: The created entry.
    """
    entry = DiaryEntry(
        user_id=user_id,
        plant_id=plant_id,
        title=title,
        content=content,
        activity=activity.strip().lower() if activity else None,
        photo_url=photo_url,
    )
    session.add(entry)
    session.flush()
    logger.info(
        f"Created diary entry: id={entry.id}, plant_id={plant_id}, activity={entry.activity}"
    )
    return entry


def list_diary_entries_for_plant(
    session: Session,
    plant_id: uuid_module.UUID,
    limit: int | None = None,
) -> list[DiaryEntry]:
    """List diary entries for a plant, newest first.

    :param session: Database session.
    :param plant_id: Plant ID.
    :param limit: Optional maximum number of entries.
    :returns: List of entries.
    """
    query = (
        session.query(DiaryEntry)
        .filter(DiaryEntry.plant_id == plant_id)
        .order_by(DiaryEntry.created_at.desc())
    )
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def get_latest_activity(
    session: Session,
    plant_id: uuid_module.UUID,
    activity: str,
) -> DiaryEntry | None:
    """Get the most recent diary entry of an activity for a plant.

    Used to answer questions like "when was this plant last repotted".

    :param session: Database session.
    :param plant_id: Plant ID.
    :param activity: Activity name, e.g. "repotting".
    :returns: The latest matching entry or None.
    """
    return (
        session.query(DiaryEntry)
        .filter(
            DiaryEntry.plant_id == plant_id,
            DiaryEntry.activity == activity.strip().lower(),
        )
        .order_by(DiaryEntry.created_at.desc())
        .first()
    )
