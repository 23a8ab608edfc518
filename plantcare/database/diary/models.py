"""SQLAlchemy ORM model for plant diary entries."""

import uuid as uuid_module
from datetime import UTC, datetime

from sqlalchemy import DateTime, ForeignKey, Index, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from plantcare.database.core import Base
from plantcare.database.plants.models import Plant

# Maximum length of content to show in repr
REPR_CONTENT_MAX_LENGTH = 50


class DiaryEntry(Base):
    """ORM model for a diary entry about a plant.

    activity is free text such as watering, fertilizing, pruning or observation.
    """

    __tablename__ = "diary_entries"

    id: Mapped[uuid_module.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid_module.uuid4,
    )
    user_id: Mapped[uuid_module.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    plant_id: Mapped[uuid_module.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("plants.id", ondelete="CASCADE"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    photo_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    activity: Mapped[str | None] = mapped_column(String(50), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )

    plant: Mapped[Plant] = relationship(Plant)

    __table_args__ = (
        Index("idx_diary_entries_user_id", "user_id"),
        Index("idx_diary_entries_plant_created", "plant_id", "created_at"),
    )

    def __repr__(self) -> str:
        """Return string representation of the entry."""
        if len(self.content) > REPR_CONTENT_MAX_LENGTH:
            preview = self.content[:REPR_CONTENT_MAX_LENGTH] + "..."
        else:
            preview = self.content
        return f"<DiaryEntry(id={self.id}, activity={self.activity}, content={preview!r})>"
