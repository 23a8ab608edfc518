"""SQLAlchemy ORM model for user plants."""

import uuid as uuid_module
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, Float, ForeignKey, Index, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from plantcare.database.core import Base
from plantcare.database.users.models import User


class Plant(Base):
    """ORM model for a plant owned by a user.

    Location is optional; when coordinates or a city are set and
    weather_aware is true, the plant takes part in weather-based care.
    """

    __tablename__ = "plants"

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
    name: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
    )
    species: Mapped[str | None] = mapped_column(String(200), nullable=True)
    pot_size: Mapped[str | None] = mapped_column(String(50), nullable=True)
    sunlight: Mapped[str | None] = mapped_column(String(100), nullable=True)
    photo_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    care_schedule: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    location_city: Mapped[str | None] = mapped_column(String(200), nullable=True)
    location_lat: Mapped[float | None] = mapped_column(Float, nullable=True)
    location_lon: Mapped[float | None] = mapped_column(Float, nullable=True)
    weather_aware: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )

    user: Mapped[User] = relationship(User)

    __table_args__ = (Index("idx_plants_user_id", "user_id"),)

    @property
    def has_coordinates(self) -> bool:
        """Check if both latitude and longitude are set."""
        return self.location_lat is not None and self.location_lon is not None

    def __repr__(self) -> str:
        """Return string representation of the plant."""
        return f"<Plant(id={self.id}, name={self.name!r}, species={self.species!r})>"
