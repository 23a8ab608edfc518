"""Database operations for user plants."""

from __future__ import annotations

import logging
import uuid as uuid_module
from typing import Any

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from plantcare.database.plants.models import Plant

logger = logging.getLogger(__name__)


def create_plant(  # noqa: PLR0913 - mirrors the plant columns
    session: Session,
    user_id: uuid_module.UUID,
    name: str,
    species: str | None = None,
    pot_size: str | None = None,
    sunlight: str | None = None,
    photo_url: str | None = None,
    care_schedule: dict[str, Any] | None = None,
    location_city: str | None = None,
    location_lat: float | None = None,
    location_lon: float | None = None,
    weather_aware: bool = True,
) -> Plant:
    """Create a new plant for a user.

    :param session: Database session.
    :param user_id: Owner user ID.
    :param name: Plant nickname.
    :param species: Optional species name.
    :param pot_size: Optional pot size description.
    :param sunlight: Optional sunlight description.
    :param photo_url: Optional photo URL.
    :param care_schedule: Optional structured care schedule.
    :param location_city: Optional city name.
    :param location_lat: Optional latitude.
    :param location_lon: Optional longitude.
    :param weather_aware: Whether weather-based care applies to this plant.
    :returns: The created plant.
    :raises ValueError: If only one of latitude/longitude is provided.
    """
    if (location_lat is None) != (location_lon is None):
        raise ValueError("Latitude and longitude must be provided together")

    plant = Plant(
        user_id=user_id,
        name=name,
        species=species,
        pot_size=pot_size,
        sunlight=sunlight,
        photo_url=photo_url,
        care_schedule=care_schedule,
        location_city=location_city,
        location_lat=location_lat,
        location_lon=location_lon,
        weather_aware=weather_aware,
    )
    session.add(plant)
    session.flush()
    logger.info(f"Created plant: id={plant.id}, user_id={user_id}, species={species!r}")
    return plant


def get_plant_by_id(
    session: Session,
    plant_id: uuid_module.UUID,
    user_id: uuid_module.UUID | None = None,
) -> Plant | None:
    """Get a plant by ID, optionally scoped to its owner.

    :param session: Database session.
    :param plant_id: Plant ID.
    :param user_id: If provided, only return the plant when owned by this user.
    :returns: The plant or None if not found.
    """
    query = session.query(Plant).filter(Plant.id == plant_id)
    if user_id is not None:
        query = query.filter(Plant.user_id == user_id)
    return query.first()


def list_plants_for_user(session: Session, user_id: uuid_module.UUID) -> list[Plant]:
    """List a user's plants, newest first.

    :param session: Database session.
    :param user_id: Owner user ID.
    :returns: List of plants.
    """
    return (
        session.query(Plant)
        .filter(Plant.user_id == user_id)
        .order_by(Plant.created_at.desc())
        .all()
    )


def list_weather_aware_plants(session: Session) -> list[Plant]:
    """List plants that have a location and opted in to weather-based care.

    :param session: Database session.
    :returns: List of plants with coordinates or a city.
    """
    return (
        session.query(Plant)
        .filter(
            Plant.weather_aware.is_(True),
            or_(
                Plant.location_city.is_not(None),
                and_(Plant.location_lat.is_not(None), Plant.location_lon.is_not(None)),
            ),
        )
        .all()
    )
