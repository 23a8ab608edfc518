"""Database model and operations for plants."""

from plantcare.database.plants.models import Plant
from plantcare.database.plants.operations import (
    create_plant,
    get_plant_by_id,
    list_plants_for_user,
    list_weather_aware_plants,
)

__all__ = [
    # Models
    "Plant",
    # Operations
    "create_plant",
    "get_plant_by_id",
    "list_plants_for_user",
    "list_weather_aware_plants",
]
