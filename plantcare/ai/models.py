"""Pydantic models for AI service inputs."""

from pydantic import BaseModel, Field

# Placeholder used in prompts for missing optional values
UNKNOWN = "unknown"


class GrowthInput(BaseModel):
    """Plant details used for growth prediction."""

    species: str = Field(..., min_length=1, description="Plant species")
    age_weeks: int | None = Field(None, ge=0, description="Plant age in weeks")
    health: str | None = Field(None, description="Current health description")
    last_repot: str | None = Field(None, description="When the plant was last repotted")
    last_prune: str | None = Field(None, description="When the plant was last pruned")
    location: str | None = Field(None, description="Where the plant is kept")
    notes: str | None = Field(None, description="Free-form notes")


class ClimatePlantInput(BaseModel):
    """Plant details used for climate-based care."""

    species: str = Field(..., min_length=1, description="Plant species")
    location: str | None = Field(None, description="Where the plant is kept")
    conditions: str | None = Field(None, description="Current growing conditions")


class ClimateWeatherInput(BaseModel):
    """Weather details used for climate-based care.

    Values are free-form so callers can pass either numbers or labelled
    strings such as "24°C".
    """

    temperature: str | float | None = Field(None, description="Current temperature")
    humidity: str | float | None = Field(None, description="Current humidity")
    forecast: str | None = Field(None, description="Short forecast description")
    season: str | None = Field(None, description="Current season")
