"""Pydantic models for weather endpoints."""

from pydantic import BaseModel, Field

from plantcare.weather import CareRecommendations, CurrentWeather, ForecastEntry


class ForecastResponse(BaseModel):
    """Response model for the forecast endpoint."""

    entries: list[ForecastEntry] = Field(..., description="Upcoming 3-hourly forecast entries")


class CareRecommendationsResponse(BaseModel):
    """Response model for weather-based care recommendations."""

    weather: CurrentWeather = Field(..., description="Current conditions")
    recommendations: CareRecommendations = Field(..., description="Care recommendations")
    plant_type: str | None = Field(None, description="Plant type the recommendations are for")
