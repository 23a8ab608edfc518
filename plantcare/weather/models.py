"""Pydantic models for weather data."""

from datetime import datetime

from pydantic import BaseModel, Field


class CurrentWeather(BaseModel):
    """Current conditions at a location (metric units)."""

    temperature: float = Field(..., description="Temperature in °C")
    humidity: float = Field(..., description="Relative humidity in %")
    description: str = Field(..., description="Short weather description")
    icon: str = Field(..., description="OpenWeatherMap icon code")
    wind_speed: float = Field(..., description="Wind speed in m/s")
    pressure: float = Field(..., description="Atmospheric pressure in hPa")


class CityWeather(CurrentWeather):
    """Current conditions for a named city, with its resolved location."""

    city: str = Field(..., description="Resolved city name")
    country: str | None = Field(None, description="ISO country code")
    lat: float = Field(..., description="Latitude")
    lon: float = Field(..., description="Longitude")


class ForecastEntry(BaseModel):
    """One 3-hourly forecast step."""

    date: datetime = Field(..., description="Forecast time (UTC)")
    temperature: float = Field(..., description="Temperature in °C")
    humidity: float = Field(..., description="Relative humidity in %")
    description: str = Field(..., description="Short weather description")
    icon: str = Field(..., description="OpenWeatherMap icon code")


class CareRecommendations(BaseModel):
    """Rule-based plant care hints derived from current weather."""

    watering: str = Field(..., description="Watering recommendation")
    sunlight: str = Field(..., description="Sunlight recommendation")
    protection: str = Field(..., description="Protection recommendation")
