"""Configuration for the weather integration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from plantcare.paths import PROJECT_ROOT

_ENV_FILE = PROJECT_ROOT / ".env"


class WeatherConfig(BaseSettings):
    """Configuration for the OpenWeatherMap integration.

    All settings are loaded from environment variables with the OPENWEATHER_ prefix.

    :param api_key: OpenWeatherMap API key.
    :param base_url: Base URL of the 2.5 REST API.
    :param units: Unit system passed to the API.
    :param request_timeout: Request timeout in seconds.
    :param forecast_entries: Number of 3-hourly forecast entries to return.
    """

    model_config = SettingsConfigDict(
        env_prefix="OPENWEATHER_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    api_key: str = Field(..., min_length=1, description="OpenWeatherMap API key")
    base_url: str = Field(
        default="https://api.openweathermap.org/data/2.5",
        description="OpenWeatherMap API base URL",
    )
    units: str = Field(default="metric", description="Unit system")
    request_timeout: int = Field(
        default=10,
        ge=1,
        le=60,
        description="Request timeout in seconds",
    )
    forecast_entries: int = Field(
        default=5,
        ge=1,
        le=40,
        description="Number of forecast entries to return",
    )


@lru_cache
def get_weather_settings() -> WeatherConfig:
    """Get cached weather settings.

    :returns: Configured WeatherConfig instance.
    """
    return WeatherConfig()  # type: ignore[call-arg]
