"""Weather API module."""

from plantcare.api.weather.endpoints import router

__all__ = ["router"]
