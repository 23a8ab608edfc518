"""Shared dependencies for API endpoints."""

import logging

from fastapi import HTTPException, status
from pydantic import ValidationError

from plantcare.ai import PlantAIService
from plantcare.scheduler import ReminderScheduler, get_reminder_scheduler
from plantcare.weather import WeatherClient

logger = logging.getLogger(__name__)


def get_ai_service() -> PlantAIService:
    """Get the plant AI service.

    :returns: A PlantAIService using the environment settings.
    """
    return PlantAIService()


def get_weather_client() -> WeatherClient:
    """Get a weather client.

    :returns: A WeatherClient using the environment settings.
    :raises HTTPException: If the weather API key is not configured.
    """
    try:
        return WeatherClient()
    except ValidationError as e:
        logger.error(f"Weather configuration error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Weather service not configured. Set OPENWEATHER_API_KEY environment variable.",
        ) from e


def get_scheduler() -> ReminderScheduler:
    """Get the process-wide reminder scheduler.

    :returns: The shared ReminderScheduler.
    """
    return get_reminder_scheduler()
