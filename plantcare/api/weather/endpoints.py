"""API endpoints for weather lookups and weather-based care hints."""

import logging
import time
from collections.abc import Callable
from typing import TypeVar

from fastapi import APIRouter, Depends, HTTPException, Query, status

from plantcare.api.dependencies import get_weather_client
from plantcare.api.models import ErrorResponse
from plantcare.api.weather.models import CareRecommendationsResponse, ForecastResponse
from plantcare.weather import (
    CityWeather,
    CurrentWeather,
    WeatherClient,
    WeatherClientError,
    get_care_recommendations,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/weather",
    tags=["Weather"],
    responses={502: {"model": ErrorResponse, "description": "Weather provider error"}},
)

T = TypeVar("T")

LATITUDE = Query(..., ge=-90, le=90, description="Latitude")
LONGITUDE = Query(..., ge=-180, le=180, description="Longitude")


def _call_provider(operation: str, call: Callable[[], T]) -> T:
    """Run a weather client call and map failures to 502.

    :param operation: Operation name for logging.
    :param call: The client call.
    :returns: The call's result.
    :raises HTTPException: If the weather provider request failed.
    """
    start = time.perf_counter()
    try:
        result = call()
    except WeatherClientError as e:
        logger.warning(f"Weather {operation} failed: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(f"Weather {operation} complete: elapsed={elapsed_ms:.0f}ms")
    return result


@router.get("/current", response_model=CurrentWeather, summary="Current weather")
def current_weather(
    lat: float = LATITUDE,
    lon: float = LONGITUDE,
    client: WeatherClient = Depends(get_weather_client),
) -> CurrentWeather:
    """Get current weather at coordinates."""
    return _call_provider("current", lambda: client.get_current_weather(lat, lon))


@router.get("/forecast", response_model=ForecastResponse, summary="Weather forecast")
def weather_forecast(
    lat: float = LATITUDE,
    lon: float = LONGITUDE,
    client: WeatherClient = Depends(get_weather_client),
) -> ForecastResponse:
    """Get the next few forecast entries at coordinates."""
    entries = _call_provider("forecast", lambda: client.get_forecast(lat, lon))
    return ForecastResponse(entries=entries)


@router.get("/city/{city}", response_model=CityWeather, summary="Current weather for a city")
def weather_by_city(
    city: str,
    client: WeatherClient = Depends(get_weather_client),
) -> CityWeather:
    """Get current weather for a city name."""
    city = city.strip()
    if not city:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="City name is required",
        )
    return _call_provider("city", lambda: client.get_weather_by_city(city))


@router.get(
    "/care-recommendations",
    response_model=CareRecommendationsResponse,
    summary="Weather-based care recommendations",
)
def care_recommendations(
    lat: float = LATITUDE,
    lon: float = LONGITUDE,
    plant_type: str | None = Query(None, description="Plant type"),
    client: WeatherClient = Depends(get_weather_client),
) -> CareRecommendationsResponse:
    """Get current weather and rule-based care recommendations for it."""
    weather = _call_provider("care-recommendations", lambda: client.get_current_weather(lat, lon))
    return CareRecommendationsResponse(
        weather=weather,
        recommendations=get_care_recommendations(weather, plant_type),
        plant_type=plant_type,
    )
