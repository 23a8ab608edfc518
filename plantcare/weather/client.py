"""OpenWeatherMap client for current conditions and forecasts."""

import logging
from datetime import UTC, datetime
from typing import Any

import requests

from plantcare.weather.config import WeatherConfig, get_weather_settings
from plantcare.weather.exceptions import WeatherClientError
from plantcare.weather.models import CityWeather, CurrentWeather, ForecastEntry

logger = logging.getLogger(__name__)


def _parse_current(data: dict[str, Any]) -> dict[str, Any]:
    """Extract the current-weather fields from an API payload."""
    return {
        "temperature": data["main"]["temp"],
        "humidity": data["main"]["humidity"],
        "description": data["weather"][0]["description"],
        "icon": data["weather"][0]["icon"],
        "wind_speed": data["wind"]["speed"],
        "pressure": data["main"]["pressure"],
    }


class WeatherClient:
    """Client for the OpenWeatherMap 2.5 REST API."""

    def __init__(self, config: WeatherConfig | None = None) -> None:
        """Initialise the weather client.

        :param config: Weather settings. Defaults to the cached environment settings.
        """
        self._config = config or get_weather_settings()
        self._base_url = self._config.base_url.rstrip("/")
        logger.debug(f"WeatherClient initialised with base_url={self._base_url}")

    def _get(self, path: str, params: dict[str, Any], error_message: str) -> dict[str, Any]:
        """Perform a GET request against the API.

        :param path: Endpoint path, e.g. "weather".
        :param params: Query parameters (API key and units are added).
        :param error_message: Message used for the raised error.
        :returns: The decoded JSON payload.
        :raises WeatherClientError: If the request fails.
        """
        url = f"{self._base_url}/{path}"
        query = {**params, "appid": self._config.api_key, "units": self._config.units}
        logger.info(f"Weather API request: path={path}, params={params}")

        try:
            response = requests.get(url, params=query, timeout=self._config.request_timeout)
            response.raise_for_status()
            return response.json()

        except requests.exceptions.Timeout as e:
            logger.error(f"Weather API timed out after {self._config.request_timeout}s")
            raise WeatherClientError(error_message) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Weather API request failed: path={path}, error={e}")
            raise WeatherClientError(error_message) from e
        except ValueError as e:
            logger.error(f"Weather API returned invalid JSON: path={path}")
            raise WeatherClientError(error_message) from e

    def get_current_weather(self, lat: float, lon: float) -> CurrentWeather:
        """Get current weather at coordinates.

        :param lat: Latitude.
        :param lon: Longitude.
        :returns: Current conditions.
        :raises WeatherClientError: If the request fails or the payload is malformed.
        """
        message = "Failed to fetch weather data"
        data = self._get("weather", {"lat": lat, "lon": lon}, message)
        try:
            return CurrentWeather(**_parse_current(data))
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.error(f"Unexpected current weather payload: {e}")
            raise WeatherClientError(message) from e

    def get_forecast(self, lat: float, lon: float) -> list[ForecastEntry]:
        """Get the next few 3-hourly forecast entries at coordinates.

        :param lat: Latitude.
        :param lon: Longitude.
        :returns: Forecast entries, earliest first.
        :raises WeatherClientError: If the request fails or the payload is malformed.
        """
        message = "Failed to fetch weather forecast"
        data = self._get("forecast", {"lat": lat, "lon": lon}, message)
        try:
            return [
                ForecastEntry(
                    date=datetime.fromtimestamp(item["dt"], tz=UTC),
                    temperature=item["main"]["temp"],
                    humidity=item["main"]["humidity"],
                    description=item["weather"][0]["description"],
                    icon=item["weather"][0]["icon"],
                )
                for item in data["list"][: self._config.forecast_entries]
            ]
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.error(f"Unexpected forecast payload: {e}")
            raise WeatherClientError(message) from e

    def get_weather_by_city(self, city: str) -> CityWeather:
        """Get current weather for a city name.

        :param city: City name, optionally with country code ("Pune,IN").
        :returns: Current conditions with the resolved location.
        :raises WeatherClientError: If the request fails or the payload is malformed.
        """
        message = "Failed to fetch weather data for city"
        data = self._get("weather", {"q": city}, message)
        try:
            return CityWeather(
                **_parse_current(data),
                city=data["name"],
                country=data.get("sys", {}).get("country"),
                lat=data["coord"]["lat"],
                lon=data["coord"]["lon"],
            )
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.error(f"Unexpected city weather payload: {e}")
            raise WeatherClientError(message) from e
