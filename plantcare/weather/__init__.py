"""Weather lookups and weather-based plant care recommendations."""

from plantcare.weather.client import WeatherClient
from plantcare.weather.exceptions import WeatherClientError
from plantcare.weather.models import CareRecommendations, CityWeather, CurrentWeather, ForecastEntry
from plantcare.weather.recommendations import get_care_recommendations

__all__ = [
    "CareRecommendations",
    "CityWeather",
    "CurrentWeather",
    "ForecastEntry",
    "WeatherClient",
    "WeatherClientError",
    "get_care_recommendations",
]
