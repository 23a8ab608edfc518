"""Rule-based plant care recommendations from current weather."""

from plantcare.weather.models import CareRecommendations, CurrentWeather

HOT_TEMPERATURE_C = 30
COLD_TEMPERATURE_C = 10
FREEZING_TEMPERATURE_C = 5
LOW_HUMIDITY_PCT = 30
HIGH_HUMIDITY_PCT = 80
HIGH_WIND_MS = 20


def watering_recommendation(weather: CurrentWeather, plant_type: str | None = None) -> str:
    """Recommend a watering adjustment.

    Rules are evaluated in order and the first match wins. plant_type is
    accepted for future per-type tuning and does not change the result.
    """
    if weather.temperature > HOT_TEMPERATURE_C:
        return "High temperature detected. Consider extra watering for most plants."
    if weather.temperature < COLD_TEMPERATURE_C:
        return "Low temperature detected. Reduce watering frequency."
    if weather.humidity < LOW_HUMIDITY_PCT:
        return "Low humidity detected. Plants may need more frequent watering."
    if weather.humidity > HIGH_HUMIDITY_PCT:
        return "High humidity detected. Reduce watering to prevent root rot."
    return "Normal watering schedule recommended."


def sunlight_recommendation(weather: CurrentWeather) -> str:
    """Recommend sunlight exposure from the weather description."""
    description = weather.description.lower()
    if "rain" in description or "cloud" in description:
        return "Cloudy/rainy weather. Plants may need less direct sunlight protection."
    if "clear" in description or "sun" in description:
        return "Clear weather. Ensure proper sunlight exposure for sun-loving plants."
    return "Normal sunlight conditions."


def protection_recommendation(weather: CurrentWeather) -> str:
    """Recommend protective measures against cold or wind."""
    if weather.temperature < FREEZING_TEMPERATURE_C:
        return "Freezing temperatures possible. Protect sensitive plants."
    if weather.wind_speed > HIGH_WIND_MS:
        return "High winds detected. Secure potted plants and protect from wind damage."
    return "No special protection needed."


def get_care_recommendations(
    weather: CurrentWeather,
    plant_type: str | None = None,
) -> CareRecommendations:
    """Build watering, sunlight and protection recommendations.

    :param weather: Current conditions.
    :param plant_type: Optional plant type.
    :returns: Care recommendations.
    """
    return CareRecommendations(
        watering=watering_recommendation(weather, plant_type),
        sunlight=sunlight_recommendation(weather),
        protection=protection_recommendation(weather),
    )
