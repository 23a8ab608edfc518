"""Tests for weather-based care recommendations."""

import unittest

from plantcare.weather.models import CurrentWeather
from plantcare.weather.recommendations import get_care_recommendations


def _weather(**overrides: object) -> CurrentWeather:
    fields: dict[str, object] = {
        "temperature": 20,
        "humidity": 50,
        "description": "haze",
        "icon": "50d",
        "wind_speed": 2,
        "pressure": 1012,
    }
    fields.update(overrides)
    return CurrentWeather(**fields)


class TestWateringRecommendation(unittest.TestCase):
    """Tests for the watering rule order."""

    def test_normal(self) -> None:
        """Test mild conditions give the normal schedule."""
        result = get_care_recommendations(_weather())
        self.assertEqual(result.watering, "Normal watering schedule recommended.")

    def test_heat_beats_low_humidity(self) -> None:
        """Test that high temperature is checked before humidity."""
        result = get_care_recommendations(_weather(temperature=35, humidity=10))
        self.assertIn("extra watering", result.watering)

    def test_cold(self) -> None:
        """Test that cold weather reduces watering."""
        result = get_care_recommendations(_weather(temperature=8, humidity=90))
        self.assertIn("Reduce watering frequency", result.watering)

    def test_low_humidity(self) -> None:
        """Test that dry air increases watering frequency."""
        result = get_care_recommendations(_weather(humidity=20))
        self.assertIn("more frequent watering", result.watering)

    def test_high_humidity(self) -> None:
        """Test that humid air warns about root rot."""
        result = get_care_recommendations(_weather(humidity=85))
        self.assertIn("root rot", result.watering)

    def test_boundaries_are_exclusive(self) -> None:
        """Test that exactly 30°C and 30% humidity are normal."""
        result = get_care_recommendations(_weather(temperature=30, humidity=30))
        self.assertEqual(result.watering, "Normal watering schedule recommended.")


class TestSunlightAndProtection(unittest.TestCase):
    """Tests for sunlight and protection rules."""

    def test_cloudy(self) -> None:
        """Test cloudy weather."""
        result = get_care_recommendations(_weather(description="Overcast Clouds"))
        self.assertTrue(result.sunlight.startswith("Cloudy/rainy weather"))

    def test_clear(self) -> None:
        """Test clear weather."""
        result = get_care_recommendations(_weather(description="clear sky"))
        self.assertTrue(result.sunlight.startswith("Clear weather"))

    def test_other_sunlight(self) -> None:
        """Test other descriptions give normal sunlight."""
        result = get_care_recommendations(_weather(description="mist"))
        self.assertEqual(result.sunlight, "Normal sunlight conditions.")

    def test_freezing(self) -> None:
        """Test freezing temperatures take priority over wind."""
        result = get_care_recommendations(_weather(temperature=2, wind_speed=25))
        self.assertIn("Freezing", result.protection)

    def test_high_wind(self) -> None:
        """Test high wind protection."""
        result = get_care_recommendations(_weather(wind_speed=21))
        self.assertIn("High winds", result.protection)

    def test_no_protection(self) -> None:
        """Test calm mild weather needs no protection."""
        result = get_care_recommendations(_weather(), plant_type="succulent")
        self.assertEqual(result.protection, "No special protection needed.")


if __name__ == "__main__":
    unittest.main()
