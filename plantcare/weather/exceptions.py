"""Custom exceptions for the weather module."""


class WeatherClientError(Exception):
    """Raised when a weather API request fails or returns unusable data."""
