"""Custom exceptions for the AI module."""


class PlantAIError(Exception):
    """Base exception for AI-related errors."""


class AIClientError(PlantAIError):
    """Error related to generative model API calls."""


class AINotConfiguredError(PlantAIError):
    """Raised when a live model call is attempted without an API key."""

    def __init__(self) -> None:
        """Initialise AINotConfiguredError."""
        super().__init__("Generative AI not configured. Set GEMINI_API_KEY environment variable.")
