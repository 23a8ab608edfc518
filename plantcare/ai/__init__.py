"""Generative-AI plant identification, diagnosis and care advice."""

from plantcare.ai.client import GeminiClient
from plantcare.ai.exceptions import AIClientError, AINotConfiguredError, PlantAIError
from plantcare.ai.models import ClimatePlantInput, ClimateWeatherInput, GrowthInput
from plantcare.ai.service import AIAnswer, AnswerSource, PlantAIService

__all__ = [
    "AIAnswer",
    "AIClientError",
    "AINotConfiguredError",
    "AnswerSource",
    "ClimatePlantInput",
    "ClimateWeatherInput",
    "GeminiClient",
    "GrowthInput",
    "PlantAIError",
    "PlantAIService",
]
