"""Plant AI service: prompt building, model calls and static fallbacks."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from plantcare.ai import fallbacks, prompts
from plantcare.ai.client import GeminiClient
from plantcare.ai.config import AIConfig, get_ai_settings
from plantcare.ai.exceptions import AIClientError
from plantcare.ai.models import ClimatePlantInput, ClimateWeatherInput, GrowthInput

logger = logging.getLogger(__name__)

DEFAULT_QUESTION = "general care"


class AnswerSource(StrEnum):
    """Where an AI answer came from."""

    LIVE = "live"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class AIAnswer:
    """Text answer from the AI service."""

    text: str
    source: AnswerSource


class PlantAIService:
    """High level plant care AI operations.

    Every operation returns an answer: when no API key is configured the
    static fallback is served without touching the network, and when the
    model call fails the failure is logged and the fallback is served.
    """

    def __init__(
        self,
        client: GeminiClient | None = None,
        config: AIConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialise the service.

        :param client: Optional pre-built Gemini client.
        :param config: AI settings. Defaults to the cached environment settings.
        :param rng: Random generator for fallback selection.
        """
        self._config = config or get_ai_settings()
        self._client = client
        self._rng = rng

    @property
    def is_live(self) -> bool:
        """Check whether model calls will be attempted."""
        return self._client is not None or self._config.is_configured

    def _get_client(self) -> GeminiClient:
        if self._client is None:
            self._client = GeminiClient(self._config)
        return self._client

    def _answer(
        self,
        operation: str,
        call: Callable[[GeminiClient], str],
        fallback: Callable[[], str],
    ) -> AIAnswer:
        if not self.is_live:
            logger.info(f"AI not configured, serving fallback: operation={operation}")
            return AIAnswer(text=fallback(), source=AnswerSource.FALLBACK)

        try:
            text = call(self._get_client())
        except AIClientError as e:
            logger.error(f"AI {operation} failed, serving fallback: {e}")
            return AIAnswer(text=fallback(), source=AnswerSource.FALLBACK)

        return AIAnswer(text=text, source=AnswerSource.LIVE)

    def identify_plant(self, image_bytes: bytes, mime_type: str = "image/jpeg") -> AIAnswer:
        """Identify the plant species in an image.

        :param image_bytes: Raw image bytes.
        :param mime_type: Image MIME type.
        :returns: Species name and a brief description.
        """
        return self._answer(
            "identify",
            lambda client: client.generate_with_image(
                prompts.build_identify_prompt(), image_bytes, mime_type
            ),
            lambda: fallbacks.fallback_identification(self._rng),
        )

    def diagnose_plant(self, image_bytes: bytes, mime_type: str = "image/jpeg") -> AIAnswer:
        """Assess plant health from an image.

        :param image_bytes: Raw image bytes.
        :param mime_type: Image MIME type.
        :returns: Sectioned diagnosis text.
        """
        return self._answer(
            "diagnose",
            lambda client: client.generate_with_image(
                prompts.build_diagnosis_prompt(), image_bytes, mime_type
            ),
            lambda: fallbacks.fallback_diagnosis(self._rng),
        )

    def get_care_advice(self, species: str, question: str | None = None) -> AIAnswer:
        """Answer a care question about a species.

        :param species: Plant species.
        :param question: The user's question; defaults to general care.
        :returns: Advice text.
        """
        question = question or DEFAULT_QUESTION
        return self._answer(
            "care_advice",
            lambda client: client.generate_text(
                prompts.build_care_advice_prompt(species, question)
            ),
            lambda: fallbacks.fallback_care_advice(species, question),
        )

    def generate_care_schedule(
        self,
        species: str,
        location: str,
        conditions: str | None = None,
    ) -> AIAnswer:
        """Generate a personalised care schedule.

        :param species: Plant species.
        :param location: Where the plant is kept.
        :param conditions: Current growing conditions.
        :returns: Schedule text.
        """
        return self._answer(
            "care_schedule",
            lambda client: client.generate_text(
                prompts.build_care_schedule_prompt(species, location, conditions or "unknown")
            ),
            lambda: fallbacks.fallback_care_schedule(species, location, conditions),
        )

    def predict_growth(self, plant: GrowthInput) -> AIAnswer:
        """Predict the plant's growth over the next month.

        :param plant: Plant details.
        :returns: Prediction text.
        """
        return self._answer(
            "growth_prediction",
            lambda client: client.generate_text(prompts.build_growth_prompt(plant)),
            lambda: fallbacks.fallback_growth_prediction(plant),
        )

    def get_climate_based_care(
        self,
        plant: ClimatePlantInput,
        weather: ClimateWeatherInput,
    ) -> AIAnswer:
        """Recommend care adjustments for the current weather.

        :param plant: Plant details.
        :param weather: Current weather details.
        :returns: Recommendations text.
        """
        return self._answer(
            "climate_care",
            lambda client: client.generate_text(prompts.build_climate_care_prompt(plant, weather)),
            lambda: fallbacks.fallback_climate_care(plant, weather),
        )
