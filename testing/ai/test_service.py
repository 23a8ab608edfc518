"""Tests for the plant AI service."""

import random
import unittest
from unittest.mock import MagicMock, patch

from plantcare.ai import (
    AIClientError,
    AnswerSource,
    ClimatePlantInput,
    ClimateWeatherInput,
    GrowthInput,
    PlantAIService,
)
from plantcare.ai.config import AIConfig
from plantcare.ai.fallbacks import DIAGNOSES, IDENTIFICATIONS


class TestAnswerSource(unittest.TestCase):
    """Tests for the answer source values sent to clients."""

    def test_source_values(self) -> None:
        """Test that answers are tagged live or fallback."""
        self.assertEqual([source.value for source in AnswerSource], ["live", "fallback"])


class TestPlantAIServiceWithoutKey(unittest.TestCase):
    """Tests for the service when no API key is configured."""

    def setUp(self) -> None:
        """Set up a service with no key."""
        self.service = PlantAIService(config=AIConfig(api_key=None), rng=random.Random(1))

    def test_is_not_live(self) -> None:
        """Test that the service reports not live."""
        self.assertFalse(self.service.is_live)

    @patch("plantcare.ai.service.GeminiClient")
    def test_identify_serves_fallback_without_client(self, mock_client_cls: MagicMock) -> None:
        """Test that no client is built and a canned identification is served."""
        answer = self.service.identify_plant(b"image")

        self.assertEqual(answer.source, AnswerSource.FALLBACK)
        self.assertIn(answer.text, IDENTIFICATIONS)
        mock_client_cls.assert_not_called()

    def test_diagnose_serves_fallback(self) -> None:
        """Test that a canned diagnosis is served."""
        answer = self.service.diagnose_plant(b"image")

        self.assertEqual(answer.source, AnswerSource.FALLBACK)
        self.assertIn(answer.text, [record.render() for record in DIAGNOSES])

    def test_care_advice_defaults_question(self) -> None:
        """Test that a missing question becomes general care."""
        answer = self.service.get_care_advice("Fern")

        self.assertTrue(answer.text.startswith("Care advice for Fern: general care"))

    def test_care_schedule_fallback_mentions_inputs(self) -> None:
        """Test the schedule fallback includes the species and location."""
        answer = self.service.generate_care_schedule("Fern", "bathroom")

        self.assertIn("Fern in bathroom", answer.text)
        self.assertTrue(answer.text.endswith("current conditions: unknown"))

    def test_growth_fallback(self) -> None:
        """Test the growth prediction fallback."""
        answer = self.service.predict_growth(GrowthInput(species="Pothos"))

        self.assertIn("your Pothos", answer.text)

    def test_climate_fallback_uses_forecast(self) -> None:
        """Test the climate fallback includes the forecast when given."""
        answer = self.service.get_climate_based_care(
            ClimatePlantInput(species="Fern"),
            ClimateWeatherInput(temperature=12, forecast="rain tomorrow"),
        )

        self.assertIn("Based on forecast: rain tomorrow", answer.text)
        self.assertIn("Current temperature: 12", answer.text)


class TestPlantAIServiceWithClient(unittest.TestCase):
    """Tests for the service with a model client."""

    def setUp(self) -> None:
        """Set up a service with a mock client."""
        self.mock_client = MagicMock()
        self.service = PlantAIService(
            client=self.mock_client,
            config=AIConfig(api_key="test-key"),
            rng=random.Random(1),
        )

    def test_identify_uses_model_answer(self) -> None:
        """Test that the model answer is returned."""
        self.mock_client.generate_with_image.return_value = "Monstera deliciosa"

        answer = self.service.identify_plant(b"image", "image/png")

        self.assertEqual(answer.text, "Monstera deliciosa")
        self.assertEqual(answer.source, AnswerSource.LIVE)
        args = self.mock_client.generate_with_image.call_args.args
        self.assertIn("Identify this plant species", args[0])
        self.assertEqual(args[1:], (b"image", "image/png"))

    def test_diagnose_falls_back_on_client_error(self) -> None:
        """Test that a client error is logged and the fallback served."""
        self.mock_client.generate_with_image.side_effect = AIClientError("boom")

        with self.assertLogs("plantcare.ai.service", level="ERROR"):
            answer = self.service.diagnose_plant(b"image")

        self.assertEqual(answer.source, AnswerSource.FALLBACK)
        self.assertIn("PRIMARY DIAGNOSIS", answer.text)

    def test_care_advice_prompt(self) -> None:
        """Test that the care advice prompt includes the question."""
        self.mock_client.generate_text.return_value = "Mist daily"

        answer = self.service.get_care_advice("Calathea", "Why are leaves curling?")

        self.assertEqual(answer.text, "Mist daily")
        prompt = self.mock_client.generate_text.call_args.args[0]
        self.assertIn("Calathea", prompt)
        self.assertIn("Why are leaves curling?", prompt)

    def test_care_schedule_prompt_marks_missing_conditions(self) -> None:
        """Test that missing conditions are sent as unknown."""
        self.mock_client.generate_text.return_value = "Schedule"

        self.service.generate_care_schedule("Fern", "bathroom")

        prompt = self.mock_client.generate_text.call_args.args[0]
        self.assertIn("with these conditions: unknown", prompt)

    def test_growth_prompt_marks_missing_fields(self) -> None:
        """Test that missing plant details are sent as unknown."""
        self.mock_client.generate_text.return_value = "Growth"

        self.service.predict_growth(GrowthInput(species="Pothos", age_weeks=8))

        prompt = self.mock_client.generate_text.call_args.args[0]
        self.assertIn("Current age: 8 weeks", prompt)
        self.assertIn("Health: unknown", prompt)

    def test_climate_falls_back_on_client_error(self) -> None:
        """Test that the climate fallback is served on failure."""
        self.mock_client.generate_text.side_effect = AIClientError("timeout")

        answer = self.service.get_climate_based_care(
            ClimatePlantInput(species="Fern", location="balcony"),
            ClimateWeatherInput(),
        )

        self.assertEqual(answer.source, AnswerSource.FALLBACK)
        self.assertIn("Monitor local weather for extreme conditions", answer.text)


class TestPlantAIServiceLazyClient(unittest.TestCase):
    """Tests for lazy client construction."""

    @patch("plantcare.ai.service.GeminiClient")
    def test_client_built_once_on_first_use(self, mock_client_cls: MagicMock) -> None:
        """Test that the client is created lazily and reused."""
        mock_client_cls.return_value.generate_text.return_value = "ok"
        config = AIConfig(api_key="test-key")
        service = PlantAIService(config=config)

        service.get_care_advice("Fern")
        service.get_care_advice("Fern")

        mock_client_cls.assert_called_once_with(config)


if __name__ == "__main__":
    unittest.main()
