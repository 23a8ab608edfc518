"""Tests for plant AI API endpoints."""

import base64
import unittest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from plantcare.ai import AIAnswer, AnswerSource, GrowthInput
from plantcare.api.app import app
from plantcare.api.dependencies import get_ai_service

IMAGE_B64 = base64.b64encode(b"\x89PNG fake image").decode()


class AIEndpointTestCase(unittest.TestCase):
    """Base test case with a mocked AI service."""

    def setUp(self) -> None:
        """Override the AI service dependency."""
        self.mock_service = MagicMock()
        app.dependency_overrides[get_ai_service] = lambda: self.mock_service
        self.client = TestClient(app)

    def tearDown(self) -> None:
        """Clear dependency overrides."""
        app.dependency_overrides.clear()


class TestIdentifyEndpoint(AIEndpointTestCase):
    """Tests for POST /ai/identify."""

    def test_identify_success(self) -> None:
        """Test a successful identification."""
        self.mock_service.identify_plant.return_value = AIAnswer(
            text="Monstera deliciosa", source=AnswerSource.LIVE
        )

        response = self.client.post(
            "/ai/identify", json={"image_base64": IMAGE_B64, "mime_type": "image/png"}
        )

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertTrue(data["success"])
        self.assertEqual(data["identification"], "Monstera deliciosa")
        self.assertEqual(data["source"], "live")
        self.assertEqual(data["message"], "Plant identified successfully!")
        self.mock_service.identify_plant.assert_called_once_with(
            b"\x89PNG fake image", "image/png"
        )

    def test_identify_accepts_data_url(self) -> None:
        """Test that a data URL prefix is stripped."""
        self.mock_service.identify_plant.return_value = AIAnswer(
            text="Fern", source=AnswerSource.FALLBACK
        )

        response = self.client.post(
            "/ai/identify", json={"image_base64": f"data:image/jpeg;base64,{IMAGE_B64}"}
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["source"], "fallback")
        self.mock_service.identify_plant.assert_called_once_with(
            b"\x89PNG fake image", "image/jpeg"
        )

    def test_identify_accepts_line_wrapped_base64(self) -> None:
        """Test that MIME-style base64 with line breaks is decoded."""
        image = b"\x89PNG" + bytes(range(256)) * 2
        self.mock_service.identify_plant.return_value = AIAnswer(
            text="Fern", source=AnswerSource.LIVE
        )

        response = self.client.post(
            "/ai/identify", json={"image_base64": base64.encodebytes(image).decode()}
        )

        self.assertEqual(response.status_code, 200)
        self.mock_service.identify_plant.assert_called_once_with(image, "image/jpeg")

    def test_identify_empty_image_returns_400(self) -> None:
        """Test that an empty image is rejected."""
        response = self.client.post("/ai/identify", json={"image_base64": ""})

        self.assertEqual(response.status_code, 400)
        self.assertIn("No image provided", response.json()["detail"])
        self.mock_service.identify_plant.assert_not_called()

    def test_identify_invalid_base64_returns_400(self) -> None:
        """Test that undecodable base64 is rejected."""
        response = self.client.post("/ai/identify", json={"image_base64": "not base64!!"})

        self.assertEqual(response.status_code, 400)

    def test_identify_rejects_non_image_mime_type(self) -> None:
        """Test that a non-image MIME type fails validation."""
        response = self.client.post(
            "/ai/identify", json={"image_base64": IMAGE_B64, "mime_type": "text/plain"}
        )

        self.assertEqual(response.status_code, 422)


class TestDiagnoseEndpoint(AIEndpointTestCase):
    """Tests for POST /ai/diagnose."""

    def test_diagnose_success(self) -> None:
        """Test a successful diagnosis."""
        self.mock_service.diagnose_plant.return_value = AIAnswer(
            text="PRIMARY DIAGNOSIS: Overwatering", source=AnswerSource.LIVE
        )

        response = self.client.post("/ai/diagnose", json={"image_base64": IMAGE_B64})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["diagnosis"], "PRIMARY DIAGNOSIS: Overwatering")

    def test_diagnose_missing_image_returns_422(self) -> None:
        """Test that a missing image field fails validation."""
        response = self.client.post("/ai/diagnose", json={})

        self.assertEqual(response.status_code, 422)


class TestTextEndpoints(AIEndpointTestCase):
    """Tests for the text-only AI endpoints."""

    def test_care_advice_echoes_inputs(self) -> None:
        """Test care advice echoes species and defaults the question."""
        self.mock_service.get_care_advice.return_value = AIAnswer(
            text="Water weekly", source=AnswerSource.LIVE
        )

        response = self.client.post("/ai/care-advice", json={"plant_species": "Fern"})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["advice"], "Water weekly")
        self.assertEqual(data["plant_species"], "Fern")
        self.assertEqual(data["question"], "General care requirements")
        self.mock_service.get_care_advice.assert_called_once_with("Fern", None)

    def test_care_advice_requires_species(self) -> None:
        """Test that an empty species fails validation."""
        response = self.client.post("/ai/care-advice", json={"plant_species": ""})

        self.assertEqual(response.status_code, 422)

    def test_care_schedule(self) -> None:
        """Test care schedule echoes inputs."""
        self.mock_service.generate_care_schedule.return_value = AIAnswer(
            text="Weekly plan", source=AnswerSource.LIVE
        )

        response = self.client.post(
            "/ai/care-schedule",
            json={"plant_species": "Fern", "location": "bathroom", "conditions": "humid"},
        )

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["schedule"], "Weekly plan")
        self.assertEqual(data["location"], "bathroom")
        self.assertEqual(data["conditions"], "humid")
        self.mock_service.generate_care_schedule.assert_called_once_with(
            "Fern", "bathroom", "humid"
        )

    def test_care_schedule_defaults_conditions(self) -> None:
        """Test that missing conditions are echoed as standard conditions."""
        self.mock_service.generate_care_schedule.return_value = AIAnswer(
            text="Weekly plan", source=AnswerSource.FALLBACK
        )

        response = self.client.post(
            "/ai/care-schedule", json={"plant_species": "Fern", "location": "bathroom"}
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["conditions"], "Standard conditions")
        self.mock_service.generate_care_schedule.assert_called_once_with(
            "Fern", "bathroom", None
        )

    def test_care_schedule_requires_location(self) -> None:
        """Test that a missing location fails validation."""
        response = self.client.post("/ai/care-schedule", json={"plant_species": "Fern"})

        self.assertEqual(response.status_code, 422)

    def test_growth_prediction(self) -> None:
        """Test growth prediction passes the plant details through."""
        self.mock_service.predict_growth.return_value = AIAnswer(
            text="Two new leaves", source=AnswerSource.FALLBACK
        )

        response = self.client.post(
            "/ai/growth-prediction", json={"species": "Pothos", "age_weeks": 12}
        )

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["prediction"], "Two new leaves")
        self.assertEqual(data["plant_data"]["age_weeks"], 12)
        self.mock_service.predict_growth.assert_called_once_with(
            GrowthInput(species="Pothos", age_weeks=12)
        )

    def test_climate_care(self) -> None:
        """Test climate care echoes plant and weather data."""
        self.mock_service.get_climate_based_care.return_value = AIAnswer(
            text="Move indoors", source=AnswerSource.LIVE
        )

        response = self.client.post(
            "/ai/climate-care",
            json={
                "plant_data": {"species": "Basil", "location": "balcony"},
                "weather_data": {"temperature": "4°C", "forecast": "frost"},
            },
        )

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["recommendations"], "Move indoors")
        self.assertEqual(data["weather_data"]["temperature"], "4°C")

    def test_climate_care_requires_weather(self) -> None:
        """Test that missing weather data fails validation."""
        response = self.client.post(
            "/ai/climate-care", json={"plant_data": {"species": "Basil"}}
        )

        self.assertEqual(response.status_code, 422)


if __name__ == "__main__":
    unittest.main()
