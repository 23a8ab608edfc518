"""Pydantic models for plant AI endpoints."""

from pydantic import BaseModel, Field

from plantcare.ai import AnswerSource, ClimatePlantInput, ClimateWeatherInput, GrowthInput

DEFAULT_MIME_TYPE = "image/jpeg"


class ImageRequest(BaseModel):
    """Request model for image-based endpoints."""

    image_base64: str = Field(..., description="Base64-encoded image (data URLs accepted)")
    mime_type: str = Field(
        DEFAULT_MIME_TYPE,
        pattern=r"^image/[a-z0-9.+-]+$",
        description="Image MIME type",
    )


class CareAdviceRequest(BaseModel):
    """Request model for care advice."""

    plant_species: str = Field(..., min_length=1, description="Plant species")
    question: str | None = Field(None, description="Specific care question")


class CareScheduleRequest(BaseModel):
    """Request model for care schedule generation."""

    plant_species: str = Field(..., min_length=1, description="Plant species")
    location: str = Field(..., min_length=1, description="Where the plant is kept")
    conditions: str | None = Field(None, description="Current growing conditions")


class ClimateCareRequest(BaseModel):
    """Request model for climate-based care recommendations."""

    plant_data: ClimatePlantInput = Field(..., description="Plant details")
    weather_data: ClimateWeatherInput = Field(..., description="Weather details")


class AIResponse(BaseModel):
    """Fields shared by all AI responses."""

    success: bool = Field(True, description="Whether an answer was produced")
    source: AnswerSource = Field(..., description="Live model answer or static fallback")
    message: str = Field(..., description="Human-readable status message")


class IdentificationResponse(AIResponse):
    """Response model for plant identification."""

    identification: str = Field(..., description="Species name and description")


class DiagnosisResponse(AIResponse):
    """Response model for plant diagnosis."""

    diagnosis: str = Field(..., description="Sectioned health diagnosis")


class CareAdviceResponse(AIResponse):
    """Response model for care advice."""

    advice: str = Field(..., description="Care advice")
    plant_species: str = Field(..., description="Plant species")
    question: str = Field(..., description="Question that was answered")


class CareScheduleResponse(AIResponse):
    """Response model for care schedule generation."""

    schedule: str = Field(..., description="Generated care schedule")
    plant_species: str = Field(..., description="Plant species")
    location: str = Field(..., description="Plant location")
    conditions: str = Field(..., description="Conditions used")


class GrowthPredictionResponse(AIResponse):
    """Response model for growth prediction."""

    prediction: str = Field(..., description="Growth prediction")
    plant_data: GrowthInput = Field(..., description="Plant details used")


class ClimateCareResponse(AIResponse):
    """Response model for climate-based care."""

    recommendations: str = Field(..., description="Climate-based care recommendations")
    plant_data: ClimatePlantInput = Field(..., description="Plant details used")
    weather_data: ClimateWeatherInput = Field(..., description="Weather details used")
