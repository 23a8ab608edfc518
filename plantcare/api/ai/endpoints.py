"""API endpoints for plant identification, diagnosis and care advice."""

import base64
import binascii
import logging
import time

from fastapi import APIRouter, Depends, HTTPException, status

from plantcare.ai import GrowthInput, PlantAIService
from plantcare.api.ai.models import (
    CareAdviceRequest,
    CareAdviceResponse,
    CareScheduleRequest,
    CareScheduleResponse,
    ClimateCareRequest,
    ClimateCareResponse,
    DiagnosisResponse,
    GrowthPredictionResponse,
    IdentificationResponse,
    ImageRequest,
)
from plantcare.api.dependencies import get_ai_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["AI"])

DEFAULT_QUESTION = "General care requirements"
DEFAULT_CONDITIONS = "Standard conditions"


def _decode_image(request: ImageRequest) -> bytes:
    """Decode the base64 image from a request.

    :param request: The image request.
    :returns: Raw image bytes.
    :raises HTTPException: If no usable image was provided.
    """
    payload = request.image_base64.strip()
    if payload.startswith("data:") and "," in payload:
        payload = payload.split(",", 1)[1]
    payload = "".join(payload.split())

    try:
        image_bytes = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No image provided: image_base64 is not valid base64",
        ) from e

    if not image_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No image provided",
        )
    return image_bytes


@router.post(
    "/identify",
    response_model=IdentificationResponse,
    summary="Identify a plant from a photo",
)
def identify_plant(
    request: ImageRequest,
    service: PlantAIService = Depends(get_ai_service),
) -> IdentificationResponse:
    """Identify the plant species in an image."""
    start = time.perf_counter()
    image_bytes = _decode_image(request)
    logger.info(f"Identify plant: size={len(image_bytes)}, mime_type={request.mime_type}")

    answer = service.identify_plant(image_bytes, request.mime_type)

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(f"Identify plant complete: source={answer.source}, elapsed={elapsed_ms:.0f}ms")
    return IdentificationResponse(
        identification=answer.text,
        source=answer.source,
        message="Plant identified successfully!",
    )


@router.post(
    "/diagnose",
    response_model=DiagnosisResponse,
    summary="Diagnose plant health from a photo",
)
def diagnose_plant(
    request: ImageRequest,
    service: PlantAIService = Depends(get_ai_service),
) -> DiagnosisResponse:
    """Diagnose visible health issues in a plant image."""
    start = time.perf_counter()
    image_bytes = _decode_image(request)
    logger.info(f"Diagnose plant: size={len(image_bytes)}, mime_type={request.mime_type}")

    answer = service.diagnose_plant(image_bytes, request.mime_type)

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(f"Diagnose plant complete: source={answer.source}, elapsed={elapsed_ms:.0f}ms")
    return DiagnosisResponse(
        diagnosis=answer.text,
        source=answer.source,
        message="Plant health diagnosis completed successfully!",
    )


@router.post(
    "/care-advice",
    response_model=CareAdviceResponse,
    summary="Get care advice for a species",
)
def care_advice(
    request: CareAdviceRequest,
    service: PlantAIService = Depends(get_ai_service),
) -> CareAdviceResponse:
    """Answer a care question about a plant species."""
    logger.info(f"Care advice: species={request.plant_species!r}")
    answer = service.get_care_advice(request.plant_species, request.question)
    return CareAdviceResponse(
        advice=answer.text,
        plant_species=request.plant_species,
        question=request.question or DEFAULT_QUESTION,
        source=answer.source,
        message="Care advice generated successfully!",
    )


@router.post(
    "/care-schedule",
    response_model=CareScheduleResponse,
    summary="Generate a care schedule",
)
def care_schedule(
    request: CareScheduleRequest,
    service: PlantAIService = Depends(get_ai_service),
) -> CareScheduleResponse:
    """Generate a weekly and monthly care schedule for a plant."""
    logger.info(f"Care schedule: species={request.plant_species!r}, location={request.location!r}")
    answer = service.generate_care_schedule(
        request.plant_species, request.location, request.conditions
    )
    return CareScheduleResponse(
        schedule=answer.text,
        plant_species=request.plant_species,
        location=request.location,
        conditions=request.conditions or DEFAULT_CONDITIONS,
        source=answer.source,
        message="Care schedule generated successfully!",
    )


@router.post(
    "/growth-prediction",
    response_model=GrowthPredictionResponse,
    summary="Predict plant growth",
)
def growth_prediction(
    request: GrowthInput,
    service: PlantAIService = Depends(get_ai_service),
) -> GrowthPredictionResponse:
    """Predict growth over the coming weeks from the plant's details."""
    logger.info(f"Growth prediction: species={request.species!r}")
    answer = service.predict_growth(request)
    return GrowthPredictionResponse(
        prediction=answer.text,
        plant_data=request,
        source=answer.source,
        message="Growth prediction generated successfully!",
    )


@router.post(
    "/climate-care",
    response_model=ClimateCareResponse,
    summary="Get climate-based care recommendations",
)
def climate_care(
    request: ClimateCareRequest,
    service: PlantAIService = Depends(get_ai_service),
) -> ClimateCareResponse:
    """Recommend care adjustments for the plant under the given weather."""
    logger.info(f"Climate care: species={request.plant_data.species!r}")
    answer = service.get_climate_based_care(request.plant_data, request.weather_data)
    return ClimateCareResponse(
        recommendations=answer.text,
        plant_data=request.plant_data,
        weather_data=request.weather_data,
        source=answer.source,
        message="Climate-based care recommendations generated successfully!",
    )
