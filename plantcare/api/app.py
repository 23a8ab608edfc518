"""FastAPI application configuration."""

import logging

from fastapi import FastAPI

from plantcare import __version__
from plantcare.api.ai import router as ai_router
from plantcare.api.health import router as health_router
from plantcare.api.models import ErrorResponse
from plantcare.api.scheduler import router as scheduler_router
from plantcare.api.weather import router as weather_router
from plantcare.observability.sentry import init_sentry
from plantcare.utils.logging import configure_logging

configure_logging()
init_sentry()

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    :returns: Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Plant Care API",
        version=__version__,
        responses={
            500: {"model": ErrorResponse, "description": "Internal server error"},
        },
    )

    # Register routers
    application.include_router(health_router)
    application.include_router(ai_router)
    application.include_router(weather_router)
    application.include_router(scheduler_router)

    logger.info("FastAPI application created")

    return application


# Application instance for uvicorn
app = create_app()
