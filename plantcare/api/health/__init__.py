"""Health check API module."""

from plantcare.api.health.endpoints import router

__all__ = ["router"]
