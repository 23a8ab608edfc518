"""Plant AI API module."""

from plantcare.api.ai.endpoints import router

__all__ = ["router"]
