"""Reminder scheduler API module."""

from plantcare.api.scheduler.endpoints import router

__all__ = ["router"]
