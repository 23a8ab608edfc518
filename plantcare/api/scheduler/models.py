"""Pydantic models for reminder scheduler endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field


class SchedulerStatusResponse(BaseModel):
    """Response model for scheduler status."""

    is_processing: bool = Field(..., description="Whether a check is running")
    last_execution: datetime | None = Field(None, description="When the last check started")
    execution_count: int = Field(..., description="Checks started since process start")
    error_count: int = Field(..., description="Failed checks since the last reset")
    uptime_seconds: float = Field(..., description="Seconds since the scheduler was created")


class ReminderCheckResponse(BaseModel):
    """Response model for a manual reminder check."""

    found: int = Field(..., description="Due reminders found")
    processed: int = Field(..., description="Reminders processed successfully")
    errors: int = Field(..., description="Reminders that failed")
    emails_sent: int = Field(..., description="Reminder emails sent")
    notifications_created: int = Field(..., description="In-app notifications created")
    duration_ms: float = Field(..., description="Check duration in milliseconds")


class ResetErrorsResponse(BaseModel):
    """Response model for resetting the error counter."""

    error_count: int = Field(..., description="Error count after the reset")
    message: str = Field(..., description="Status message")
