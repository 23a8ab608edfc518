"""API endpoints for monitoring and triggering the reminder scheduler."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from plantcare.api.dependencies import get_scheduler
from plantcare.api.models import ErrorResponse
from plantcare.api.scheduler.models import (
    ReminderCheckResponse,
    ResetErrorsResponse,
    SchedulerStatusResponse,
)
from plantcare.scheduler import ReminderScheduler

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reminders/scheduler", tags=["Scheduler"])


@router.get("/status", response_model=SchedulerStatusResponse, summary="Scheduler status")
def scheduler_status(
    scheduler: ReminderScheduler = Depends(get_scheduler),
) -> SchedulerStatusResponse:
    """Get the reminder scheduler status for this process."""
    current = scheduler.get_status()
    return SchedulerStatusResponse(
        is_processing=current.is_processing,
        last_execution=current.last_execution,
        execution_count=current.execution_count,
        error_count=current.error_count,
        uptime_seconds=current.uptime_seconds,
    )


@router.post(
    "/check",
    response_model=ReminderCheckResponse,
    summary="Run a reminder check now",
    responses={409: {"model": ErrorResponse, "description": "Check already in progress"}},
)
def trigger_check(
    scheduler: ReminderScheduler = Depends(get_scheduler),
) -> ReminderCheckResponse:
    """Process due reminders immediately."""
    result = scheduler.manual_check()
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Reminder check already in progress",
        )

    return ReminderCheckResponse(
        found=result.found,
        processed=result.processed,
        errors=result.errors,
        emails_sent=result.emails_sent,
        notifications_created=result.notifications_created,
        duration_ms=result.duration_ms,
    )


@router.post(
    "/reset-errors",
    response_model=ResetErrorsResponse,
    summary="Reset the scheduler error count",
)
def reset_errors(
    scheduler: ReminderScheduler = Depends(get_scheduler),
) -> ResetErrorsResponse:
    """Reset the scheduler error counter."""
    scheduler.reset_error_count()
    return ResetErrorsResponse(error_count=scheduler.error_count, message="Error count reset")
