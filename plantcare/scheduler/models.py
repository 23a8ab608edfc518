"""Result and status models for the reminder scheduler."""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class ReminderCheckResult:
    """Statistics from one reminder check."""

    found: int = 0
    processed: int = 0
    errors: int = 0
    emails_sent: int = 0
    notifications_created: int = 0
    duration_ms: float = 0.0
    error_messages: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serialisable dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class ReminderOutcome:
    """What happened while processing a single reminder."""

    email_sent: bool
    notification_created: bool


@dataclass(frozen=True)
class SchedulerStatus:
    """Point-in-time scheduler status for this process."""

    is_processing: bool
    last_execution: datetime | None
    execution_count: int
    error_count: int
    uptime_seconds: float
