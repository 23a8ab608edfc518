"""Configuration for the reminder scheduler using pydantic-settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from plantcare.paths import PROJECT_ROOT

_ENV_FILE = PROJECT_ROOT / ".env"


class SchedulerConfig(BaseSettings):
    """Scheduler settings loaded from environment variables with the SCHEDULER_ prefix.

    :param interval_minutes: Minutes between reminder checks; must divide an hour evenly.
    :param item_timeout_seconds: Upper bound on sending one reminder email.
    :param notification_purge_minute: Minute past the hour to purge expired notifications.
    :param email_workers: Threads used to send reminder emails.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCHEDULER_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    interval_minutes: int = Field(default=5, ge=1, le=59, description="Check interval")
    item_timeout_seconds: float = Field(
        default=30,
        gt=0,
        le=600,
        description="Per-reminder email timeout in seconds",
    )
    notification_purge_minute: int = Field(
        default=0,
        ge=0,
        le=59,
        description="Minute of the hour for the notification purge",
    )
    email_workers: int = Field(default=2, ge=1, le=16, description="Email sender threads")

    @field_validator("interval_minutes")
    @classmethod
    def validate_interval_minutes(cls, v: int) -> int:
        """Validate that checks stay evenly spaced across the hour.

        :param v: Minutes between reminder checks.
        :returns: The validated interval.
        :raises ValueError: If the interval does not divide 60.
        """
        if 60 % v != 0:
            raise ValueError(f"interval_minutes must divide 60, got {v}")
        return v


@lru_cache
def get_scheduler_settings() -> SchedulerConfig:
    """Get cached scheduler settings.

    :returns: Configured SchedulerConfig instance.
    """
    return SchedulerConfig()
