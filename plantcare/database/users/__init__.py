"""Database model and operations for users."""

from plantcare.database.users.models import User
from plantcare.database.users.operations import (
    create_user,
    get_user_by_email,
    get_user_by_id,
    update_notification_settings,
)

__all__ = [
    # Models
    "User",
    # Operations
    "create_user",
    "get_user_by_email",
    "get_user_by_id",
    "update_notification_settings",
]
