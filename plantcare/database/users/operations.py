"""Database operations for users."""

from __future__ import annotations

import logging
import uuid as uuid_module
from typing import Any

from sqlalchemy.orm import Session

from plantcare.database.users.models import NOTIFICATION_SETTING_FIELDS, User

logger = logging.getLogger(__name__)


def create_user(
    session: Session,
    name: str,
    email: str,
    password_hash: str,
) -> User:
    """Create a new user.

    :param session: Database session.
    :param name: Display name.
    :param email: Email address (stored lowercased).
    :param password_hash: Pre-hashed password from the auth layer.
    :returns: The created user.
    """
    user = User(
        name=name,
        email=email.strip().lower(),
        password_hash=password_hash,
    )
    session.add(user)
    session.flush()
    logger.info(f"Created user: id={user.id}")
    return user


def get_user_by_id(session: Session, user_id: uuid_module.UUID) -> User | None:
    """Get a user by ID.

    :param session: Database session.
    :param user_id: User ID.
    :returns: The user or None if not found.
    """
    return session.query(User).filter(User.id == user_id).first()


def get_user_by_email(session: Session, email: str) -> User | None:
    """Get a user by email address (case-insensitive).

    :param session: Database session.
    :param email: Email address.
    :returns: The user or None if not found.
    """
    return session.query(User).filter(User.email == email.strip().lower()).first()


def update_notification_settings(
    session: Session,
    user: User,
    settings: dict[str, Any],
) -> User:
    """Apply a partial update to a user's notification settings.

    :param session: Database session.
    :param user: The user to update.
    :param settings: Mapping of setting name to boolean value.
    :returns: The updated user.
    :raises ValueError: If an unknown setting is provided or a value is not boolean.
    """
    unknown = set(settings) - NOTIFICATION_SETTING_FIELDS
    if unknown:
        raise ValueError(f"Unknown notification settings: {', '.join(sorted(unknown))}")

    for name, value in settings.items():
        if not isinstance(value, bool):
            raise ValueError(f"Notification setting {name} must be a boolean")
        setattr(user, name, value)

    session.flush()
    logger.info(f"Updated notification settings: user_id={user.id}, fields={sorted(settings)}")
    return user
