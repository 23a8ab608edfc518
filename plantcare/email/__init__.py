"""Outbound email for plant care notifications."""

from plantcare.email.client import EmailClient
from plantcare.email.config import EmailConfig
from plantcare.email.exceptions import EmailClientError, EmailNotConfiguredError
from plantcare.email.templates import EmailMessageContent, build_reminder_email

__all__ = [
    "EmailClient",
    "EmailClientError",
    "EmailConfig",
    "EmailMessageContent",
    "EmailNotConfiguredError",
    "build_reminder_email",
]
