"""Custom exceptions for the email module."""


class EmailClientError(Exception):
    """Raised when an email cannot be delivered."""


class EmailNotConfiguredError(EmailClientError):
    """Raised when no SMTP host is configured."""

    def __init__(self) -> None:
        """Initialise with a standard message."""
        super().__init__("Email not configured. Set EMAIL_HOST environment variable.")
