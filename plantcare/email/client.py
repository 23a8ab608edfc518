"""SMTP client for outbound notification email."""

import logging
import smtplib
import time
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from plantcare.email.config import EmailConfig, get_email_settings
from plantcare.email.exceptions import EmailClientError, EmailNotConfiguredError
from plantcare.email.templates import EmailMessageContent, build_reminder_email

logger = logging.getLogger(__name__)


class EmailClient:
    """Sends multipart HTML/plain text email over SMTP."""

    def __init__(self, config: EmailConfig | None = None) -> None:
        """Initialise the email client.

        :param config: Email settings. Defaults to the cached environment settings.
        """
        self._config = config or get_email_settings()

    @property
    def is_configured(self) -> bool:
        """Check whether email can be sent."""
        return self._config.is_configured

    def _build_message(self, to: str, content: EmailMessageContent) -> MIMEMultipart:
        message = MIMEMultipart("alternative")
        message["Subject"] = content.subject
        message["From"] = self._config.sender or ""
        message["To"] = to
        message.attach(MIMEText(content.text, "plain", "utf-8"))
        message.attach(MIMEText(content.html, "html", "utf-8"))
        return message

    def send(self, to: str, content: EmailMessageContent) -> None:
        """Send an email.

        :param to: Recipient address.
        :param content: Rendered message.
        :raises EmailNotConfiguredError: If no SMTP host is configured.
        :raises EmailClientError: If the SMTP exchange fails.
        """
        if not self._config.is_configured:
            raise EmailNotConfiguredError()

        message = self._build_message(to, content)
        start = time.perf_counter()
        try:
            with smtplib.SMTP(
                self._config.host, self._config.port, timeout=self._config.timeout
            ) as server:
                if self._config.use_tls:
                    server.starttls()
                if self._config.user and self._config.password:
                    server.login(self._config.user, self._config.password)
                server.sendmail(self._config.sender or "", [to], message.as_string())
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send email: to={to}, error={e}")
            raise EmailClientError(f"Failed to send email to {to}: {e}") from e

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"Email sent: to={to}, subject={content.subject!r}, elapsed={elapsed_ms:.0f}ms")

    def send_reminder_email(  # noqa: PLR0913 - one argument per template field
        self,
        to: str,
        user_name: str,
        plant_name: str,
        title: str,
        description: str | None = None,
    ) -> None:
        """Render and send a plant care reminder email.

        :param to: Recipient address.
        :param user_name: Recipient display name.
        :param plant_name: Plant name.
        :param title: Reminder title.
        :param description: Optional reminder description.
        :raises EmailClientError: If the email cannot be sent.
        """
        content = build_reminder_email(user_name, plant_name, title, description)
        self.send(to, content)
