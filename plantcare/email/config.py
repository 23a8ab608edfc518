"""Configuration for outbound email using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from plantcare.paths import PROJECT_ROOT

_ENV_FILE = PROJECT_ROOT / ".env"


class EmailConfig(BaseSettings):
    """SMTP settings loaded from environment variables with the EMAIL_ prefix.

    :param host: SMTP server host. Email is disabled when unset.
    :param port: SMTP server port.
    :param user: Login user name.
    :param password: Login password.
    :param from_address: Sender address. Defaults to the login user.
    :param use_tls: Upgrade the connection with STARTTLS.
    :param timeout: Connection timeout in seconds.
    """

    model_config = SettingsConfigDict(
        env_prefix="EMAIL_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    host: str | None = Field(default=None, description="SMTP host")
    port: int = Field(default=587, ge=1, le=65535, description="SMTP port")
    user: str | None = Field(default=None, description="SMTP login user")
    password: str | None = Field(default=None, description="SMTP login password")
    from_address: str | None = Field(default=None, description="Sender address")
    use_tls: bool = Field(default=True, description="Use STARTTLS")
    timeout: int = Field(default=30, ge=1, le=300, description="SMTP timeout in seconds")

    @property
    def is_configured(self) -> bool:
        """Check whether an SMTP host is set."""
        return bool(self.host)

    @property
    def sender(self) -> str | None:
        """Address used in the From header."""
        return self.from_address or self.user


@lru_cache
def get_email_settings() -> EmailConfig:
    """Get cached email settings.

    :returns: Configured EmailConfig instance.
    """
    return EmailConfig()
