"""Configuration for the generative AI integration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from plantcare.paths import PROJECT_ROOT

_ENV_FILE = PROJECT_ROOT / ".env"


class AIConfig(BaseSettings):
    """Configuration for the Gemini integration.

    All settings are loaded from environment variables with the GEMINI_ prefix.

    :param api_key: Gemini API key. When unset, static fallback text is served.
    :param model: Model name used for both text and vision requests.
    :param temperature: Sampling temperature.
    :param max_output_tokens: Maximum tokens in a response.
    :param request_timeout: Request timeout in seconds.
    """

    model_config = SettingsConfigDict(
        env_prefix="GEMINI_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        protected_namespaces=(),
    )

    api_key: str | None = Field(default=None, description="Gemini API key")
    model: str = Field(default="gemini-1.5-flash", description="Gemini model name")
    temperature: float = Field(default=0.4, ge=0.0, le=2.0, description="Sampling temperature")
    max_output_tokens: int = Field(
        default=2048,
        ge=64,
        le=8192,
        description="Maximum tokens in a response",
    )
    request_timeout: int = Field(
        default=60,
        ge=5,
        le=300,
        description="Request timeout in seconds",
    )

    @property
    def is_configured(self) -> bool:
        """Check whether a non-empty API key is set."""
        return bool(self.api_key and self.api_key.strip())


@lru_cache
def get_ai_settings() -> AIConfig:
    """Get cached AI settings.

    :returns: Configured AIConfig instance.
    """
    return AIConfig()
