"""Gemini client for text and vision requests."""

from __future__ import annotations

import logging
import time

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from plantcare.ai.config import AIConfig, get_ai_settings
from plantcare.ai.exceptions import AIClientError, AINotConfiguredError

logger = logging.getLogger(__name__)

# Maximum length of prompt to show in logs
LOG_PROMPT_MAX_LENGTH = 80


def _preview(prompt: str) -> str:
    if len(prompt) > LOG_PROMPT_MAX_LENGTH:
        return prompt[:LOG_PROMPT_MAX_LENGTH] + "..."
    return prompt


class GeminiClient:
    """Thin client over the google-genai SDK.

    Returns the model's free-text answer; every SDK or transport failure,
    and any empty answer, is raised as AIClientError.
    """

    def __init__(self, config: AIConfig | None = None) -> None:
        """Initialise the Gemini client.

        :param config: AI settings. Defaults to the cached environment settings.
        :raises AINotConfiguredError: If no API key is configured.
        """
        self._config = config or get_ai_settings()
        if not self._config.is_configured:
            raise AINotConfiguredError()

        self._client = genai.Client(
            api_key=self._config.api_key,
            http_options=types.HttpOptions(timeout=self._config.request_timeout * 1000),
        )
        logger.debug(f"Initialised GeminiClient: model={self._config.model}")

    @property
    def model(self) -> str:
        """Get the configured model name."""
        return self._config.model

    def generate_text(self, prompt: str) -> str:
        """Generate a text answer for a prompt.

        :param prompt: The prompt text.
        :returns: The model's answer.
        :raises AIClientError: If the request fails or the answer is empty.
        """
        return self._generate([prompt], prompt)

    def generate_with_image(
        self,
        prompt: str,
        image_bytes: bytes,
        mime_type: str = "image/jpeg",
    ) -> str:
        """Generate a text answer for a prompt about an image.

        :param prompt: The prompt text.
        :param image_bytes: Raw image bytes.
        :param mime_type: Image MIME type.
        :returns: The model's answer.
        :raises AIClientError: If the request fails or the answer is empty.
        """
        image_part = types.Part.from_bytes(data=image_bytes, mime_type=mime_type)
        return self._generate([prompt, image_part], prompt)

    def _generate(self, contents: list[str | types.Part], prompt: str) -> str:
        start = time.perf_counter()
        logger.info(f"Calling Gemini: model={self._config.model}, prompt={_preview(prompt)!r}")

        try:
            response = self._client.models.generate_content(
                model=self._config.model,
                contents=contents,
                config=types.GenerateContentConfig(
                    temperature=self._config.temperature,
                    max_output_tokens=self._config.max_output_tokens,
                ),
            )
        except genai_errors.APIError as e:
            raise AIClientError(f"Gemini API error: {e}") from e
        except httpx.TimeoutException as e:
            raise AIClientError(
                f"Gemini request timed out after {self._config.request_timeout}s"
            ) from e
        except httpx.HTTPError as e:
            raise AIClientError(f"Gemini request failed: {e}") from e

        text = response.text
        if not text or not text.strip():
            raise AIClientError("Gemini returned an empty response")

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"Gemini call complete: chars={len(text)}, elapsed={elapsed_ms:.0f}ms")
        return text.strip()
