from typing import Any, Dict, Optional, Protocol

import google.generativeai as genai
import openai

from flashgen.infrastructure.config import Settings
from flashgen.domain.errors import AIClientError, ConfigurationError, MissingCredentialError
from fg_utils.logger_utils import logger


class TextGenerator(Protocol):
    """Prompt in, text out. Raises AIClientError when the provider fails."""

    def generate(self, prompt: str) -> str:
        ...


class GeminiTextGenerator:
    def __init__(self, api_key: str, model: str = "gemini-2.5-flash"):
        self.api_key = api_key
        self.model = model
        self._initialized = False

    def _ensure_initialized(self) -> None:
        if self._initialized:
            return
        if not self.api_key:
            raise MissingCredentialError("Gemini API key is not configured.")
        genai.configure(api_key=self.api_key)
        self._initialized = True

    def generate(self, prompt: str) -> str:
        """
        Call Gemini once and return the raw reply text.

        No streaming and no retry: a failure is reported to the caller as is.
        """
        self._ensure_initialized()

        try:
            model = genai.GenerativeModel(self.model)
            logger.info(f"→ Sending prompt to {self.model} ({len(prompt)} chars)")
            response = model.generate_content(prompt)
            return (response.text or "").strip()

        except Exception as e:
            logger.error(f"{self.model} call failed: {e}")
            raise AIClientError(
                f"The AI service failed to process the request: {e}"
            ) from e


class OpenAITextGenerator:
    def __init__(self, api_key: str, model: str = "gpt-4o-mini", base_url: Optional[str] = None):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url or None
        self._client: Optional[openai.OpenAI] = None

    def _ensure_initialized(self) -> openai.OpenAI:
        if self._client is not None:
            return self._client
        if not self.api_key:
            raise MissingCredentialError("OpenAI API key is not configured.")

        client_args: Dict[str, Any] = {"api_key": self.api_key}
        if self.base_url:
            client_args["base_url"] = self.base_url
        self._client = openai.OpenAI(**client_args)
        return self._client

    def generate(self, prompt: str) -> str:
        client = self._ensure_initialized()

        try:
            logger.info(f"→ Sending prompt to {self.model} ({len(prompt)} chars)")
            response = client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
            )
            return (response.choices[0].message.content or "").strip()

        except Exception as e:
            logger.error(f"{self.model} call failed: {e}")
            raise AIClientError(
                f"The AI service failed to process the request: {e}"
            ) from e


def make_text_generator(settings: Settings) -> TextGenerator:
    """Build the generator for settings.FG_PROVIDER using its credential."""
    provider = settings.FG_PROVIDER
    if provider == "gemini":
        logger.info(f"Using Gemini provider (model={settings.FG_GEMINI_MODEL})")
        return GeminiTextGenerator(settings.active_api_key(), model=settings.FG_GEMINI_MODEL)
    if provider == "openai":
        logger.info(f"Using OpenAI provider (model={settings.FG_OPENAI_MODEL})")
        return OpenAITextGenerator(
            settings.active_api_key(),
            model=settings.FG_OPENAI_MODEL,
            base_url=settings.FG_BASE_URL,
        )
    raise ConfigurationError(f"Unsupported AI provider: {provider}")
