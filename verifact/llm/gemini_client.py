"""Gemini-backed text generation and translation services.

Both services report themselves unavailable when no API key is configured, so
the analysis pipeline degrades to local signals instead of failing. Every SDK
error is re-raised as ServiceError; calls are never retried here because a
failed probe is final for its analysis run.
"""

from typing import Optional

import google.generativeai as genai
from loguru import logger

from verifact.config.prompts import TRANSLATION_PROMPT
from verifact.config.settings import settings
from verifact.llm.services import Availability, ServiceError


def _configure(api_key: Optional[str]) -> bool:
    """Configure the SDK with the key; False when no key is available."""
    if not api_key:
        return False
    genai.configure(api_key=api_key)
    return True


def _response_text(response) -> str:
    """Extract text from a Gemini response, mapping blocked answers to ServiceError."""
    try:
        return response.text
    except ValueError as e:
        # Raised by the SDK when the candidate was blocked or empty
        raise ServiceError(f"Gemini returned no text: {e}") from e


class GeminiSession:
    """
    One chat session with a Gemini model.

    Created per probe invocation and released by the probe on every exit path.

    Attributes:
        model: GenerativeModel the chat runs against
    """

    def __init__(self, model: "genai.GenerativeModel"):
        self.model = model
        self._chat = model.start_chat(history=[])

    @property
    def released(self) -> bool:
        return self._chat is None

    async def prompt(self, text: str) -> str:
        if self._chat is None:
            raise ServiceError("Session already released")
        try:
            response = await self._chat.send_message_async(text)
        except Exception as e:
            raise ServiceError(f"Gemini request failed: {e}") from e
        return _response_text(response)

    def release(self) -> None:
        self._chat = None


class GeminiTextService:
    """
    Google Gemini text generation service.

    Attributes:
        model_name: Gemini model identifier
        temperature: Sampling temperature for every session
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
        temperature: Optional[float] = None,
    ):
        """
        Initialize the service from explicit arguments or settings.

        Args:
            api_key: Gemini API key (defaults to GEMINI_API_KEY)
            model_name: Model identifier (defaults to GEMINI_MODEL)
            temperature: Sampling temperature (defaults to GEMINI_TEMPERATURE)
        """
        self.model_name = model_name or settings.gemini_model
        self.temperature = (
            settings.gemini_temperature if temperature is None else temperature
        )
        self._configured = _configure(api_key or settings.gemini_api_key)
        self.logger = logger.bind(component="GeminiTextService")

        if not self._configured:
            self.logger.warning("GEMINI_API_KEY not set, text generation unavailable")

    async def availability(self, language: str = "en") -> Availability:
        return Availability.AVAILABLE if self._configured else Availability.UNAVAILABLE

    async def create_session(self, system_prompt: Optional[str] = None) -> GeminiSession:
        if not self._configured:
            raise ServiceError("Gemini API key not configured")
        try:
            model = genai.GenerativeModel(
                self.model_name,
                system_instruction=system_prompt,
                generation_config=genai.types.GenerationConfig(
                    temperature=self.temperature,
                ),
            )
            return GeminiSession(model)
        except Exception as e:
            raise ServiceError(f"Could not create Gemini session: {e}") from e


class GeminiTranslator:
    """Translates text between two fixed languages by prompting Gemini."""

    def __init__(
        self,
        model: "genai.GenerativeModel",
        source_language: str,
        target_language: str,
    ):
        self.model = model
        self.source_language = source_language
        self.target_language = target_language

    async def translate(self, text: str) -> str:
        prompt = TRANSLATION_PROMPT.format(
            source_language=self.source_language,
            target_language=self.target_language,
            text=text,
        )
        try:
            response = await self.model.generate_content_async(prompt)
        except Exception as e:
            raise ServiceError(f"Gemini translation failed: {e}") from e
        return _response_text(response).strip()


class GeminiTranslationService:
    """Translation service backed by the Gemini model configured in settings."""

    def __init__(self, api_key: Optional[str] = None, model_name: Optional[str] = None):
        self.model_name = model_name or settings.gemini_model
        self._configured = _configure(api_key or settings.gemini_api_key)

    async def availability(self) -> Availability:
        return Availability.AVAILABLE if self._configured else Availability.UNAVAILABLE

    async def create_translator(
        self, source_language: str, target_language: str
    ) -> GeminiTranslator:
        if not self._configured:
            raise ServiceError("Gemini API key not configured")
        logger.debug(f"Creating translator {source_language} -> {target_language}")
        try:
            model = genai.GenerativeModel(
                self.model_name,
                generation_config=genai.types.GenerationConfig(temperature=0.0),
            )
        except Exception as e:
            raise ServiceError(f"Could not create Gemini translator: {e}") from e
        return GeminiTranslator(model, source_language, target_language)
