"""Interfaces of the external text services the probes depend on.

The engine only talks to these protocols; verifact.llm.gemini_client provides
the Gemini-backed implementations and tests substitute in-process fakes.
"""

from enum import Enum
from typing import Optional, Protocol


class ServiceError(RuntimeError):
    """A text service call failed."""


class Availability(str, Enum):
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


class TextSession(Protocol):
    """Conversation with the generative model, scoped to one probe call."""

    async def prompt(self, text: str) -> str:
        """Send a prompt and return the model's free-text answer."""
        ...

    def release(self) -> None:
        """Free the session; later prompts fail."""
        ...


class TextGenerationService(Protocol):
    async def availability(self, language: str = "en") -> Availability:
        ...

    async def create_session(self, system_prompt: Optional[str] = None) -> TextSession:
        ...


class Translator(Protocol):
    async def translate(self, text: str) -> str:
        ...


class TranslationService(Protocol):
    async def availability(self) -> Availability:
        ...

    async def create_translator(
        self, source_language: str, target_language: str
    ) -> Translator:
        ...
