"""Model-backed credibility probes.

Each probe checks service availability, builds its prompt from a bounded
slice of the article, runs it in a dedicated session and returns the model's
raw answer. Slice lengths differ per probe to bound cost and latency.

Failure handling: a probe never raises. Unavailability, service errors, any
other exception and blank answers all resolve to ``Unavailable(reason)``.
Sessions are released on every exit path before the probe resolves.

Usage:
    probe = BiasProbe(text_service)
    result = await probe.run(content)
    if result.ok:
        print(result.value)
"""

from typing import Optional

import structlog

from verifact.config.prompts import (
    BIAS_PROMPT,
    CREDIBILITY_PROMPT,
    FACT_CHECKER_SYSTEM_PROMPT,
    FACT_OPINION_PROMPT,
    KEY_POINTS_PROMPT,
    RELATED_SEARCH_PROMPT,
    SENTIMENT_PROMPT,
)
from verifact.config.settings import settings
from verifact.llm.services import (
    Availability,
    TextGenerationService,
    TranslationService,
)
from verifact.schemas import Content, ProbeResult, Success, Translation, Unavailable

TRANSLATION_CHAR_LIMIT = 1000


def _describe(error: Exception) -> str:
    return str(error) or type(error).__name__


class ModelProbe:
    """
    Base class for probes answered by the generative text service.

    Subclasses set the class attributes and, when the prompt needs more than
    the content slice, override build_prompt().

    Attributes:
        name: Report field the probe fills
        label: Human-readable probe title used in unavailability messages
        template: Prompt template with a {content} placeholder
        char_limit: Characters of content sent to the model (None = all)
        system_prompt: Optional system instruction for the session
    """

    name: str = ""
    label: str = ""
    template: str = "{content}"
    char_limit: Optional[int] = None
    system_prompt: Optional[str] = None

    def __init__(self, service: TextGenerationService, language: Optional[str] = None):
        self.service = service
        self.language = language or settings.base_language
        self._logger = structlog.get_logger().bind(component=type(self).__name__)

    def build_prompt(self, content: Content) -> str:
        return self.template.format(content=content.excerpt(self.char_limit))

    def unavailable_message(self, reason: str) -> str:
        return f"{self.label} unavailable: {reason}"

    async def run(self, content: Content) -> ProbeResult[str]:
        """Run the probe; always resolves to Success or Unavailable."""
        try:
            availability = await self.service.availability(language=self.language)
            if availability is not Availability.AVAILABLE:
                return self._unavailable("language model service not available")

            prompt = self.build_prompt(content)
            session = await self.service.create_session(system_prompt=self.system_prompt)
            try:
                answer = await session.prompt(prompt)
            finally:
                session.release()
        except Exception as e:
            return self._unavailable(_describe(e))

        if not answer or not answer.strip():
            return self._unavailable("empty response from language model")

        self._logger.debug("probe_succeeded", probe=self.name, chars=len(answer))
        return Success(answer)

    def _unavailable(self, reason: str) -> Unavailable:
        self._logger.warning("probe_unavailable", probe=self.name, reason=reason)
        return Unavailable(reason)


class CredibilityProbe(ModelProbe):
    """Overall credibility rating with structured findings."""

    name = "credibility"
    label = "Credibility analysis"
    template = CREDIBILITY_PROMPT
    system_prompt = FACT_CHECKER_SYSTEM_PROMPT


class BiasProbe(ModelProbe):
    """Political bias on a five-point left-right scale."""

    name = "bias"
    label = "Bias analysis"
    template = BIAS_PROMPT
    char_limit = 1000


class FactOpinionProbe(ModelProbe):
    name = "fact_opinion"
    label = "Fact/Opinion analysis"
    template = FACT_OPINION_PROMPT
    char_limit = 1000


class SentimentProbe(ModelProbe):
    """Emotional manipulation in the headline and opening of the article."""

    name = "sentiment"
    label = "Sentiment analysis"
    template = SENTIMENT_PROMPT
    char_limit = 500

    def build_prompt(self, content: Content) -> str:
        return self.template.format(
            headline=content.metadata.display_headline,
            content=content.excerpt(self.char_limit),
        )


class KeyPointsProbe(ModelProbe):
    name = "key_points"
    label = "Key points extraction"
    template = KEY_POINTS_PROMPT
    char_limit = 1500


class RelatedSearchProbe(ModelProbe):
    """Search terms for finding related coverage elsewhere."""

    name = "related_searches"
    label = "Related articles search"
    template = RELATED_SEARCH_PROMPT
    char_limit = 500


class TranslationProbe:
    """
    Conditional translation of non-base-language articles.

    Translates only when the detected language differs from the base language
    and the translation service is available; otherwise resolves to a
    Translation with no text, which is not an error.
    """

    name = "translation"
    label = "Translation"
    char_limit = TRANSLATION_CHAR_LIMIT

    def __init__(
        self,
        service: Optional[TranslationService],
        base_language: Optional[str] = None,
    ):
        self.service = service
        self.base_language = base_language or settings.base_language
        self._logger = structlog.get_logger().bind(component="TranslationProbe")

    def unavailable_message(self, reason: str) -> str:
        return f"{self.label} unavailable: {reason}"

    async def run(self, content: Content, detected_language: str) -> ProbeResult[Translation]:
        not_needed = Translation(
            source_language=detected_language,
            target_language=self.base_language,
        )
        if detected_language == self.base_language or self.service is None:
            return Success(not_needed)

        try:
            if await self.service.availability() is not Availability.AVAILABLE:
                self._logger.info("translation_skipped", reason="service not available")
                return Success(not_needed)

            translator = await self.service.create_translator(
                source_language=detected_language,
                target_language=self.base_language,
            )
            text = await translator.translate(content.excerpt(self.char_limit))
        except Exception as e:
            reason = _describe(e)
            self._logger.warning("probe_unavailable", probe=self.name, reason=reason)
            return Unavailable(reason)

        return Success(not_needed.model_copy(update={"text": text}))
