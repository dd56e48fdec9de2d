"""Credibility analysis pipeline: run every probe and merge the results into a Report.

Flow per run:
1. Normalize the raw text (empty text aborts the run with EmptyContentError)
2. Compute the local signals synchronously
3. Launch all model-backed probes and the translation probe concurrently
4. Wait until every probe has settled, never just the first
5. Format successful answers, keep unavailability messages as they are
6. Assemble the immutable Report

This module is the only place that knows the Report's field set: adding a
probe means adding one entry to MODEL_PROBES (and the matching Report field).

Usage:
    from verifact.pipeline import CredibilityAnalyzer

    analyzer = CredibilityAnalyzer()
    report = await analyzer.analyze(text, PageMetadata(url=url))
"""

import asyncio
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional

import structlog

from verifact.config.settings import settings
from verifact.formatting.response_formatter import format_response
from verifact.llm.gemini_client import GeminiTextService, GeminiTranslationService
from verifact.llm.services import (
    Availability,
    TextGenerationService,
    TranslationService,
)
from verifact.pipeline.normalizer import normalize
from verifact.probes.content_signals import detect_language, detect_red_flags
from verifact.probes.model_probes import (
    BiasProbe,
    CredibilityProbe,
    FactOpinionProbe,
    KeyPointsProbe,
    ModelProbe,
    RelatedSearchProbe,
    SentimentProbe,
    TranslationProbe,
)
from verifact.probes.page_signals import check_author_credibility, verify_date
from verifact.probes.source_signals import check_source, rate_publisher
from verifact.schemas import (
    FormattedAnalysis,
    PageMetadata,
    ProbeUnavailable,
    Report,
    Success,
    Unavailable,
)

# Report field -> model-backed probe filling it
MODEL_PROBES: Mapping[str, type[ModelProbe]] = MappingProxyType({
    "credibility": CredibilityProbe,
    "bias": BiasProbe,
    "fact_opinion": FactOpinionProbe,
    "sentiment": SentimentProbe,
    "key_points": KeyPointsProbe,
    "related_searches": RelatedSearchProbe,
})


class ServiceStatus(str, Enum):
    READY = "ready"
    PARTIAL = "partial"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class ServiceCheck:
    """Availability of the external text services before an analysis."""

    text_generation: Availability
    translation: Availability

    @property
    def status(self) -> ServiceStatus:
        available = [
            a is Availability.AVAILABLE for a in (self.text_generation, self.translation)
        ]
        if all(available):
            return ServiceStatus.READY
        if any(available):
            return ServiceStatus.PARTIAL
        return ServiceStatus.UNAVAILABLE


async def _availability_of(check) -> Availability:
    try:
        return await check()
    except Exception:
        return Availability.UNAVAILABLE


async def check_services(
    text_service: TextGenerationService,
    translation_service: Optional[TranslationService],
    language: Optional[str] = None,
) -> ServiceCheck:
    """
    Check both services concurrently; a check that raises counts as unavailable.
    """
    language = language or settings.base_language

    async def text_check():
        return await text_service.availability(language=language)

    async def translation_check():
        if translation_service is None:
            return Availability.UNAVAILABLE
        return await translation_service.availability()

    text_availability, translation_availability = await asyncio.gather(
        _availability_of(text_check),
        _availability_of(translation_check),
    )
    return ServiceCheck(
        text_generation=text_availability,
        translation=translation_availability,
    )


class CredibilityAnalyzer:
    """
    Aggregates local signals and model-backed probes into one Report per run.

    Runs are independent: the analyzer holds no per-run state, so concurrent
    analyze() calls do not coordinate. A failed probe is final for its run;
    callers wanting a retry start a new run.

    Attributes:
        text_service: Generative text service used by the model probes
        translation_service: Translation service for non-base-language articles
        base_language: Report language and translation target
        content_max_chars: Normalizer cap for article text
        probes: Report field -> model probe instance
        translation_probe: Conditional translation probe
    """

    def __init__(
        self,
        text_service: Optional[TextGenerationService] = None,
        translation_service: Optional[TranslationService] = None,
        base_language: Optional[str] = None,
        content_max_chars: Optional[int] = None,
    ) -> None:
        """
        Initialize CredibilityAnalyzer.

        Args:
            text_service: Text service; defaults to GeminiTextService.
            translation_service: Translation service; defaults to
                GeminiTranslationService.
            base_language: Defaults to settings.base_language.
            content_max_chars: Defaults to settings.content_max_chars.
        """
        self.text_service = text_service or GeminiTextService()
        self.translation_service = translation_service or GeminiTranslationService()
        self.base_language = base_language or settings.base_language
        self.content_max_chars = content_max_chars or settings.content_max_chars

        self.probes: dict[str, ModelProbe] = {
            field: probe_cls(self.text_service, language=self.base_language)
            for field, probe_cls in MODEL_PROBES.items()
        }
        self.translation_probe = TranslationProbe(
            self.translation_service, base_language=self.base_language
        )
        self._logger = structlog.get_logger().bind(component="CredibilityAnalyzer")

    async def check_services(self) -> ServiceCheck:
        return await check_services(
            self.text_service, self.translation_service, self.base_language
        )

    async def analyze(
        self,
        raw_text: Optional[str],
        metadata: Optional[PageMetadata] = None,
    ) -> Report:
        """
        Analyze one article and return the complete report.

        Args:
            raw_text: Article text from the scraper
            metadata: Page metadata (hostname, title, dates, byline, ...)

        Returns:
            Report with every field populated

        Raises:
            EmptyContentError: If raw_text is empty or whitespace-only
        """
        content = normalize(raw_text, self.content_max_chars, metadata)
        page = content.metadata

        self._logger.info(
            "analysis_started",
            domain=page.hostname or None,
            chars=len(content.text),
        )

        detected_language = detect_language(content.text, self.base_language)
        local_signals: dict[str, Any] = {
            "source_check": check_source(page.hostname),
            "publisher_rating": rate_publisher(page.hostname),
            "date_verification": verify_date(page),
            "author_credibility": check_author_credibility(page),
            "red_flags": detect_red_flags(content.text),
        }

        fields = list(self.probes)
        settled = await asyncio.gather(
            *(self.probes[field].run(content) for field in fields),
            self.translation_probe.run(content, detected_language),
            return_exceptions=True,
        )

        model_results: dict[str, Any] = {
            field: self._analysis_field(self.probes[field], outcome)
            for field, outcome in zip(fields, settled)
        }
        model_results["translation"] = self._translation_field(settled[-1])

        report = Report(
            domain=page.hostname,
            detected_language=detected_language,
            **model_results,
            **local_signals,
        )

        self._logger.info(
            "analysis_complete",
            domain=page.hostname or None,
            language=detected_language,
            unavailable=report.unavailable_probes(),
            red_flags=len(report.red_flags),
        )
        return report

    def _settle(self, probe_name: str, outcome: Any) -> Success | Unavailable:
        """Turn a gathered outcome into a ProbeResult; probes should never raise."""
        if isinstance(outcome, (Success, Unavailable)):
            return outcome
        if isinstance(outcome, Exception):
            self._logger.error("probe_raised", probe=probe_name, error=str(outcome))
            return Unavailable(str(outcome) or type(outcome).__name__)
        if isinstance(outcome, BaseException):
            raise outcome
        return Unavailable(f"unexpected probe result {type(outcome).__name__}")

    def _analysis_field(
        self, probe: ModelProbe, outcome: Any
    ) -> FormattedAnalysis | ProbeUnavailable:
        result = self._settle(probe.name, outcome)
        if isinstance(result, Unavailable):
            return ProbeUnavailable(
                probe=probe.name,
                reason=result.reason,
                message=probe.unavailable_message(result.reason),
            )
        return FormattedAnalysis(
            probe=probe.name,
            blocks=format_response(result.value),
            raw_text=result.value,
        )

    def _translation_field(self, outcome: Any):
        probe = self.translation_probe
        result = self._settle(probe.name, outcome)
        if isinstance(result, Unavailable):
            return ProbeUnavailable(
                probe=probe.name,
                reason=result.reason,
                message=probe.unavailable_message(result.reason),
            )
        return result.value
