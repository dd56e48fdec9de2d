"""Shared fixtures: in-process fakes for the text generation and translation services."""

import asyncio
from typing import Optional

import pytest

from verifact.llm.services import Availability, ServiceError
from verifact.schemas import DateCandidate, PageMetadata

# Distinctive phrase of each model probe's prompt
PROBE_MARKERS = {
    "credibility": "Analyze this news content for credibility",
    "bias": "political bias",
    "fact_opinion": "Separate facts from opinions",
    "sentiment": "emotional manipulation",
    "key_points": "Extract the main claims",
    "related_searches": "suggest 3-5 search terms",
}


class FakeSession:
    def __init__(self, service: "FakeTextService", system_prompt: Optional[str]):
        self.service = service
        self.system_prompt = system_prompt
        self.released = False

    async def prompt(self, text: str) -> str:
        if self.released:
            raise ServiceError("Session already released")
        self.service.prompts.append(text)
        self.service.in_flight += 1
        self.service.peak_in_flight = max(self.service.peak_in_flight, self.service.in_flight)
        try:
            if self.service.delay:
                await asyncio.sleep(self.service.delay)
        finally:
            self.service.in_flight -= 1
        for probe, error in self.service.failures.items():
            if PROBE_MARKERS[probe] in text:
                raise error
        for probe, answer in self.service.answers.items():
            if PROBE_MARKERS[probe] in text:
                return answer
        return self.service.default_answer

    def release(self) -> None:
        self.released = True


class FakeTextService:
    """Text service double recording prompts and sessions.

    answers / failures are keyed by probe name (see PROBE_MARKERS).
    """

    def __init__(
        self,
        answers: Optional[dict] = None,
        default_answer: str = "CREDIBILITY RATING: HIGH\n\nKEY FINDINGS:\n* cites sources",
        available: bool = True,
        failures: Optional[dict] = None,
        delay: float = 0.0,
    ):
        self.answers = answers or {}
        self.default_answer = default_answer
        self.available = available
        self.failures = failures or {}
        self.delay = delay
        self.prompts: list[str] = []
        self.sessions: list[FakeSession] = []
        self.in_flight = 0
        self.peak_in_flight = 0

    async def availability(self, language: str = "en") -> Availability:
        return Availability.AVAILABLE if self.available else Availability.UNAVAILABLE

    async def create_session(self, system_prompt: Optional[str] = None) -> FakeSession:
        session = FakeSession(self, system_prompt)
        self.sessions.append(session)
        return session


class FakeTranslator:
    def __init__(self, service: "FakeTranslationService", source: str, target: str):
        self.service = service
        self.source = source
        self.target = target

    async def translate(self, text: str) -> str:
        if self.service.fail:
            raise ServiceError("translation backend down")
        self.service.translated.append(text)
        return f"[{self.source}->{self.target}] {text}"


class FakeTranslationService:
    def __init__(self, available: bool = True, fail: bool = False):
        self.available = available
        self.fail = fail
        self.translated: list[str] = []
        self.translators: list[FakeTranslator] = []

    async def availability(self) -> Availability:
        return Availability.AVAILABLE if self.available else Availability.UNAVAILABLE

    async def create_translator(self, source_language: str, target_language: str) -> FakeTranslator:
        translator = FakeTranslator(self, source_language, target_language)
        self.translators.append(translator)
        return translator


@pytest.fixture
def make_text_service():
    """Factory for FakeTextService instances."""
    return FakeTextService


@pytest.fixture
def make_translation_service():
    """Factory for FakeTranslationService instances."""
    return FakeTranslationService


@pytest.fixture
def news_metadata():
    """Metadata of a well-attributed Reuters article."""
    return PageMetadata(
        url="https://www.reuters.com/world/europe/summit-ends-2026-10-01/",
        title="Summit ends without deal | Reuters",
        headline="Summit ends without deal",
        byline="Jane Doe",
        date_candidates=(DateCandidate(datetime_attr="2026-10-01T09:30:00Z", text="October 1, 2026"),),
        has_contact=True,
        has_bio=False,
    )


@pytest.fixture
def article_text():
    return (
        "Leaders left the summit on Tuesday without agreeing on a joint statement, "
        "according to two officials familiar with the talks. The source said talks "
        "would resume next month."
    )
