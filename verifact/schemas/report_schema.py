"""The merged credibility report produced by one analysis run."""

from datetime import datetime, timezone
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from verifact.schemas.block_schema import FormattedBlock
from verifact.schemas.signal_schema import (
    AuthorCredibility,
    DateVerification,
    PublisherRating,
    SourceTrust,
)


class FormattedAnalysis(BaseModel):
    """Successful model-backed probe answer, structured for display."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["analysis"] = "analysis"
    probe: str
    blocks: tuple[FormattedBlock, ...]
    raw_text: str


class ProbeUnavailable(BaseModel):
    """Placeholder for a model-backed probe that produced no value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unavailable"] = "unavailable"
    probe: str
    reason: str
    message: str = Field(..., min_length=1)


class Translation(BaseModel):
    """Translated article text; ``text`` is None when no translation was needed."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["translation"] = "translation"
    source_language: str
    target_language: str
    text: Optional[str] = None

    @property
    def translated(self) -> bool:
        return self.text is not None


AnalysisField = Annotated[
    Union[FormattedAnalysis, ProbeUnavailable], Field(discriminator="kind")
]
TranslationField = Annotated[
    Union[Translation, ProbeUnavailable], Field(discriminator="kind")
]


class Report(BaseModel):
    """Complete, immutable aggregation of every probe outcome for one run.

    Model-backed fields hold either a FormattedAnalysis or a ProbeUnavailable;
    local signal fields are always populated.
    """

    model_config = ConfigDict(frozen=True)

    domain: str
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    detected_language: str

    # Model-backed probes
    credibility: AnalysisField
    bias: AnalysisField
    fact_opinion: AnalysisField
    sentiment: AnalysisField
    key_points: AnalysisField
    related_searches: AnalysisField
    translation: TranslationField

    # Local probes
    source_check: SourceTrust
    publisher_rating: PublisherRating
    date_verification: DateVerification
    author_credibility: AuthorCredibility
    red_flags: tuple[str, ...] = ()

    def unavailable_probes(self) -> list[str]:
        """Names of report fields whose probe did not produce a value."""
        return [
            name
            for name in type(self).model_fields
            if isinstance(getattr(self, name), ProbeUnavailable)
        ]
