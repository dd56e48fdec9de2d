"""Schemas for the locally computed credibility signals.

These values come from pure lookups and heuristics over page metadata and
article text, so every analysis run populates all of them.
"""

import datetime as dt
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TrustStatus(str, Enum):
    """Whether the page's domain is on the trusted-source allowlist."""

    TRUSTED = "Trusted"
    UNKNOWN = "Unknown"

    @property
    def label(self) -> str:
        if self is TrustStatus.TRUSTED:
            return "Trusted Source"
        return "Unknown Source - Verify Independently"


class SourceTrust(BaseModel):
    """Allowlist membership of the page's domain."""

    model_config = ConfigDict(frozen=True)

    domain: str
    is_trusted: bool
    status: TrustStatus


class Bias(str, Enum):
    """Political leaning of a publisher on a five-point scale."""

    LEFT = "Left"
    CENTER_LEFT = "Center-Left"
    CENTER = "Center"
    CENTER_RIGHT = "Center-Right"
    RIGHT = "Right"
    UNKNOWN = "Unknown"


class PublisherRating(BaseModel):
    """Static reputation of a known publisher.

    Unrated domains carry "Unknown" in rating, type and bias.
    """

    model_config = ConfigDict(frozen=True)

    domain: str
    rating: str = Field(..., description="Letter grade such as A+, or Unknown")
    type: str = Field(..., description="Publication type, or Unknown")
    bias: Bias
    is_trusted: bool


class DateStatus(str, Enum):
    """Freshness of the article's publication date."""

    RECENT = "Recent"
    POTENTIALLY_OUTDATED = "Potentially Outdated"
    NOT_FOUND = "Date not found"


class DateVerification(BaseModel):
    """Publication date found on the page and its age."""

    model_config = ConfigDict(frozen=True)

    status: DateStatus
    date: Optional[dt.date] = None
    days_old: Optional[int] = Field(default=None, ge=0)

    @property
    def is_outdated(self) -> bool:
        return self.status is DateStatus.POTENTIALLY_OUTDATED


class CredibilityLevel(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class AuthorIndicators(BaseModel):
    model_config = ConfigDict(frozen=True)

    has_author: bool
    has_contact: bool
    has_bio: bool


class AuthorCredibility(BaseModel):
    """Presence-based author credibility score (0-7)."""

    model_config = ConfigDict(frozen=True)

    author: str
    score: int = Field(..., ge=0, le=7)
    status: CredibilityLevel
    indicators: AuthorIndicators
