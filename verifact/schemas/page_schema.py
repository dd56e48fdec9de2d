"""Page metadata and bounded content handed to the analysis pipeline.

The scraper collaborator supplies raw text plus PageMetadata; the normalizer
turns them into an immutable Content owned by one analysis run.
"""

from typing import Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DateCandidate(BaseModel):
    """One date-bearing location on the page, in document order.

    Attributes:
        datetime_attr: Machine-readable value (e.g. a <time datetime=...> attribute)
        text: Visible text of the element
    """

    model_config = ConfigDict(frozen=True)

    datetime_attr: Optional[str] = None
    text: Optional[str] = None

    def values(self) -> tuple[str, ...]:
        """Non-empty candidate strings, machine-readable value first."""
        return tuple(
            v.strip() for v in (self.datetime_attr, self.text) if v and v.strip()
        )


class PageMetadata(BaseModel):
    """Structural metadata of the page the article came from.

    ``hostname`` is derived from ``url`` when not given explicitly and is
    always lowercase.
    """

    model_config = ConfigDict(frozen=True)

    url: Optional[str] = Field(default=None, description="Page URL")
    hostname: str = Field(default="", description="Lowercase page hostname")
    title: str = Field(default="", description="Document title")
    headline: Optional[str] = Field(default=None, description="Main headline text")
    byline: Optional[str] = Field(default=None, description="Author byline text")
    date_candidates: tuple[DateCandidate, ...] = Field(
        default=(),
        description="Date-bearing elements in fixed scan order",
    )
    has_contact: bool = Field(default=False, description="Page offers an author contact link")
    has_bio: bool = Field(default=False, description="Page carries an author biography")

    @model_validator(mode="before")
    @classmethod
    def _derive_hostname(cls, data):
        if isinstance(data, dict):
            hostname = data.get("hostname") or ""
            if not hostname and data.get("url"):
                hostname = urlparse(data["url"]).hostname or ""
            data = {**data, "hostname": hostname.strip().lower()}
        return data

    @property
    def display_headline(self) -> str:
        """Headline text, falling back to the document title."""
        return (self.headline or "").strip() or self.title


class Content(BaseModel):
    """Normalized article text bounded to the analysis cap."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1)
    metadata: PageMetadata = Field(default_factory=PageMetadata)

    def excerpt(self, limit: Optional[int]) -> str:
        """Leading slice of the text, or all of it when limit is None."""
        return self.text if limit is None else self.text[:limit]
