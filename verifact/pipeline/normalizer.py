"""Bound raw extracted text to the analysis length."""

from typing import Optional

from verifact.config.settings import settings
from verifact.schemas import Content, PageMetadata


class EmptyContentError(ValueError):
    """Raised when there is no text to analyze; no report can be produced."""


def normalize(
    raw_text: Optional[str],
    cap_length: Optional[int] = None,
    metadata: Optional[PageMetadata] = None,
) -> Content:
    """
    Strip surrounding whitespace and truncate to ``cap_length`` characters.

    Args:
        raw_text: Text supplied by the scraper
        cap_length: Character cap (defaults to settings.content_max_chars)
        metadata: Page metadata carried along with the text

    Returns:
        Immutable Content for one analysis run

    Raises:
        EmptyContentError: If the text is empty or whitespace-only
    """
    text = (raw_text or "").strip()
    if not text:
        raise EmptyContentError("No article content to analyze")

    limit = settings.content_max_chars if cap_length is None else cap_length
    if limit <= 0:
        raise ValueError(f"cap_length must be positive, got {limit}")

    return Content(text=text[:limit], metadata=metadata or PageMetadata())
