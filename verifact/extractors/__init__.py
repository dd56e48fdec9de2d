"""Extraction of article text and page metadata from HTML documents."""

from verifact.extractors.page_extractor import (
    ExtractedPage,
    extract_page,
    fetch_page,
)

__all__ = ["ExtractedPage", "extract_page", "fetch_page"]
