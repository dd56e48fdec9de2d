"""Article text and page metadata extraction from HTML.

Reference implementation of the scraper collaborator: picks the article body
with a fixed selector list and collects the structural metadata the local
credibility signals read (headline, byline, date elements, contact and bio
markers).

Usage:
    page = extract_page(html, url="https://www.reuters.com/world/story")
    report = await analyzer.analyze(page.text, page.metadata)
"""

from dataclasses import dataclass
from typing import Optional

import httpx
from bs4 import BeautifulSoup
from loguru import logger

from verifact.schemas import DateCandidate, PageMetadata

# Article containers, most specific first
ARTICLE_SELECTORS: tuple[str, ...] = (
    "article",
    '[role="article"]',
    ".article-content",
    ".post-content",
    ".entry-content",
    ".story-body",
    "main p",
)
HEADLINE_SELECTOR = "h1, .headline, .title"
DATE_SELECTOR = "time, .date, .published, [datetime]"
AUTHOR_SELECTOR = '.author, .byline, [rel="author"]'
CONTACT_SELECTOR = 'a[href^="mailto:"]'
BIO_SELECTOR = ".author-bio, .bio"

MAX_ARTICLE_CHARS = 2000

DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (compatible; VeriFact/0.1; +https://github.com/verifact)",
}


@dataclass(frozen=True)
class ExtractedPage:
    """Article text plus page metadata, ready for analysis."""

    text: str
    metadata: PageMetadata


def _element_text(element) -> str:
    return element.get_text(" ", strip=True)


def extract_article_text(soup: BeautifulSoup, max_chars: int = MAX_ARTICLE_CHARS) -> str:
    """
    Text of the first matching article container, else all paragraphs joined.

    Args:
        soup: Parsed document
        max_chars: Character cap for the returned text

    Returns:
        Article text (may be empty)
    """
    for selector in ARTICLE_SELECTORS:
        element = soup.select_one(selector)
        if element is not None:
            return _element_text(element)[:max_chars]

    paragraphs = [_element_text(p) for p in soup.find_all("p")]
    return " ".join(p for p in paragraphs if p)[:max_chars]


def extract_metadata(soup: BeautifulSoup, url: Optional[str] = None) -> PageMetadata:
    """Collect the structural metadata used by the local credibility signals."""
    title = soup.title.get_text(strip=True) if soup.title else ""

    headline_el = soup.select_one(HEADLINE_SELECTOR)
    headline = _element_text(headline_el) if headline_el else None

    # Document order of the date elements is the scan order of verify_date()
    date_candidates = tuple(
        DateCandidate(
            datetime_attr=element.get("datetime"),
            text=_element_text(element) or None,
        )
        for element in soup.select(DATE_SELECTOR)
    )

    author_el = soup.select_one(AUTHOR_SELECTOR)
    byline = _element_text(author_el) if author_el else None

    return PageMetadata(
        url=url,
        title=title,
        headline=headline or None,
        byline=byline or None,
        date_candidates=date_candidates,
        has_contact=soup.select_one(CONTACT_SELECTOR) is not None,
        has_bio=soup.select_one(BIO_SELECTOR) is not None,
    )


def extract_page(html: str, url: Optional[str] = None) -> ExtractedPage:
    """
    Parse an HTML document into article text and page metadata.

    Args:
        html: Raw HTML
        url: Page URL, used to derive the hostname

    Returns:
        ExtractedPage; text is empty when no article content was found
    """
    soup = BeautifulSoup(html, "html.parser")
    text = extract_article_text(soup)
    metadata = extract_metadata(soup, url)

    logger.debug(
        f"Extracted {len(text)} chars from {metadata.hostname or 'document'}"
        f" ({len(metadata.date_candidates)} date candidates)"
    )
    return ExtractedPage(text=text, metadata=metadata)


async def fetch_page(
    url: str,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = 15.0,
) -> ExtractedPage:
    """
    Download a page and extract it.

    Args:
        url: Page URL
        client: Optional shared AsyncClient
        timeout: Request timeout in seconds when creating a client

    Raises:
        httpx.HTTPError: On network failures or error status codes
    """
    if client is None:
        async with httpx.AsyncClient(
            headers=DEFAULT_HEADERS, timeout=timeout, follow_redirects=True
        ) as owned:
            return await fetch_page(url, client=owned)

    response = await client.get(url)
    response.raise_for_status()
    # Redirects may land on another host; metadata follows the final URL
    return extract_page(response.text, url=str(response.url))
