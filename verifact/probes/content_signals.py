"""Text-level signals: red-flag heuristics, stop-word language detection and
the news-page heuristic.

All functions are deterministic; the order of red-flag checks and of
candidate languages is fixed by the tables in verifact.config.source_credibility.
"""

import re
from typing import Optional

from verifact.config.source_credibility import (
    ATTRIBUTION_PHRASES,
    CAPS_RUN_LENGTH,
    EMOTIONAL_WORDS,
    LANGUAGE_SAMPLE_TOKENS,
    NEWS_PAGE_KEYWORDS,
    RED_FLAG_CAPITALS,
    RED_FLAG_EMOTIONAL,
    RED_FLAG_NO_SOURCES,
    STOP_WORDS,
)

_CAPS_RUN = re.compile(rf"[A-Z]{{{CAPS_RUN_LENGTH},}}")


def detect_red_flags(text: str) -> tuple[str, ...]:
    """
    Run the red-flag checks over article text.

    Checks, in order:
    1. Emotionally charged vocabulary
    2. A run of ten or more consecutive capital letters
    3. No attribution ("source" / "according to") anywhere

    Returns:
        One diagnostic string per failed check, in check order
    """
    lowered = text.lower()
    flags: list[str] = []

    if any(word in lowered for word in EMOTIONAL_WORDS):
        flags.append(RED_FLAG_EMOTIONAL)

    if _CAPS_RUN.search(text):
        flags.append(RED_FLAG_CAPITALS)

    if not any(phrase in lowered for phrase in ATTRIBUTION_PHRASES):
        flags.append(RED_FLAG_NO_SOURCES)

    return tuple(flags)


def detect_language(text: str, base_language: str = "en") -> str:
    """
    Guess the article language from stop words in its first 50 tokens.

    Candidate languages are scored in fixed order (es, fr, de); a language
    only takes over with strictly more matches than the best so far, so ties
    go to the earlier language and no matches at all keep the base language.
    """
    tokens = text.lower().split()[:LANGUAGE_SAMPLE_TOKENS]
    detected = base_language
    best = 0

    for language, stop_words in STOP_WORDS.items():
        matches = sum(1 for token in tokens if token in stop_words)
        if matches > best:
            best = matches
            detected = language

    return detected


def is_news_page(url: Optional[str], title: Optional[str]) -> bool:
    """True when the URL or title mentions a news keyword (case-insensitive)."""
    haystacks = [(url or "").lower(), (title or "").lower()]
    return any(keyword in hay for keyword in NEWS_PAGE_KEYWORDS for hay in haystacks)
