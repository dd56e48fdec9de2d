"""Static lookup tables for the local credibility signals.

Tables are process-wide constants: loaded once on import and never mutated,
so probes read them without synchronization.

Publisher grades (from most to least reliable):
1. Wire services (Reuters, AP): A+
2. Public broadcasters and radio (BBC, NPR): A
3. Major newspapers (NYT, WSJ): A-
4. Cable news (CNN, Fox News): B
"""

from types import MappingProxyType
from typing import Mapping

# Fact-checkers and outlets treated as trusted; matched as hostname substrings
TRUSTED_SOURCES: tuple[str, ...] = (
    "reuters.com",
    "apnews.com",
    "bbc.com",
    "npr.org",
    "snopes.com",
    "politifact.com",
    "factcheck.org",
)

# Key: exact domain (lowercase, no www.)
# Value: (rating, publication type, bias label)
PUBLISHER_RATINGS: Mapping[str, tuple[str, str, str]] = MappingProxyType({
    "reuters.com": ("A+", "Wire Service", "Center"),
    "apnews.com": ("A+", "Wire Service", "Center"),
    "bbc.com": ("A", "Public Broadcaster", "Center-Left"),
    "npr.org": ("A", "Public Radio", "Center-Left"),
    "nytimes.com": ("A-", "Newspaper", "Center-Left"),
    "wsj.com": ("A-", "Newspaper", "Center-Right"),
    "cnn.com": ("B", "Cable News", "Left"),
    "foxnews.com": ("B", "Cable News", "Right"),
})

UNKNOWN = "Unknown"

# Sensationalist vocabulary for the emotional-language red flag
EMOTIONAL_WORDS: tuple[str, ...] = (
    "shocking",
    "unbelievable",
    "outrageous",
    "scandal",
    "exposed",
)

# Phrases whose absence raises the "no sources cited" red flag
ATTRIBUTION_PHRASES: tuple[str, ...] = ("source", "according to")

CAPS_RUN_LENGTH = 10

RED_FLAG_EMOTIONAL = "Contains emotional language"
RED_FLAG_CAPITALS = "Excessive use of capital letters"
RED_FLAG_NO_SOURCES = "No sources cited"

# Stop-word lists for language detection, evaluated in this order
STOP_WORDS: Mapping[str, frozenset[str]] = MappingProxyType({
    "es": frozenset({"el", "la", "de", "que", "y", "en", "un", "es", "se", "no"}),
    "fr": frozenset({"le", "de", "et", "à", "un", "il", "être", "en", "avoir"}),
    "de": frozenset({"der", "die", "und", "in", "den", "von", "zu", "das", "mit", "sich"}),
})

LANGUAGE_SAMPLE_TOKENS = 50

# Keywords in a URL or title that mark a page as news coverage
NEWS_PAGE_KEYWORDS: tuple[str, ...] = ("news", "article", "story", "breaking", "report")

# Author credibility points and thresholds
AUTHOR_POINTS = 3
CONTACT_POINTS = 2
BIO_POINTS = 2
HIGH_CREDIBILITY_SCORE = 5
MEDIUM_CREDIBILITY_SCORE = 3
