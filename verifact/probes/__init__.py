"""Credibility probes: local signals and model-backed analyses.

Local signals are pure functions over page metadata and text:
- source_signals: trusted-source allowlist, publisher ratings
- page_signals: publication date freshness, author credibility
- content_signals: red flags, language detection, news-page heuristic

Model-backed probes (model_probes) ask the generative text service for
narrative analyses and resolve to Success or Unavailable, never raising.
"""

from verifact.probes.source_signals import check_source, rate_publisher
from verifact.probes.page_signals import check_author_credibility, verify_date
from verifact.probes.content_signals import (
    detect_language,
    detect_red_flags,
    is_news_page,
)
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

__all__ = [
    "check_source",
    "rate_publisher",
    "check_author_credibility",
    "verify_date",
    "detect_language",
    "detect_red_flags",
    "is_news_page",
    "ModelProbe",
    "CredibilityProbe",
    "BiasProbe",
    "FactOpinionProbe",
    "SentimentProbe",
    "KeyPointsProbe",
    "RelatedSearchProbe",
    "TranslationProbe",
]
