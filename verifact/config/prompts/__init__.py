"""Prompt templates for the model-backed probes.

Modules:
    analysis_prompts: Credibility, bias, fact/opinion, sentiment, key point,
        related search and translation prompts
"""

from verifact.config.prompts.analysis_prompts import (
    FACT_CHECKER_SYSTEM_PROMPT,
    CREDIBILITY_PROMPT,
    BIAS_PROMPT,
    FACT_OPINION_PROMPT,
    SENTIMENT_PROMPT,
    KEY_POINTS_PROMPT,
    RELATED_SEARCH_PROMPT,
    TRANSLATION_PROMPT,
)

__all__ = [
    "FACT_CHECKER_SYSTEM_PROMPT",
    "CREDIBILITY_PROMPT",
    "BIAS_PROMPT",
    "FACT_OPINION_PROMPT",
    "SENTIMENT_PROMPT",
    "KEY_POINTS_PROMPT",
    "RELATED_SEARCH_PROMPT",
    "TRANSLATION_PROMPT",
]
