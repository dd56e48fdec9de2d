"""Pydantic schemas for page input, probe outcomes and the credibility report.

Primary exports:
- PageMetadata / Content: analysis input
- Success / Unavailable / ProbeResult: per-probe outcome
- FormattedBlock: structured model answer unit
- Report: merged output of one analysis run

Usage:
    from verifact.schemas import PageMetadata, Report
    metadata = PageMetadata(url="https://www.reuters.com/world/some-story")
"""

from verifact.schemas.page_schema import (
    Content,
    DateCandidate,
    PageMetadata,
)
from verifact.schemas.probe_schema import (
    ProbeResult,
    Success,
    Unavailable,
)
from verifact.schemas.block_schema import (
    BlockKind,
    FormattedBlock,
    InlineSpan,
)
from verifact.schemas.signal_schema import (
    AuthorCredibility,
    AuthorIndicators,
    Bias,
    CredibilityLevel,
    DateStatus,
    DateVerification,
    PublisherRating,
    SourceTrust,
    TrustStatus,
)
from verifact.schemas.report_schema import (
    FormattedAnalysis,
    ProbeUnavailable,
    Report,
    Translation,
)

__all__ = [
    # Input
    "Content",
    "DateCandidate",
    "PageMetadata",
    # Probe outcomes
    "ProbeResult",
    "Success",
    "Unavailable",
    # Formatting
    "BlockKind",
    "FormattedBlock",
    "InlineSpan",
    # Local signals
    "AuthorCredibility",
    "AuthorIndicators",
    "Bias",
    "CredibilityLevel",
    "DateStatus",
    "DateVerification",
    "PublisherRating",
    "SourceTrust",
    "TrustStatus",
    # Report
    "FormattedAnalysis",
    "ProbeUnavailable",
    "Report",
    "Translation",
]
