"""Analysis pipeline: normalization and probe aggregation.

Provides:
- CredibilityAnalyzer: runs every probe for one article and builds the Report
- normalize / EmptyContentError: bounding of the raw article text
- check_services: availability summary of the external text services
"""

from verifact.pipeline.normalizer import EmptyContentError, normalize
from verifact.pipeline.analysis_pipeline import (
    MODEL_PROBES,
    CredibilityAnalyzer,
    ServiceCheck,
    ServiceStatus,
    check_services,
)

__all__ = [
    "CredibilityAnalyzer",
    "EmptyContentError",
    "MODEL_PROBES",
    "ServiceCheck",
    "ServiceStatus",
    "check_services",
    "normalize",
]
