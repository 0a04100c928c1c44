"""Domain models for HireWave."""

from hirewave_core.models.analysis import (
    AnalysisResult,
    AnalysisSource,
    ResumeAnalysisRecord,
)
from hirewave_core.models.document import FetchResult

__all__ = [
    "AnalysisResult",
    "AnalysisSource",
    "FetchResult",
    "ResumeAnalysisRecord",
]
