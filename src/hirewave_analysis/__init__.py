"""Resume analysis: generative critique, keyword heuristic, and document fetching."""

from hirewave_analysis.analyzer import ResumeAnalyzer
from hirewave_analysis.service import AnalysisOutcome, ResumeAnalysisService

__all__ = [
    "AnalysisOutcome",
    "ResumeAnalysisService",
    "ResumeAnalyzer",
]
