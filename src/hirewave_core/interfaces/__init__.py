"""Public interface re-exports for hirewave_core."""

from hirewave_core.interfaces.cache import AnalysisCache
from hirewave_core.interfaces.provider import CompletionOptions, GenerativeTextProvider

__all__ = [
    "AnalysisCache",
    "CompletionOptions",
    "GenerativeTextProvider",
]
