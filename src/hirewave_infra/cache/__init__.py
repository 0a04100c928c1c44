"""Persistent analysis cache backends."""

from hirewave_infra.cache.analysis_cache import DiskAnalysisCache

__all__ = ["DiskAnalysisCache"]
