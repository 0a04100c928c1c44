"""Resume analysis service: fetch, cache lookup, analyze, store."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from hirewave_analysis.analyzer import ResumeAnalyzer
from hirewave_analysis.heuristics import unavailable_analysis
from hirewave_analysis.observability import bind_request_context, clear_request_context
from hirewave_analysis.tools.document_fetcher import DocumentFetcher
from hirewave_core.constants import ANALYSIS_CACHE_PREFIX, RESUME_ANALYSIS_PROMPT_VERSION
from hirewave_core.models.analysis import ResumeAnalysisRecord

if TYPE_CHECKING:
    from hirewave_core.config.settings import Settings
    from hirewave_core.interfaces.cache import AnalysisCache

logger = structlog.get_logger()

SECONDS_PER_DAY = 86400


@dataclass(frozen=True)
class AnalysisOutcome:
    """Result of a service call: the record plus how it was obtained."""

    record: ResumeAnalysisRecord
    is_cached: bool = False
    error: str | None = None


def resume_hash(text: str) -> str:
    """SHA-256 hex digest of resume text."""
    return hashlib.sha256(text.encode()).hexdigest()


def analysis_cache_key(text_hash: str, prompt_version: str = RESUME_ANALYSIS_PROMPT_VERSION) -> str:
    """Cache key for an analysis of the given resume content."""
    return f"{ANALYSIS_CACHE_PREFIX}:{prompt_version}:{text_hash}"


class ResumeAnalysisService:
    """Caller-side flow around ResumeAnalyzer.

    Fetches the document, reuses a cached analysis of identical content,
    and only persists analyses that came from a generative provider.
    """

    def __init__(
        self,
        settings: Settings,
        analyzer: ResumeAnalyzer | None = None,
        fetcher: DocumentFetcher | None = None,
        cache: AnalysisCache | None = None,
    ) -> None:
        """Initialize with settings and optional collaborators."""
        self.settings = settings
        self.analyzer = analyzer or ResumeAnalyzer(settings)
        self.fetcher = fetcher or DocumentFetcher(
            timeout_seconds=settings.fetch_timeout_seconds,
            max_pages=settings.fetch_max_pages,
        )
        self.cache = cache

    async def analyze_document(self, document_url: str, force: bool = False) -> AnalysisOutcome:
        """Fetch a resume document and analyze its text."""
        bind_request_context(document_url=document_url)
        try:
            fetched = await self.fetcher.fetch_text(document_url)
            if not fetched.ok:
                logger.warning("resume_unavailable", reason=fetched.reason)
                record = ResumeAnalysisRecord.from_result(unavailable_analysis())
                return AnalysisOutcome(record=record, error=fetched.reason)
            return await self._analyze(fetched.text, force=force)
        finally:
            clear_request_context("request_id", "document_url")

    async def analyze_text(self, text: str, force: bool = False) -> AnalysisOutcome:
        """Analyze resume text that is already in hand."""
        bind_request_context()
        try:
            return await self._analyze(text, force=force)
        finally:
            clear_request_context("request_id")

    async def _analyze(self, text: str, force: bool) -> AnalysisOutcome:
        """Cache lookup, analysis, and conditional store."""
        text_hash = resume_hash(text)
        key = analysis_cache_key(text_hash)

        if self.cache is not None and not force:
            cached = await self.cache.get_record(key)
            if cached is not None:
                logger.info("analysis_cache_hit", resume_hash=text_hash[:12])
                return AnalysisOutcome(record=cached, is_cached=True)

        result = await self.analyzer.analyze(text)
        record = ResumeAnalysisRecord.from_result(result, resume_hash=text_hash)

        if self.cache is not None and not result.is_fallback:
            ttl = self.settings.cache_ttl_days * SECONDS_PER_DAY
            await self.cache.put_record(key, record, ttl_seconds=ttl)
            logger.debug("analysis_cached", resume_hash=text_hash[:12], ttl_seconds=ttl)

        return AnalysisOutcome(record=record)
