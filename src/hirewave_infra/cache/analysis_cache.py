"""diskcache-backed implementation of AnalysisCache."""

from __future__ import annotations

import asyncio
from pathlib import Path

import diskcache
import structlog
from pydantic import ValidationError

from hirewave_core.models.analysis import ResumeAnalysisRecord

logger = structlog.get_logger()


class DiskAnalysisCache:
    """Persistent analysis cache backed by diskcache (SQLite under the hood)."""

    def __init__(self, cache_dir: Path) -> None:
        """Initialize with a cache directory."""
        cache_dir.mkdir(parents=True, exist_ok=True)
        self._cache = diskcache.Cache(str(cache_dir))

    async def get_record(self, key: str) -> ResumeAnalysisRecord | None:
        """Retrieve a record by key; corrupt entries are dropped and treated as a miss."""
        raw = await asyncio.to_thread(self._cache.get, key)
        if raw is None:
            return None
        try:
            return ResumeAnalysisRecord.model_validate_json(raw)
        except (ValidationError, TypeError) as e:
            logger.warning("analysis_cache_corrupt_entry", key=key, error=str(e))
            await self.delete(key)
            return None

    async def put_record(
        self, key: str, record: ResumeAnalysisRecord, ttl_seconds: int = 86400
    ) -> None:
        """Store a record as JSON with TTL."""
        payload = record.model_dump_json()
        await asyncio.to_thread(self._cache.set, key, payload, expire=ttl_seconds)

    async def delete(self, key: str) -> None:
        """Delete a key from the cache."""
        await asyncio.to_thread(self._cache.delete, key)

    def close(self) -> None:
        """Close the cache."""
        self._cache.close()
