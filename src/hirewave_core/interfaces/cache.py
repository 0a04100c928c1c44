"""Abstract analysis cache interface."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from hirewave_core.models.analysis import ResumeAnalysisRecord


@runtime_checkable
class AnalysisCache(Protocol):
    """Store of past analyses keyed by resume content."""

    async def get_record(self, key: str) -> ResumeAnalysisRecord | None:
        """Retrieve a cached record, or None if absent or expired."""
        ...

    async def put_record(
        self, key: str, record: ResumeAnalysisRecord, ttl_seconds: int = 86400
    ) -> None:
        """Store a record with a TTL."""
        ...

    async def delete(self, key: str) -> None:
        """Delete a cached record."""
        ...
