"""Resume document fetcher: download or read a PDF and extract its text."""

from __future__ import annotations

import asyncio
import re
from pathlib import Path

import httpx
import structlog

from hirewave_analysis.tools.pdf_parser import PDFParser
from hirewave_core.constants import FETCH_ERROR_MESSAGE
from hirewave_core.exceptions import DocumentFetchError, HireWaveError
from hirewave_core.models.document import FetchResult

logger = structlog.get_logger()

WHITESPACE_PATTERN = re.compile(r"\s+")
USER_AGENT = "HireWave/1.0 (resume analysis)"


class DocumentFetcher:
    """Turn a document URL or local path into a FetchResult.

    Never raises; every failure becomes ``FetchResult.failure`` with a
    reason that starts with the standard extraction error prefix.
    """

    def __init__(
        self,
        timeout_seconds: float = 10.0,
        max_pages: int | None = 50,
        parser: PDFParser | None = None,
    ) -> None:
        """Initialize with download timeout, page limit and an optional parser."""
        self.timeout_seconds = timeout_seconds
        self.max_pages = max_pages
        self._parser = parser or PDFParser()

    async def fetch_text(self, document_url: str) -> FetchResult:
        """Fetch the document and return its normalized text."""
        try:
            source = await self._load(document_url)
            raw_text = await self._parser.extract_text(source, max_pages=self.max_pages)
        except (
            HireWaveError,
            httpx.HTTPError,
            httpx.InvalidURL,
            TimeoutError,
            OSError,
            ValueError,
        ) as e:
            logger.warning(
                "document_fetch_failed",
                document_url=document_url,
                error_type=type(e).__name__,
                error=str(e),
            )
            return FetchResult.failure(f"{FETCH_ERROR_MESSAGE} ({e})")

        text = normalize_whitespace(raw_text)
        logger.info("document_fetched", document_url=document_url, chars=len(text))
        return FetchResult.success(text)

    async def _load(self, document_url: str) -> Path | bytes:
        """Return downloaded bytes for http(s) URLs, else a local path."""
        if document_url.startswith(("http://", "https://")):
            return await asyncio.wait_for(
                self._download(document_url), timeout=self.timeout_seconds
            )
        path = Path(document_url).expanduser()
        if not path.is_file():
            msg = f"No such document: {document_url}"
            raise DocumentFetchError(msg)
        return path

    async def _download(self, document_url: str) -> bytes:
        """GET the document, following redirects; non-2xx is an error."""
        async with httpx.AsyncClient(
            timeout=self.timeout_seconds,
            follow_redirects=True,
            headers={"User-Agent": USER_AGENT},
        ) as client:
            response = await client.get(document_url)
            response.raise_for_status()
            content = response.content
        if not content:
            msg = f"Empty response body from {document_url}"
            raise DocumentFetchError(msg)
        return content


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    return WHITESPACE_PATTERN.sub(" ", text).strip()
