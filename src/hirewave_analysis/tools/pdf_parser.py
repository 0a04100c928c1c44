"""PDF text extraction with fallback chain: pdfplumber -> pypdf."""

from __future__ import annotations

import asyncio
import io
from pathlib import Path
from typing import BinaryIO

import structlog

from hirewave_core.constants import MAX_PDF_SIZE_MB, MIN_EXTRACTED_CHARS
from hirewave_core.exceptions import EncryptedPDFError, InvalidFileError, ScannedPDFError

logger = structlog.get_logger()

PDF_MAGIC = b"%PDF"


class PDFParser:
    """Extract text from PDF files or in-memory PDF bytes."""

    async def extract_text(self, source: Path | bytes, max_pages: int | None = None) -> str:
        """Extract text from a PDF path or raw PDF bytes.

        Tries pdfplumber first, then pypdf. Only the first ``max_pages``
        pages are read when a limit is given.

        Raises:
            InvalidFileError: If the input is not a PDF.
            EncryptedPDFError: If the PDF is password-protected.
            ScannedPDFError: If the PDF has no text layer.
        """
        if isinstance(source, Path):
            self._validate_file(source)
            size_bytes = source.stat().st_size
        else:
            self._validate_bytes(source)
            size_bytes = len(source)
        self._check_size(size_bytes, label=str(source) if isinstance(source, Path) else "<bytes>")

        text = await self._try_pdfplumber(source, max_pages)
        if text and len(text.strip()) > MIN_EXTRACTED_CHARS:
            return text

        text = await self._try_pypdf(source, max_pages)
        if text and len(text.strip()) > MIN_EXTRACTED_CHARS:
            return text

        msg = "PDF appears to be scanned/image-only with no extractable text"
        raise ScannedPDFError(msg)

    def _validate_file(self, path: Path) -> None:
        """Validate that the file exists and is a PDF."""
        if not path.exists():
            msg = f"File not found: {path}"
            raise InvalidFileError(msg)
        if path.suffix.lower() != ".pdf":
            msg = f"Expected PDF file, got: {path.suffix}"
            raise InvalidFileError(msg)

    def _validate_bytes(self, data: bytes) -> None:
        """Validate that in-memory content carries the PDF header."""
        if data.lstrip()[:4] != PDF_MAGIC:
            msg = "Expected PDF content, got data without a %PDF header"
            raise InvalidFileError(msg)

    def _check_size(self, size_bytes: int, label: str) -> None:
        """Warn if PDF is larger than MAX_PDF_SIZE_MB."""
        size_mb = size_bytes / (1024 * 1024)
        if size_mb > MAX_PDF_SIZE_MB:
            logger.warning("large_pdf", source=label, size_mb=round(size_mb, 1))

    @staticmethod
    def _open(source: Path | bytes) -> str | BinaryIO:
        """Return something both PDF libraries accept as input."""
        if isinstance(source, Path):
            return str(source)
        return io.BytesIO(source)

    async def _try_pdfplumber(self, source: Path | bytes, max_pages: int | None) -> str | None:
        """Try extracting text with pdfplumber."""
        try:
            import pdfplumber

            def _extract() -> str:
                pages_text: list[str] = []
                with pdfplumber.open(self._open(source)) as pdf:
                    for page in pdf.pages[:max_pages]:
                        text = page.extract_text()
                        if text:
                            pages_text.append(text)
                return "\n\n".join(pages_text)

            return await asyncio.to_thread(_extract)
        except Exception as e:
            if "password" in str(e).lower() or "encrypted" in str(e).lower():
                msg = "PDF is password-protected"
                raise EncryptedPDFError(msg) from e
            logger.debug("pdfplumber_fallback", error=str(e))
            return None

    async def _try_pypdf(self, source: Path | bytes, max_pages: int | None) -> str | None:
        """Try extracting text with pypdf (lightweight fallback)."""
        try:
            from pypdf import PdfReader

            def _extract() -> str:
                reader = PdfReader(self._open(source))
                if reader.is_encrypted:
                    msg = "PDF is password-protected"
                    raise EncryptedPDFError(msg)
                pages_text: list[str] = []
                for page in list(reader.pages)[:max_pages]:
                    text = page.extract_text()
                    if text:
                        pages_text.append(text)
                return "\n\n".join(pages_text)

            return await asyncio.to_thread(_extract)
        except EncryptedPDFError:
            raise
        except Exception as e:
            logger.debug("pypdf_fallback", error=str(e))
            return None
