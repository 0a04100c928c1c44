"""Document tools: PDF text extraction and resume fetching."""

from hirewave_analysis.tools.document_fetcher import DocumentFetcher, normalize_whitespace
from hirewave_analysis.tools.pdf_parser import PDFParser

__all__ = [
    "DocumentFetcher",
    "PDFParser",
    "normalize_whitespace",
]
