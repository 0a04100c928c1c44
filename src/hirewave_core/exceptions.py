"""Custom exception hierarchy for HireWave."""

from __future__ import annotations


class HireWaveError(Exception):
    """Base exception for all HireWave errors."""


class ConfigurationError(HireWaveError):
    """Raised when a provider credential or setting is missing or unusable."""


class ProviderError(HireWaveError):
    """Raised when a generative text provider call fails."""


class ProviderTimeoutError(ProviderError):
    """Raised when a provider does not answer within the configured timeout."""


class ResponseParseError(HireWaveError):
    """Raised when a provider completion holds no usable JSON object."""


class DocumentFetchError(HireWaveError):
    """Raised when a resume document cannot be downloaded or read."""


class InvalidFileError(HireWaveError):
    """Raised when the input is not a valid PDF."""


class EncryptedPDFError(HireWaveError):
    """Raised when a PDF is password-protected."""


class ScannedPDFError(HireWaveError):
    """Raised when a PDF has no text layer (scanned/image-only)."""
