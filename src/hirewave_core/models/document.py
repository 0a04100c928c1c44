"""Document fetch result model."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass


@dataclass(frozen=True)
class FetchResult:
    """Outcome of fetching a resume document.

    Either ``ok`` with the extracted ``text`` or not ``ok`` with a
    human-readable ``reason``; failure text never lands in ``text``.
    """

    ok: bool
    text: str = ""
    reason: str | None = None

    @classmethod
    def success(cls, text: str) -> FetchResult:
        """Wrap successfully extracted text."""
        return cls(ok=True, text=text)

    @classmethod
    def failure(cls, reason: str) -> FetchResult:
        """Wrap a fetch or parse failure."""
        return cls(ok=False, reason=reason)

    @property
    def content_hash(self) -> str | None:
        """SHA-256 of the extracted text, used to detect resume changes."""
        if not self.ok:
            return None
        return hashlib.sha256(self.text.encode()).hexdigest()
