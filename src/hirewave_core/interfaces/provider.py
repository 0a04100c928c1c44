"""Abstract generative text provider interface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class CompletionOptions:
    """Sampling and transport options for a single completion."""

    temperature: float = 0.5
    max_tokens: int = 1000
    timeout_seconds: float = 10.0
    top_p: float | None = None
    top_k: int | None = None
    system_prompt: str | None = None


@runtime_checkable
class GenerativeTextProvider(Protocol):
    """A vendor backend that turns a prompt into free-form text.

    Implementations raise ``ProviderError`` on transport failures, non-2xx
    responses and empty completions.
    """

    name: str

    async def complete(self, prompt: str, options: CompletionOptions) -> str:
        """Return the completion text for ``prompt``."""
        ...
