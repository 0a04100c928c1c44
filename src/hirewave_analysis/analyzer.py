"""Resume analyzer: generative critique with a deterministic fallback."""

from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING

import structlog
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from hirewave_analysis.heuristics import heuristic_analysis, static_analysis
from hirewave_analysis.parsing import parse_analysis_response
from hirewave_analysis.prompts.resume_analysis import (
    RESUME_ANALYSIS_SYSTEM,
    render_resume_prompt,
)
from hirewave_analysis.providers.factory import create_text_provider
from hirewave_core.exceptions import HireWaveError, ProviderError, ProviderTimeoutError
from hirewave_core.interfaces.provider import CompletionOptions

if TYPE_CHECKING:
    from hirewave_core.config.settings import Settings
    from hirewave_core.interfaces.provider import GenerativeTextProvider
    from hirewave_core.models.analysis import AnalysisResult

logger = structlog.get_logger()


class ResumeAnalyzer:
    """Produce an AnalysisResult for resume text; never raises to the caller.

    A provider is built from settings at construction unless one is
    injected. With no usable provider every call goes straight to the
    keyword heuristic without touching the network.
    """

    def __init__(
        self,
        settings: Settings,
        provider: GenerativeTextProvider | None = None,
    ) -> None:
        """Initialize with settings and an optional explicit provider."""
        self.settings = settings
        self._provider = provider if provider is not None else create_text_provider(settings)
        self._options = CompletionOptions(
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
            timeout_seconds=settings.llm_timeout_seconds,
            top_p=settings.llm_top_p,
            top_k=settings.llm_top_k,
            system_prompt=RESUME_ANALYSIS_SYSTEM,
        )

    @property
    def provider_name(self) -> str | None:
        """Name of the active provider, or None when running heuristic-only."""
        return self._provider.name if self._provider is not None else None

    def truncate(self, resume_text: str) -> str:
        """Hard character cutoff applied before prompting."""
        return resume_text[: self.settings.max_resume_chars]

    async def analyze(self, resume_text: str) -> AnalysisResult:
        """Analyze resume text, degrading to the heuristic on any failure."""
        start = time.monotonic()
        logger.info(
            "analysis_start",
            provider=self.provider_name,
            chars=len(resume_text),
        )

        result = await self._analyze_with_provider(resume_text)
        if result is None:
            result = self._fallback(resume_text)

        logger.info(
            "analysis_end",
            source=result.source,
            ats_score=result.ats_score,
            duration_seconds=round(time.monotonic() - start, 2),
        )
        return result

    async def _analyze_with_provider(self, resume_text: str) -> AnalysisResult | None:
        """Return the provider's parsed analysis, or None to request the fallback."""
        if self._provider is None:
            return None
        if not resume_text.strip():
            logger.info("analysis_skip_provider", reason="empty_resume_text")
            return None

        prompt = render_resume_prompt(self.truncate(resume_text))
        try:
            response = await self._complete(prompt)
            return parse_analysis_response(response)
        except HireWaveError as e:
            logger.warning(
                "analysis_provider_failed",
                provider=self.provider_name,
                error_type=type(e).__name__,
                error=str(e),
            )
        except Exception as e:  # noqa: BLE001
            logger.error(
                "analysis_provider_unexpected_error",
                provider=self.provider_name,
                error_type=type(e).__name__,
                error=str(e),
            )
        return None

    async def _complete(self, prompt: str) -> str:
        """Call the provider under a hard timeout, retrying only if configured."""
        assert self._provider is not None
        provider = self._provider
        timeout = self.settings.llm_timeout_seconds

        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.settings.llm_max_attempts),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            retry=retry_if_exception_type(ProviderError),
            reraise=True,
        ):
            with attempt:
                try:
                    return await asyncio.wait_for(
                        provider.complete(prompt, self._options), timeout=timeout
                    )
                except TimeoutError as e:
                    msg = f"{provider.name} did not answer within {timeout}s"
                    raise ProviderTimeoutError(msg) from e

        msg = "provider retry loop exited without a result"
        raise ProviderError(msg)

    def _fallback(self, resume_text: str) -> AnalysisResult:
        """Keyword heuristic, or the static analysis if the heuristic fails."""
        try:
            result = heuristic_analysis(resume_text)
        except Exception as e:  # noqa: BLE001
            logger.error("analysis_heuristic_failed", error_type=type(e).__name__, error=str(e))
            return static_analysis()
        logger.info("analysis_fallback", ats_score=result.ats_score)
        return result
