"""Google Gemini text provider (google-genai SDK)."""

from __future__ import annotations

import httpx
import structlog
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from hirewave_core.exceptions import ProviderError, ProviderTimeoutError
from hirewave_core.interfaces.provider import CompletionOptions

logger = structlog.get_logger()


class GeminiTextProvider:
    """Completion via ``Client.aio.models.generate_content``."""

    name = "gemini"

    def __init__(self, api_key: str, model: str) -> None:
        """Create an SDK client bound to the API key."""
        self._client = genai.Client(api_key=api_key)
        self._model_name = model

    async def complete(self, prompt: str, options: CompletionOptions) -> str:
        """Generate content for the prompt and return the response text."""
        config = types.GenerateContentConfig(
            system_instruction=options.system_prompt,
            temperature=options.temperature,
            top_p=options.top_p,
            top_k=options.top_k,
            max_output_tokens=options.max_tokens,
            http_options=types.HttpOptions(timeout=int(options.timeout_seconds * 1000)),
        )
        try:
            response = await self._client.aio.models.generate_content(
                model=self._model_name,
                contents=prompt,
                config=config,
            )
        except httpx.TimeoutException as e:
            raise ProviderTimeoutError(f"Gemini request timed out: {e}") from e
        except (genai_errors.APIError, httpx.HTTPError) as e:
            raise ProviderError(f"Gemini request failed: {e}") from e

        # None when the candidate was blocked or has no text parts
        text = response.text
        if text is None:
            raise ProviderError("Gemini returned no usable text")
        if not text.strip():
            raise ProviderError("Gemini returned an empty completion")
        logger.debug("gemini_completion", model=self._model_name, chars=len(text))
        return text
