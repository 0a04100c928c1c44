"""OpenAI chat-completions text provider."""

from __future__ import annotations

import openai
import structlog
from openai import AsyncOpenAI

from hirewave_core.exceptions import ProviderError, ProviderTimeoutError
from hirewave_core.interfaces.provider import CompletionOptions

logger = structlog.get_logger()


class OpenAITextProvider:
    """Completion via ``AsyncOpenAI.chat.completions``."""

    name = "openai"

    def __init__(self, api_key: str, model: str, base_url: str | None = None) -> None:
        """Initialize the SDK client; retries are left to the analyzer."""
        self._model = model
        self._client = AsyncOpenAI(api_key=api_key, base_url=base_url, max_retries=0)

    async def complete(self, prompt: str, options: CompletionOptions) -> str:
        """Send the prompt as a single user turn and return the reply text."""
        messages: list[dict[str, str]] = []
        if options.system_prompt:
            messages.append({"role": "system", "content": options.system_prompt})
        messages.append({"role": "user", "content": prompt})

        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=messages,  # type: ignore[arg-type]
                temperature=options.temperature,
                top_p=options.top_p,
                max_tokens=options.max_tokens,
                timeout=options.timeout_seconds,
            )
        except openai.APITimeoutError as e:
            raise ProviderTimeoutError(f"OpenAI request timed out: {e}") from e
        except openai.OpenAIError as e:
            raise ProviderError(f"OpenAI request failed: {e}") from e

        if not response.choices:
            raise ProviderError("OpenAI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise ProviderError("OpenAI returned an empty completion")
        logger.debug("openai_completion", model=self._model, chars=len(content))
        return content
