"""Anthropic Claude text provider."""

from __future__ import annotations

import anthropic
import structlog
from anthropic import AsyncAnthropic

from hirewave_core.exceptions import ProviderError, ProviderTimeoutError
from hirewave_core.interfaces.provider import CompletionOptions

logger = structlog.get_logger()


class AnthropicTextProvider:
    """Completion via ``AsyncAnthropic.messages``."""

    name = "anthropic"

    def __init__(self, api_key: str, model: str) -> None:
        """Initialize the SDK client; retries are left to the analyzer."""
        self._model = model
        self._client = AsyncAnthropic(api_key=api_key, max_retries=0)

    async def complete(self, prompt: str, options: CompletionOptions) -> str:
        """Send the prompt and join the text blocks of the reply."""
        kwargs: dict[str, object] = {
            "model": self._model,
            "max_tokens": options.max_tokens,
            "temperature": options.temperature,
            "messages": [{"role": "user", "content": prompt}],
            "timeout": options.timeout_seconds,
        }
        if options.system_prompt:
            kwargs["system"] = options.system_prompt

        try:
            response = await self._client.messages.create(**kwargs)  # type: ignore[call-overload]
        except anthropic.APITimeoutError as e:
            raise ProviderTimeoutError(f"Anthropic request timed out: {e}") from e
        except anthropic.AnthropicError as e:
            raise ProviderError(f"Anthropic request failed: {e}") from e

        text = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )
        if not text.strip():
            raise ProviderError("Anthropic returned an empty completion")
        logger.debug("anthropic_completion", model=self._model, chars=len(text))
        return text
