"""Vertex AI text provider over raw HTTPS (no SDK)."""

from __future__ import annotations

import httpx
import structlog

from hirewave_core.exceptions import ProviderError, ProviderTimeoutError
from hirewave_core.interfaces.provider import CompletionOptions

logger = structlog.get_logger()

VERTEX_GENERATE_URL = (
    "https://{location}-aiplatform.googleapis.com/v1/projects/{project}"
    "/locations/{location}/publishers/google/models/{model}:generateContent"
)


class VertexTextProvider:
    """Completion via the Vertex AI ``generateContent`` REST endpoint."""

    name = "vertex"

    def __init__(self, access_token: str, project_id: str, location: str, model: str) -> None:
        """Initialize with a bearer token and endpoint coordinates."""
        self._access_token = access_token
        self._model = model
        self._url = VERTEX_GENERATE_URL.format(
            location=location, project=project_id, model=model
        )

    def _build_payload(self, prompt: str, options: CompletionOptions) -> dict[str, object]:
        """Build the generateContent request body."""
        generation_config: dict[str, object] = {
            "temperature": options.temperature,
            "maxOutputTokens": options.max_tokens,
        }
        if options.top_p is not None:
            generation_config["topP"] = options.top_p
        if options.top_k is not None:
            generation_config["topK"] = options.top_k

        payload: dict[str, object] = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": generation_config,
        }
        if options.system_prompt:
            payload["systemInstruction"] = {"parts": [{"text": options.system_prompt}]}
        return payload

    async def complete(self, prompt: str, options: CompletionOptions) -> str:
        """POST the prompt and return the first candidate's text."""
        headers = {
            "Authorization": f"Bearer {self._access_token}",
            "Content-Type": "application/json",
        }
        try:
            async with httpx.AsyncClient(timeout=options.timeout_seconds) as client:
                response = await client.post(
                    self._url,
                    headers=headers,
                    json=self._build_payload(prompt, options),
                )
                response.raise_for_status()
                data = response.json()
        except httpx.TimeoutException as e:
            raise ProviderTimeoutError(f"Vertex AI request timed out: {e}") from e
        except httpx.HTTPStatusError as e:
            msg = f"Vertex AI returned HTTP {e.response.status_code}"
            raise ProviderError(msg) from e
        except (httpx.HTTPError, ValueError) as e:
            raise ProviderError(f"Vertex AI request failed: {e}") from e

        text = _extract_candidate_text(data)
        if not text.strip():
            raise ProviderError("Vertex AI returned an empty completion")
        logger.debug("vertex_completion", model=self._model, chars=len(text))
        return text


def _extract_candidate_text(data: object) -> str:
    """Pull the concatenated text parts out of a generateContent envelope."""
    if not isinstance(data, dict):
        return ""
    candidates = data.get("candidates") or []
    if not candidates or not isinstance(candidates[0], dict):
        return ""
    content = candidates[0].get("content")
    if not isinstance(content, dict):
        return ""
    parts = content.get("parts") or []
    return "".join(
        part.get("text", "") for part in parts if isinstance(part, dict)
    )
