"""Tests for the vendor text providers with SDKs and httpx mocked."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import anthropic
import httpx
import openai
import pytest
from google.genai import errors as genai_errors

from hirewave_analysis.providers.anthropic_provider import AnthropicTextProvider
from hirewave_analysis.providers.gemini_provider import GeminiTextProvider
from hirewave_analysis.providers.openai_provider import OpenAITextProvider
from hirewave_analysis.providers.vertex_provider import (
    VertexTextProvider,
    _extract_candidate_text,
)
from hirewave_core.exceptions import ProviderError, ProviderTimeoutError
from hirewave_core.interfaces.provider import CompletionOptions, GenerativeTextProvider

OPTIONS = CompletionOptions(
    temperature=0.5,
    max_tokens=1000,
    timeout_seconds=10.0,
    top_p=0.8,
    top_k=40,
    system_prompt="You are a resume analyzer.",
)
REPLY = '{"atsScore": 80}'
FAKE_REQUEST = httpx.Request("POST", "https://api.example.com")


def _openai_response(content: str | None) -> SimpleNamespace:
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.mark.unit
class TestOpenAITextProvider:
    """Test OpenAI chat completions mapping."""

    def _provider(self, client: MagicMock) -> OpenAITextProvider:
        with patch(
            "hirewave_analysis.providers.openai_provider.AsyncOpenAI", return_value=client
        ) as cls:
            provider = OpenAITextProvider(api_key="sk-test", model="gpt-3.5-turbo")
        cls.assert_called_once_with(api_key="sk-test", base_url=None, max_retries=0)
        return provider

    @pytest.mark.asyncio
    async def test_complete(self) -> None:
        """Returns message content and sends system + user turns."""
        client = MagicMock()
        client.chat.completions.create = AsyncMock(return_value=_openai_response(REPLY))
        provider = self._provider(client)

        assert isinstance(provider, GenerativeTextProvider)
        assert await provider.complete("analyze", OPTIONS) == REPLY
        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-3.5-turbo"
        assert [m["role"] for m in kwargs["messages"]] == ["system", "user"]
        assert kwargs["temperature"] == 0.5
        assert kwargs["max_tokens"] == 1000
        assert kwargs["timeout"] == 10.0

    @pytest.mark.asyncio
    async def test_timeout_maps(self) -> None:
        """APITimeoutError becomes ProviderTimeoutError."""
        client = MagicMock()
        client.chat.completions.create = AsyncMock(
            side_effect=openai.APITimeoutError(request=FAKE_REQUEST)
        )
        with pytest.raises(ProviderTimeoutError):
            await self._provider(client).complete("analyze", OPTIONS)

    @pytest.mark.asyncio
    async def test_sdk_error_maps(self) -> None:
        """Other SDK errors become ProviderError."""
        client = MagicMock()
        client.chat.completions.create = AsyncMock(
            side_effect=openai.APIConnectionError(request=FAKE_REQUEST)
        )
        with pytest.raises(ProviderError, match="OpenAI request failed"):
            await self._provider(client).complete("analyze", OPTIONS)

    @pytest.mark.asyncio
    async def test_empty_content_raises(self) -> None:
        """None content is an error."""
        client = MagicMock()
        client.chat.completions.create = AsyncMock(return_value=_openai_response(None))
        with pytest.raises(ProviderError, match="empty"):
            await self._provider(client).complete("analyze", OPTIONS)

    @pytest.mark.asyncio
    async def test_no_choices_raises(self) -> None:
        """An empty choices list is an error."""
        client = MagicMock()
        client.chat.completions.create = AsyncMock(return_value=SimpleNamespace(choices=[]))
        with pytest.raises(ProviderError, match="no choices"):
            await self._provider(client).complete("analyze", OPTIONS)


@pytest.mark.unit
class TestAnthropicTextProvider:
    """Test Anthropic messages mapping."""

    def _provider(self, client: MagicMock) -> AnthropicTextProvider:
        with patch(
            "hirewave_analysis.providers.anthropic_provider.AsyncAnthropic", return_value=client
        ):
            return AnthropicTextProvider(api_key="sk-ant", model="claude-haiku-4-5-20251001")

    @pytest.mark.asyncio
    async def test_complete_joins_text_blocks(self) -> None:
        """Text blocks are concatenated; other block types are skipped."""
        client = MagicMock()
        client.messages.create = AsyncMock(
            return_value=SimpleNamespace(
                content=[
                    SimpleNamespace(type="text", text='{"atsScore": '),
                    SimpleNamespace(type="tool_use", id="x"),
                    SimpleNamespace(type="text", text="80}"),
                ]
            )
        )
        result = await self._provider(client).complete("analyze", OPTIONS)
        assert result == REPLY
        kwargs = client.messages.create.call_args.kwargs
        assert kwargs["system"] == "You are a resume analyzer."
        assert kwargs["messages"] == [{"role": "user", "content": "analyze"}]

    @pytest.mark.asyncio
    async def test_timeout_maps(self) -> None:
        """APITimeoutError becomes ProviderTimeoutError."""
        client = MagicMock()
        client.messages.create = AsyncMock(
            side_effect=anthropic.APITimeoutError(request=FAKE_REQUEST)
        )
        with pytest.raises(ProviderTimeoutError):
            await self._provider(client).complete("analyze", OPTIONS)

    @pytest.mark.asyncio
    async def test_empty_reply_raises(self) -> None:
        """No text blocks is an error."""
        client = MagicMock()
        client.messages.create = AsyncMock(return_value=SimpleNamespace(content=[]))
        with pytest.raises(ProviderError, match="empty"):
            await self._provider(client).complete("analyze", OPTIONS)


def _gemini_client(genai: MagicMock, **generate_kwargs: object) -> AsyncMock:
    generate = AsyncMock(**generate_kwargs)
    genai.Client.return_value.aio.models.generate_content = generate
    return generate


@pytest.mark.unit
class TestGeminiTextProvider:
    """Test google-genai mapping."""

    @pytest.mark.asyncio
    async def test_complete(self) -> None:
        """Creates a keyed client and forwards sampling options."""
        with patch("hirewave_analysis.providers.gemini_provider.genai") as genai:
            generate = _gemini_client(genai, return_value=SimpleNamespace(text=REPLY))
            provider = GeminiTextProvider(api_key="g-key", model="gemini-1.5-flash")
            result = await provider.complete("analyze", OPTIONS)

        assert result == REPLY
        genai.Client.assert_called_once_with(api_key="g-key")
        call = generate.call_args
        assert call.kwargs["model"] == "gemini-1.5-flash"
        assert call.kwargs["contents"] == "analyze"
        config = call.kwargs["config"]
        assert config.system_instruction == "You are a resume analyzer."
        assert config.temperature == 0.5
        assert config.top_p == 0.8
        assert config.top_k == 40
        assert config.max_output_tokens == 1000
        assert config.http_options.timeout == 10000

    @pytest.mark.asyncio
    async def test_transport_timeout_maps_to_timeout(self) -> None:
        """An httpx timeout becomes ProviderTimeoutError."""
        with patch("hirewave_analysis.providers.gemini_provider.genai") as genai:
            _gemini_client(genai, side_effect=httpx.ReadTimeout("slow"))
            provider = GeminiTextProvider(api_key="g-key", model="gemini-1.5-flash")
            with pytest.raises(ProviderTimeoutError):
                await provider.complete("analyze", OPTIONS)

    @pytest.mark.asyncio
    async def test_api_error_maps(self) -> None:
        """Gemini API errors become ProviderError."""
        error = genai_errors.ServerError(
            503, {"error": {"code": 503, "message": "down", "status": "UNAVAILABLE"}}
        )
        with patch("hirewave_analysis.providers.gemini_provider.genai") as genai:
            _gemini_client(genai, side_effect=error)
            provider = GeminiTextProvider(api_key="g-key", model="gemini-1.5-flash")
            with pytest.raises(ProviderError, match="Gemini request failed"):
                await provider.complete("analyze", OPTIONS)

    @pytest.mark.asyncio
    async def test_blocked_response_raises(self) -> None:
        """A blocked candidate has no usable text."""
        with patch("hirewave_analysis.providers.gemini_provider.genai") as genai:
            _gemini_client(genai, return_value=SimpleNamespace(text=None))
            provider = GeminiTextProvider(api_key="g-key", model="gemini-1.5-flash")
            with pytest.raises(ProviderError, match="no usable text"):
                await provider.complete("analyze", OPTIONS)

    @pytest.mark.asyncio
    async def test_blank_response_raises(self) -> None:
        """Whitespace-only text is an empty completion."""
        with patch("hirewave_analysis.providers.gemini_provider.genai") as genai:
            _gemini_client(genai, return_value=SimpleNamespace(text="  \n"))
            provider = GeminiTextProvider(api_key="g-key", model="gemini-1.5-flash")
            with pytest.raises(ProviderError, match="empty"):
                await provider.complete("analyze", OPTIONS)


def _mock_http(response: MagicMock) -> AsyncMock:
    mock_http = AsyncMock()
    mock_http.post.return_value = response
    mock_http.__aenter__ = AsyncMock(return_value=mock_http)
    mock_http.__aexit__ = AsyncMock(return_value=None)
    return mock_http


@pytest.mark.unit
class TestVertexTextProvider:
    """Test the raw Vertex AI generateContent call."""

    def _provider(self) -> VertexTextProvider:
        return VertexTextProvider(
            access_token="ya29.token",
            project_id="proj",
            location="us-central1",
            model="gemini-1.5-flash",
        )

    @pytest.mark.asyncio
    async def test_complete(self) -> None:
        """POSTs to the regional endpoint with bearer auth."""
        mock_response = MagicMock()
        mock_response.raise_for_status = MagicMock()
        mock_response.json.return_value = {
            "candidates": [{"content": {"parts": [{"text": REPLY}]}}]
        }
        mock_http = _mock_http(mock_response)

        with patch("httpx.AsyncClient", return_value=mock_http):
            result = await self._provider().complete("analyze", OPTIONS)

        assert result == REPLY
        url = mock_http.post.call_args.args[0]
        assert url == (
            "https://us-central1-aiplatform.googleapis.com/v1/projects/proj"
            "/locations/us-central1/publishers/google/models/gemini-1.5-flash:generateContent"
        )
        kwargs = mock_http.post.call_args.kwargs
        assert kwargs["headers"]["Authorization"] == "Bearer ya29.token"
        body = kwargs["json"]
        assert body["generationConfig"] == {
            "temperature": 0.5,
            "maxOutputTokens": 1000,
            "topP": 0.8,
            "topK": 40,
        }
        assert body["systemInstruction"] == {"parts": [{"text": "You are a resume analyzer."}]}

    @pytest.mark.asyncio
    async def test_http_error_maps(self) -> None:
        """Non-2xx responses become ProviderError with the status code."""
        mock_response = MagicMock()
        mock_response.raise_for_status.side_effect = httpx.HTTPStatusError(
            "forbidden", request=FAKE_REQUEST, response=httpx.Response(403, request=FAKE_REQUEST)
        )
        with patch("httpx.AsyncClient", return_value=_mock_http(mock_response)):
            with pytest.raises(ProviderError, match="HTTP 403"):
                await self._provider().complete("analyze", OPTIONS)

    @pytest.mark.asyncio
    async def test_timeout_maps(self) -> None:
        """httpx timeouts become ProviderTimeoutError."""
        mock_http = _mock_http(MagicMock())
        mock_http.post.side_effect = httpx.ReadTimeout("slow", request=FAKE_REQUEST)
        with patch("httpx.AsyncClient", return_value=mock_http):
            with pytest.raises(ProviderTimeoutError):
                await self._provider().complete("analyze", OPTIONS)

    @pytest.mark.asyncio
    async def test_empty_candidates_raises(self) -> None:
        """No candidate text is an error."""
        mock_response = MagicMock()
        mock_response.raise_for_status = MagicMock()
        mock_response.json.return_value = {"candidates": []}
        with patch("httpx.AsyncClient", return_value=_mock_http(mock_response)):
            with pytest.raises(ProviderError, match="empty"):
                await self._provider().complete("analyze", OPTIONS)

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            ({"candidates": [{"content": {"parts": [{"text": "a"}, {"text": "b"}]}}]}, "ab"),
            ({"candidates": [{"finishReason": "SAFETY"}]}, ""),
            ({"candidates": ["oops"]}, ""),
            ([], ""),
        ],
    )
    def test_extract_candidate_text(self, data: object, expected: str) -> None:
        """Candidate text is concatenated defensively."""
        assert _extract_candidate_text(data) == expected
