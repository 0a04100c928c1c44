"""Factory for the configured generative text provider."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from hirewave_core.constants import PLACEHOLDER_API_KEYS
from hirewave_core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from pydantic import SecretStr

    from hirewave_core.config.settings import Settings
    from hirewave_core.interfaces.provider import GenerativeTextProvider

logger = structlog.get_logger()


def usable_credential(secret: SecretStr | None) -> str | None:
    """Return the credential value, or None when absent or a known placeholder."""
    if secret is None:
        return None
    value = secret.get_secret_value().strip()
    if not value or value.lower() in PLACEHOLDER_API_KEYS:
        return None
    return value


def build_text_provider(settings: Settings) -> GenerativeTextProvider:
    """Build the provider selected by ``settings.llm_provider``.

    Raises:
        ConfigurationError: If the provider is disabled or its credential is unusable.
    """
    provider = settings.llm_provider
    if provider == "none":
        msg = "Generative provider disabled (llm_provider=none)"
        raise ConfigurationError(msg)

    credential = usable_credential(settings.api_key_for(provider))
    if credential is None:
        msg = f"Missing or placeholder credential for llm_provider={provider}"
        raise ConfigurationError(msg)

    if provider == "gemini":
        from hirewave_analysis.providers.gemini_provider import GeminiTextProvider

        return GeminiTextProvider(api_key=credential, model=settings.gemini_model)

    if provider == "openai":
        from hirewave_analysis.providers.openai_provider import OpenAITextProvider

        return OpenAITextProvider(
            api_key=credential,
            model=settings.openai_model,
            base_url=settings.openai_base_url,
        )

    if provider == "anthropic":
        from hirewave_analysis.providers.anthropic_provider import AnthropicTextProvider

        return AnthropicTextProvider(api_key=credential, model=settings.anthropic_model)

    if provider == "vertex":
        from hirewave_analysis.providers.vertex_provider import VertexTextProvider

        if not settings.vertex_project_id:
            msg = "vertex_project_id required when llm_provider=vertex"
            raise ConfigurationError(msg)
        return VertexTextProvider(
            access_token=credential,
            project_id=settings.vertex_project_id,
            location=settings.vertex_location,
            model=settings.vertex_model,
        )

    msg = f"Unsupported llm_provider='{provider}'"
    raise ConfigurationError(msg)


def create_text_provider(settings: Settings) -> GenerativeTextProvider | None:
    """Return the configured provider, or None so callers use the heuristic."""
    try:
        return build_text_provider(settings)
    except ConfigurationError as e:
        logger.warning("llm_provider_unavailable", provider=settings.llm_provider, reason=str(e))
        return None
