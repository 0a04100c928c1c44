"""Application settings using pydantic-settings."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for the HireWave resume analyzer."""

    model_config = SettingsConfigDict(env_prefix="HW_", env_file=".env", extra="ignore")

    # --- LLM provider ---
    llm_provider: Literal["gemini", "openai", "vertex", "anthropic", "none"] = Field(
        default="gemini",
        description="Generative text backend; 'none' always uses the keyword heuristic",
    )
    gemini_api_key: SecretStr | None = Field(
        default=None,
        description="Google AI Studio API key",
    )
    gemini_model: str = Field(
        default="gemini-1.5-flash",
        description="Gemini model ID",
    )
    openai_api_key: SecretStr | None = Field(
        default=None,
        description="OpenAI API key",
    )
    openai_model: str = Field(
        default="gpt-3.5-turbo",
        description="OpenAI chat model ID",
    )
    openai_base_url: str | None = Field(
        default=None,
        description="Override for OpenAI-compatible endpoints",
    )
    anthropic_api_key: SecretStr | None = Field(
        default=None,
        description="Anthropic API key for Claude models",
    )
    anthropic_model: str = Field(
        default="claude-haiku-4-5-20251001",
        description="Claude model ID",
    )
    vertex_access_token: SecretStr | None = Field(
        default=None,
        description="OAuth bearer token for Vertex AI",
    )
    vertex_project_id: str | None = Field(
        default=None,
        description="Google Cloud project hosting the Vertex AI endpoint",
    )
    vertex_location: str = Field(
        default="us-central1",
        description="Vertex AI region",
    )
    vertex_model: str = Field(
        default="gemini-1.5-flash",
        description="Vertex AI publisher model ID",
    )

    # --- Sampling ---
    llm_temperature: float = Field(
        default=0.5,
        ge=0.0,
        le=2.0,
        description="Sampling temperature; kept low for consistent JSON output",
    )
    llm_top_p: float = Field(default=0.8, gt=0.0, le=1.0, description="Nucleus sampling mass")
    llm_top_k: int = Field(default=40, ge=1, description="Top-k sampling (ignored by OpenAI)")
    llm_max_tokens: int = Field(default=1000, ge=1, description="Completion token cap")
    llm_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Hard timeout per provider call in seconds",
    )
    llm_max_attempts: int = Field(
        default=1,
        ge=1,
        le=5,
        description="Provider attempts per analysis; 1 disables retries",
    )
    max_resume_chars: int = Field(
        default=4000,
        ge=1,
        description="Resume text is cut to this many characters before prompting",
    )

    # --- Document fetching ---
    fetch_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for downloading a resume document",
    )
    fetch_max_pages: int = Field(
        default=50,
        ge=1,
        description="Only the first N pages of a PDF are parsed",
    )

    # --- Cache ---
    cache_enabled: bool = Field(
        default=True,
        description="Reuse analyses of unchanged resumes",
    )
    cache_dir: Path = Field(
        default=Path("./.cache/hirewave"),
        description="Directory for the diskcache analysis store",
    )
    cache_ttl_days: int = Field(
        default=30,
        ge=1,
        description="How long a cached analysis stays valid",
    )

    # --- Logging ---
    log_level: str = Field(default="INFO", description="Root log level")
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer",
    )

    @model_validator(mode="after")
    def validate_vertex_config(self) -> Settings:
        """Vertex AI needs a project to build its endpoint URL."""
        if self.llm_provider == "vertex" and not self.vertex_project_id:
            msg = "vertex_project_id required when llm_provider=vertex"
            raise ValueError(msg)
        return self

    def api_key_for(self, provider: str) -> SecretStr | None:
        """Return the credential configured for the given provider name."""
        keys: dict[str, SecretStr | None] = {
            "gemini": self.gemini_api_key,
            "openai": self.openai_api_key,
            "anthropic": self.anthropic_api_key,
            "vertex": self.vertex_access_token,
        }
        return keys.get(provider)
