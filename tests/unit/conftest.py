"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from tests.mocks.mock_providers import FakeTextProvider
from tests.mocks.mock_settings import make_settings

SAMPLE_RESUME = (
    "Jane Doe\n"
    "Senior Software Engineer with 6 years of experience building Python and AWS services.\n"
    "Led a team migrating Docker workloads to Kubernetes; improved latency by 40%.\n"
    "Bachelor of Science in Computer Science, State University."
)


@pytest.fixture
def mock_settings() -> MagicMock:
    """Return a MagicMock Settings with sensible defaults."""
    return make_settings()


@pytest.fixture
def fake_provider() -> FakeTextProvider:
    """Return a provider that answers with a valid fenced analysis."""
    return FakeTextProvider()


@pytest.fixture
def sample_resume() -> str:
    """Return a short resume with several dictionary terms."""
    return SAMPLE_RESUME


@pytest.fixture
def tmp_cache_dir(tmp_path: Path) -> Path:
    """Return a temporary directory for the analysis cache."""
    d = tmp_path / "cache"
    d.mkdir()
    return d
