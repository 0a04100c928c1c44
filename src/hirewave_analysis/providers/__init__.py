"""Generative text provider implementations and factory."""

from hirewave_analysis.providers.factory import (
    build_text_provider,
    create_text_provider,
    usable_credential,
)

__all__ = [
    "build_text_provider",
    "create_text_provider",
    "usable_credential",
]
