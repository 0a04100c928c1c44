"""Configuration for HireWave."""

from hirewave_core.config.settings import Settings

__all__ = ["Settings"]
