"""Core settings, models and interfaces for HireWave resume analysis."""
