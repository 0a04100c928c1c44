"""Infrastructure adapters for HireWave."""
