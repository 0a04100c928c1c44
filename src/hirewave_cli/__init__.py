"""HireWave command-line interface."""
