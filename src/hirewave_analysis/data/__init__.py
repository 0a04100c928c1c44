"""Static reference data for resume analysis."""
