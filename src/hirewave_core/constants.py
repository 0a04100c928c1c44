"""Shared constants for HireWave resume analysis."""

from __future__ import annotations

# Prompt versions: increment when prompt templates change
RESUME_ANALYSIS_PROMPT_VERSION = "v1"

# Score used whenever a provider omits atsScore or returns an unusable value
DEFAULT_ATS_SCORE = 70
MIN_ATS_SCORE = 0
MAX_ATS_SCORE = 100

# Keyword heuristic: atsScore = min(CAP, BASE + PER_SKILL * matched_skills)
HEURISTIC_BASE_SCORE = 50
HEURISTIC_POINTS_PER_SKILL = 2
HEURISTIC_SCORE_CAP = 75
HEURISTIC_SKILLS_SHOWN = 3

# Score reported when the resume document itself could not be read
UNAVAILABLE_ATS_SCORE = 60

# Prefix of every document-fetch failure reason
FETCH_ERROR_PREFIX = "Error extracting text from PDF"
FETCH_ERROR_MESSAGE = (
    f"{FETCH_ERROR_PREFIX}. Please check the PDF file format or try uploading again."
)

# PDF parsing
MAX_PDF_SIZE_MB = 10
MIN_EXTRACTED_CHARS = 50

# Credentials that are present but obviously not real
PLACEHOLDER_API_KEYS = frozenset(
    {
        "dummy-key",
        "dummy",
        "changeme",
        "your_api_key",
        "your-api-key",
        "your_api_key_here",
        "xxx",
        "none",
        "null",
    }
)

# Cache key namespace
ANALYSIS_CACHE_PREFIX = "analysis"
