"""Deterministic keyword-heuristic scorer used when no provider answers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

import structlog

from hirewave_analysis.data.keywords import KEYWORD_DICTIONARY
from hirewave_core.constants import (
    DEFAULT_ATS_SCORE,
    HEURISTIC_BASE_SCORE,
    HEURISTIC_POINTS_PER_SKILL,
    HEURISTIC_SCORE_CAP,
    HEURISTIC_SKILLS_SHOWN,
    UNAVAILABLE_ATS_SCORE,
)
from hirewave_core.models.analysis import AnalysisResult

logger = structlog.get_logger()

FALLBACK_STRENGTHS_TAIL = (
    "Clear presentation of information",
    "Structured format",
)
FALLBACK_NO_SKILLS_STRENGTH = "Resume submitted"
FALLBACK_WEAKNESSES = (
    "Could benefit from more quantifiable achievements",
    "Consider adding more industry-specific keywords",
    "Format could be more ATS-friendly",
)
FALLBACK_SUGGESTIONS = (
    "Add more quantifiable results",
    "Include more keywords from job descriptions",
    "Ensure consistent formatting throughout",
    "Highlight most relevant skills first",
)

STATIC_STRENGTHS = (
    "Resume submitted successfully",
    "Information provided in structured format",
    "Basic qualifications included",
)
STATIC_WEAKNESSES = (
    "Could benefit from more specific details",
    "Consider tailoring to specific job descriptions",
    "Add more quantifiable achievements",
)
STATIC_SUGGESTIONS = (
    "Add more specific achievements with metrics",
    "Include relevant keywords from job descriptions",
    "Ensure consistent formatting throughout",
    "Highlight your most impressive accomplishments",
)

UNAVAILABLE_STRENGTHS = ("Resume received", "Application processed")
UNAVAILABLE_WEAKNESSES = ("Analysis encountered technical difficulties",)
UNAVAILABLE_SUGGESTIONS = (
    "Try analysis again later",
    "Ensure resume is properly formatted",
    "Include relevant keywords from job descriptions",
)

# Characters that make a neighbouring match part of a longer token ("c++", "c#")
_TOKEN_CHARS = r"a-z0-9+#"


@dataclass(frozen=True)
class Keyword:
    """A dictionary term found in resume text."""

    word: str
    category: str


@lru_cache(maxsize=None)
def _term_pattern(term: str) -> re.Pattern[str]:
    """Compile a whole-term matcher so 'java' does not hit 'javascript'."""
    return re.compile(rf"(?<![{_TOKEN_CHARS}]){re.escape(term)}(?![{_TOKEN_CHARS}])")


def extract_keywords(text: str) -> list[Keyword]:
    """Return every dictionary term present in ``text``, in dictionary order."""
    normalized = text.lower()
    found: list[Keyword] = []
    for category, terms in KEYWORD_DICTIONARY.items():
        for term in terms:
            if _term_pattern(term).search(normalized):
                found.append(Keyword(word=term, category=category))
    return found


def heuristic_score(skill_count: int) -> int:
    """Score a resume from the number of distinct skill terms it mentions."""
    return min(HEURISTIC_SCORE_CAP, HEURISTIC_BASE_SCORE + HEURISTIC_POINTS_PER_SKILL * skill_count)


def heuristic_analysis(text: str) -> AnalysisResult:
    """Build a keyword-based analysis of ``text``."""
    keywords = extract_keywords(text)
    skills = [k.word for k in keywords if k.category == "skill"]

    if skills:
        headline = f"Technical skills: {', '.join(skills[:HEURISTIC_SKILLS_SHOWN])}"
    else:
        headline = FALLBACK_NO_SKILLS_STRENGTH

    logger.debug(
        "heuristic_keywords",
        skills=len(skills),
        education=sum(1 for k in keywords if k.category == "education"),
        experience=sum(1 for k in keywords if k.category == "experience"),
    )
    return AnalysisResult(
        strengths=[headline, *FALLBACK_STRENGTHS_TAIL],
        weaknesses=list(FALLBACK_WEAKNESSES),
        ats_score=heuristic_score(len(skills)),
        suggestions=list(FALLBACK_SUGGESTIONS),
        source="heuristic",
    )


def static_analysis() -> AnalysisResult:
    """Return the fixed analysis used when even the heuristic fails."""
    return AnalysisResult(
        strengths=list(STATIC_STRENGTHS),
        weaknesses=list(STATIC_WEAKNESSES),
        ats_score=DEFAULT_ATS_SCORE,
        suggestions=list(STATIC_SUGGESTIONS),
        source="static",
    )


def unavailable_analysis() -> AnalysisResult:
    """Return the basic analysis reported when the resume could not be read."""
    return AnalysisResult(
        strengths=list(UNAVAILABLE_STRENGTHS),
        weaknesses=list(UNAVAILABLE_WEAKNESSES),
        ats_score=UNAVAILABLE_ATS_SCORE,
        suggestions=list(UNAVAILABLE_SUGGESTIONS),
        source="unavailable",
    )
