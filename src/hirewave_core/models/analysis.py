"""Resume analysis result and persisted record models."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from hirewave_core.constants import (
    DEFAULT_ATS_SCORE,
    MAX_ATS_SCORE,
    MIN_ATS_SCORE,
    RESUME_ANALYSIS_PROMPT_VERSION,
)

AnalysisSource = Literal["provider", "heuristic", "static", "unavailable"]

WIRE_FIELDS = frozenset({"strengths", "weaknesses", "ats_score", "suggestions"})


class AnalysisResult(BaseModel):
    """Structured critique of a resume.

    Serialized for calling systems as
    ``{strengths, weaknesses, atsScore, suggestions}``; ``source`` stays
    internal and tells callers which path produced the result.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    strengths: list[str] = Field(default_factory=list, description="Observed strengths")
    weaknesses: list[str] = Field(default_factory=list, description="Areas to improve")
    ats_score: int = Field(
        default=DEFAULT_ATS_SCORE,
        ge=MIN_ATS_SCORE,
        le=MAX_ATS_SCORE,
        alias="atsScore",
        description="Estimated applicant-tracking-system compatibility",
    )
    suggestions: list[str] = Field(default_factory=list, description="Actionable edits")
    source: AnalysisSource = Field(
        default="provider", description="Which path produced this analysis"
    )

    def to_wire(self) -> dict[str, object]:
        """Return the camelCase payload stored and served to callers."""
        return self.model_dump(by_alias=True, include=set(WIRE_FIELDS))

    @property
    def is_fallback(self) -> bool:
        """True when the analysis did not come from a generative provider."""
        return self.source != "provider"


class ResumeAnalysisRecord(BaseModel):
    """An analysis bound to the resume content it was computed from."""

    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    ats_score: int = Field(ge=MIN_ATS_SCORE, le=MAX_ATS_SCORE, description="ATS score")
    suggestions: list[str] = Field(default_factory=list)
    source: AnalysisSource = Field(description="Which path produced this analysis")
    resume_hash: str | None = Field(
        default=None, description="SHA-256 of the analyzed resume text"
    )
    prompt_version: str = Field(
        default=RESUME_ANALYSIS_PROMPT_VERSION,
        description="Prompt template version used for the analysis",
    )
    analyzed_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="When the analysis ran"
    )

    @classmethod
    def from_result(
        cls, result: AnalysisResult, resume_hash: str | None = None
    ) -> ResumeAnalysisRecord:
        """Build a record from a fresh analysis result."""
        return cls(
            strengths=list(result.strengths),
            weaknesses=list(result.weaknesses),
            ats_score=result.ats_score,
            suggestions=list(result.suggestions),
            source=result.source,
            resume_hash=resume_hash,
        )

    def to_result(self) -> AnalysisResult:
        """Drop the bookkeeping fields and return the bare analysis."""
        return AnalysisResult(
            strengths=list(self.strengths),
            weaknesses=list(self.weaknesses),
            ats_score=self.ats_score,
            suggestions=list(self.suggestions),
            source=self.source,
        )
