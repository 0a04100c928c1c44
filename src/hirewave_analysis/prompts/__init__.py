"""Prompt templates for resume analysis."""

from hirewave_analysis.prompts.resume_analysis import (
    RESUME_ANALYSIS_PROMPT,
    RESUME_ANALYSIS_SYSTEM,
    render_resume_prompt,
)

__all__ = [
    "RESUME_ANALYSIS_PROMPT",
    "RESUME_ANALYSIS_SYSTEM",
    "render_resume_prompt",
]
