"""Resume analysis prompt template (v1)."""

from __future__ import annotations

RESUME_ANALYSIS_SYSTEM = """\
You are a professional resume analyzer. You review resumes the way a senior \
recruiter and an applicant tracking system would, and you answer only with JSON.
"""

RESUME_ANALYSIS_PROMPT = """\
Analyze the following resume text and provide detailed professional feedback.

RESUME TEXT:
{resume_text}

Provide your analysis in the following JSON format only, with no additional text or explanation:
{{
  "strengths": ["strength1", "strength2", "strength3"],
  "weaknesses": ["weakness1", "weakness2", "weakness3"],
  "atsScore": number between 0-100,
  "suggestions": ["suggestion1", "suggestion2", "suggestion3", "suggestion4"]
}}

Make sure to:
1. Identify 3-5 key strengths of the resume
2. Identify 3-5 areas for improvement
3. Provide an ATS score from 0-100 based on keyword relevance, formatting, and content quality
4. Offer 3-5 specific suggestions for improving the resume

Return ONLY the JSON with no additional text or explanation.
"""


def render_resume_prompt(resume_text: str) -> str:
    """Fill the template with (already truncated) resume text."""
    return RESUME_ANALYSIS_PROMPT.format(resume_text=resume_text)
