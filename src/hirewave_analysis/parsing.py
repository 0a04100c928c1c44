"""Extraction and normalization of JSON analyses embedded in LLM completions.

Providers are asked for bare JSON but routinely wrap it in markdown fences
or surround it with prose. Extraction precedence:

1. the first fenced block (optionally tagged ``json``),
2. the greedy span from the first ``{`` to the last ``}``,
3. the whole response.
"""

from __future__ import annotations

import json
import math
import re
from collections.abc import Mapping

from hirewave_core.constants import DEFAULT_ATS_SCORE, MAX_ATS_SCORE, MIN_ATS_SCORE
from hirewave_core.exceptions import ResponseParseError
from hirewave_core.models.analysis import AnalysisResult

FENCED_BLOCK_PATTERN = re.compile(r"```(?:json)?[ \t]*\r?\n?(.*?)```", re.DOTALL | re.IGNORECASE)
BARE_OBJECT_PATTERN = re.compile(r"\{.*\}", re.DOTALL)

LIST_FIELDS = ("strengths", "weaknesses", "suggestions")
SCORE_KEYS = ("atsScore", "ats_score")


def extract_json_text(response: str) -> str:
    """Return the substring of ``response`` most likely to hold the JSON object."""
    fenced = FENCED_BLOCK_PATTERN.search(response)
    if fenced:
        return fenced.group(1).strip()
    bare = BARE_OBJECT_PATTERN.search(response)
    if bare:
        return bare.group(0)
    return response.strip()


def parse_analysis_response(response: str) -> AnalysisResult:
    """Parse a provider completion into a normalized AnalysisResult.

    Raises:
        ResponseParseError: If no JSON object can be decoded from the response.
    """
    candidate = extract_json_text(response)
    try:
        data = json.loads(candidate)
    except (json.JSONDecodeError, RecursionError) as e:
        msg = f"Provider response is not valid JSON: {e}"
        raise ResponseParseError(msg) from e

    if not isinstance(data, dict):
        msg = f"Expected a JSON object, got {type(data).__name__}"
        raise ResponseParseError(msg)

    return normalize_analysis(data)


def normalize_analysis(data: Mapping[str, object]) -> AnalysisResult:
    """Fill every output field, defaulting each missing one independently."""
    lists = {field: _coerce_str_list(data.get(field)) for field in LIST_FIELDS}
    raw_score = next((data[key] for key in SCORE_KEYS if key in data), None)
    return AnalysisResult(
        strengths=lists["strengths"],
        weaknesses=lists["weaknesses"],
        ats_score=_coerce_score(raw_score),
        suggestions=lists["suggestions"],
        source="provider",
    )


def _coerce_str_list(value: object) -> list[str]:
    """Turn a parsed JSON value into a list of strings."""
    if isinstance(value, str):
        return [value] if value.strip() else []
    if not isinstance(value, list):
        return []
    items: list[str] = []
    for item in value:
        if item is None:
            continue
        if isinstance(item, str):
            items.append(item)
        elif isinstance(item, (int, float, bool)):
            items.append(str(item))
        else:
            items.append(json.dumps(item, sort_keys=True))
    return items


def _coerce_score(value: object) -> int:
    """Turn a parsed atsScore into an int in [0, 100], or the default."""
    if value is None or isinstance(value, bool):
        return DEFAULT_ATS_SCORE
    if isinstance(value, str):
        try:
            value = float(value.strip().rstrip("%"))
        except ValueError:
            return DEFAULT_ATS_SCORE
    if isinstance(value, int):
        return max(MIN_ATS_SCORE, min(MAX_ATS_SCORE, value))
    if not isinstance(value, float) or not math.isfinite(value):
        return DEFAULT_ATS_SCORE
    return max(MIN_ATS_SCORE, min(MAX_ATS_SCORE, round(value)))
