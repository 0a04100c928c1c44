"""Fake generative text providers for analyzer and service tests."""

from __future__ import annotations

import asyncio
import json

from hirewave_core.interfaces.provider import CompletionOptions

SAMPLE_ANALYSIS: dict[str, object] = {
    "strengths": [
        "Strong Python and cloud background",
        "Clear progression across roles",
        "Quantified delivery impact",
    ],
    "weaknesses": [
        "Summary section is generic",
        "Few leadership examples",
        "Dates are formatted inconsistently",
    ],
    "atsScore": 82,
    "suggestions": [
        "Tailor the summary to the target role",
        "Add a leadership bullet per role",
        "Use one date format throughout",
    ],
}


def fenced(payload: dict[str, object]) -> str:
    """Wrap a payload the way chat models usually answer."""
    return f"Here is the analysis:\n```json\n{json.dumps(payload, indent=2)}\n```\n"


class FakeTextProvider:
    """Provider double that replays scripted responses and records prompts.

    Each scripted item is either a string to return or an exception to raise.
    The last item repeats once the script is exhausted.
    """

    name = "fake"

    def __init__(self, *responses: str | BaseException, delay_seconds: float = 0.0) -> None:
        self._responses = list(responses) or [fenced(SAMPLE_ANALYSIS)]
        self.delay_seconds = delay_seconds
        self.prompts: list[str] = []
        self.options: list[CompletionOptions] = []

    @property
    def call_count(self) -> int:
        return len(self.prompts)

    async def complete(self, prompt: str, options: CompletionOptions) -> str:
        self.prompts.append(prompt)
        self.options.append(options)
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        index = min(len(self.prompts) - 1, len(self._responses) - 1)
        response = self._responses[index]
        if isinstance(response, BaseException):
            raise response
        return response
