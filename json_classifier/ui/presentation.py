"""
Pure view models for the result region of the page.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Union

from json_classifier.ui.state import Failure, Outcome, Success

VERDICT_LABEL = "Contains Quantitative Data"
REASONING_LABEL = "Reasoning"
_BACKTICK_RUN = re.compile(r"`+")


@dataclass(frozen=True)
class ErrorView:
    message: str
    details: Optional[str] = None
    heading: str = "Error!"

    def as_markdown(self) -> str:
        lines = [f"**{self.heading}** {self.message}"]
        if self.details:
            lines.append("")
            lines.append(self.details)
        return "\n".join(lines)


@dataclass(frozen=True)
class ResultView:
    has_quantitative_data: bool
    reasoning: Optional[str] = None
    heading: str = "Classification Result"

    @property
    def verdict(self) -> str:
        return "Yes" if self.has_quantitative_data else "No"

    @property
    def verdict_line(self) -> str:
        return f"{VERDICT_LABEL}: {self.verdict}"

    def as_markdown(self) -> str:
        lines: List[str] = [f"### {self.heading}", "", f"**{VERDICT_LABEL}:** {self.verdict}"]
        if self.reasoning:
            fence = _fence_for(self.reasoning)
            lines.extend(["", f"**{REASONING_LABEL}:**", "", f"{fence}text", self.reasoning, fence])
        return "\n".join(lines)


OutcomeView = Union[ErrorView, ResultView]


def render_outcome(outcome: Optional[Outcome]) -> Optional[OutcomeView]:
    """
    Map the current outcome to what the page shows; errors win, Pending shows nothing.
    """

    if isinstance(outcome, Failure):
        return ErrorView(message=outcome.error.message, details=outcome.error.details or None)
    if isinstance(outcome, Success):
        result = outcome.result
        return ResultView(
            has_quantitative_data=result.has_quantitative_data,
            reasoning=result.reasoning or None,
        )
    return None


def _fence_for(text: str) -> str:
    # Longer than any backtick run in the text so the block cannot be closed early.
    longest = max((len(run) for run in _BACKTICK_RUN.findall(text)), default=0)
    return "`" * max(3, longest + 1)


__all__ = ["ErrorView", "OutcomeView", "ResultView", "render_outcome"]
