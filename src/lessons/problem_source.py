"""
Source describing a problem, before rendering.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ProblemSource:
    """Raw text for each part of one problem."""

    intro_source: str = ""
    question_source: str = ""
    explanation_source: str = ""
    right_answer_sources: list[str] = field(default_factory=list)
    wrong_answer_sources: list[str] = field(default_factory=list)

    def add_right_answer_source(self, data: str) -> None:
        self.right_answer_sources.append(data)

    def add_wrong_answer_source(self, data: str) -> None:
        self.wrong_answer_sources.append(data)

    @property
    def is_empty(self) -> bool:
        return not (
            self.intro_source.strip()
            or self.question_source.strip()
            or self.explanation_source.strip()
            or self.right_answer_sources
            or self.wrong_answer_sources
        )
