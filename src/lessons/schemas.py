"""
Pydantic models for exporting a compiled lesson.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from src.lessons.lesson import Lesson
from src.lessons.problem import Problem, QuestionType
from src.lessons.text_item import TextItem


class TextItemExport(BaseModel):
    """Rendered text item."""

    html: str = Field(default="", description="Rendered HTML")
    plain_text: str = Field(default="", description="HTML with tags removed")
    first_word: str = Field(default="", description="First word of the rendered text")
    missing_words: list[str] = Field(default_factory=list, description="Missing words in order")

    @classmethod
    def from_text_item(cls, item: TextItem) -> TextItemExport:
        return cls(
            html=item.html,
            plain_text=item.plain_text,
            first_word=item.first_word,
            missing_words=list(item.missing_words),
        )


class ProblemExport(BaseModel):
    """One compiled problem."""

    question_type: QuestionType
    intro: TextItemExport
    question: TextItemExport
    explanation: TextItemExport
    right_answers: list[TextItemExport] = Field(default_factory=list)
    wrong_answers: list[TextItemExport] = Field(default_factory=list)

    @classmethod
    def from_problem(cls, problem: Problem) -> ProblemExport:
        return cls(
            question_type=problem.question_type,
            intro=TextItemExport.from_text_item(problem.intro),
            question=TextItemExport.from_text_item(problem.question),
            explanation=TextItemExport.from_text_item(problem.explanation),
            right_answers=[TextItemExport.from_text_item(item) for item in problem.right_answers],
            wrong_answers=[TextItemExport.from_text_item(item) for item in problem.wrong_answers],
        )


class LessonExport(BaseModel):
    """A compiled lesson with its metadata."""

    metadata: dict[str, str] = Field(default_factory=dict, description="Header values, keys in upper case")
    problems: list[ProblemExport] = Field(default_factory=list)

    @classmethod
    def from_lesson(cls, lesson: Lesson) -> LessonExport:
        return cls(
            metadata=lesson.metadata.as_dict(),
            problems=[ProblemExport.from_problem(problem) for problem in lesson.problems],
        )
