"""
Lesson Source: split plain lesson text into problems and compile them.

A lesson is written as blocks introduced by marker lines. A marker is one
of the characters below wrapped in one or more parentheses, optionally
repeated, at the start of a line (up to three leading spaces)::

    (i)   intro
    (?)   question
    (=)   right answer
    (x)   wrong answer
    (+)   explanation          also (&)
    (#)   break between problems  also (_)

So ``(i)``, ``((i))`` and ``(((ii)))`` are all intro markers. Text after the
marker on the same line is part of the block. Text before the first marker
is the lesson's metadata header.

A new problem starts after a break, or when an intro or question marker is
found and the current problem already has an intro or question
respectively. Answers and explanations never start a new problem.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from loguru import logger

from src.lessons.lesson import Lesson
from src.lessons.metadata import Metadata
from src.lessons.problem import Problem
from src.lessons.problem_source import ProblemSource
from src.lessons.text_item import TextItem


class LessonSourceError(Exception):
    """Raised when the compiler is given something other than text."""


class ProblemItemKey(str, Enum):
    """Keys for splitting the problem source into parts."""

    INTRO = "i"
    QUESTION = "?"
    RIGHT_ANSWER = "="
    WRONG_ANSWER = "x"
    EXPLANATION = "+"
    QUESTION_BREAK = "#"


KEY_ALIASES = {
    "&": ProblemItemKey.EXPLANATION,
    "_": ProblemItemKey.QUESTION_BREAK,
}

MARKER_LINE = re.compile(r"^ {0,3}\(+([i?=x+#&_])\1*\)+[ \t]*(.*)$", re.IGNORECASE)


@dataclass(frozen=True)
class LineDetails:
    key: ProblemItemKey | None
    content: str


def get_line_details(line: str) -> LineDetails:
    """
    Get the marker key and the content following it.

    If the line is not a marker line, the key is None and the content is the
    whole line. Line terminators are not included.
    """
    match = MARKER_LINE.match(line)
    if not match:
        return LineDetails(key=None, content=line)
    character = match.group(1).lower()
    key = KEY_ALIASES.get(character) or ProblemItemKey(character)
    return LineDetails(key=key, content=match.group(2))


class LessonSource:
    """
    The source text of a lesson broken into problem sources.

    Create instances with :meth:`create_from_source`.
    """

    def __init__(self) -> None:
        self.meta_source = ""
        self.problem_sources: list[ProblemSource] = []

    @classmethod
    def create_from_source(cls, source: str) -> LessonSource:
        """Break the source text into :class:`ProblemSource` blocks."""
        if not isinstance(source, str):
            raise LessonSourceError(f"Lesson source must be text, not {type(source).__name__}")

        lesson_source = cls()
        current_key: ProblemItemKey | None = None
        problem_source = lesson_source._create_problem_source()
        data = ""

        for line in re.split(r"\r\n|\n", source):
            details = get_line_details(line)
            if details.key is None:
                data += f"{details.content}\n"
                continue

            lesson_source._add_data_to_problem_source(problem_source, current_key, data)
            data = f"{details.content}\n" if details.content else ""
            if lesson_source._is_new_problem(current_key, details.key, problem_source):
                problem_source = lesson_source._create_problem_source()
            current_key = details.key

        if data:
            lesson_source._add_data_to_problem_source(problem_source, current_key, data)
        return lesson_source

    def _create_problem_source(self) -> ProblemSource:
        problem_source = ProblemSource()
        self.problem_sources.append(problem_source)
        return problem_source

    @staticmethod
    def _is_new_problem(
        last_key: ProblemItemKey | None,
        new_key: ProblemItemKey,
        current_problem: ProblemSource,
    ) -> bool:
        if last_key is ProblemItemKey.QUESTION_BREAK:
            return True
        if new_key is ProblemItemKey.INTRO:
            return bool(current_problem.intro_source)
        if new_key is ProblemItemKey.QUESTION:
            return bool(current_problem.question_source)
        return False

    def _add_data_to_problem_source(
        self,
        problem: ProblemSource,
        key: ProblemItemKey | None,
        data: str,
    ) -> None:
        """Add data to the part of the problem selected by key. No key means metadata."""
        if key is None:
            self.meta_source = data
        elif key is ProblemItemKey.INTRO:
            problem.intro_source = data
        elif key is ProblemItemKey.QUESTION:
            problem.question_source = data
        elif key is ProblemItemKey.RIGHT_ANSWER:
            problem.add_right_answer_source(data)
        elif key is ProblemItemKey.WRONG_ANSWER:
            problem.add_wrong_answer_source(data)
        elif key is ProblemItemKey.EXPLANATION:
            problem.explanation_source = data

    def convert_to_lesson(self) -> Lesson:
        """Render every problem source and assemble the :class:`Lesson`."""
        metadata = Metadata.create_from_source(self.meta_source)
        problems = [
            self._convert_problem(problem_source, metadata)
            for problem_source in self.problem_sources
            if not problem_source.is_empty
        ]
        logger.debug(f"Compiled {len(problems)} problems with {len(metadata)} metadata entries")
        return Lesson(problems=problems, metadata=metadata)

    @staticmethod
    def _convert_problem(problem_source: ProblemSource, metadata: Metadata) -> Problem:
        return Problem(
            intro=TextItem.create_from_source(problem_source.intro_source, metadata),
            question=TextItem.create_from_source(problem_source.question_source, metadata),
            explanation=TextItem.create_from_source(problem_source.explanation_source, metadata),
            right_answers=[
                TextItem.create_from_source(source, metadata) for source in problem_source.right_answer_sources
            ],
            wrong_answers=[
                TextItem.create_from_source(source, metadata) for source in problem_source.wrong_answer_sources
            ],
        )


def compile_lesson(source: str) -> Lesson:
    """Compile lesson text into a :class:`Lesson`."""
    return LessonSource.create_from_source(source).convert_to_lesson()
