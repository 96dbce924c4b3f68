"""
Lesson: the compiled problems of one document plus playback state.
"""

from __future__ import annotations

from collections.abc import Iterable

from src.lessons.item_marker import ItemMarker, Marks, MarkState
from src.lessons.metadata import Metadata
from src.lessons.problem import Problem


class Lesson:
    """
    Encapsulation of a lesson.

    The problem list is fixed when the lesson is created. Playback moves a
    cursor over the problems and records a mark for each attempt.
    """

    def __init__(self, problems: Iterable[Problem] = (), metadata: Metadata | None = None):
        self._problems: tuple[Problem, ...] = tuple(problems)
        self._metadata = metadata if metadata is not None else Metadata.create_from_source("")
        self._problem_index = 0
        self._marker = ItemMarker()

    def __len__(self) -> int:
        return len(self._problems)

    @property
    def metadata(self) -> Metadata:
        return self._metadata

    @property
    def problems(self) -> tuple[Problem, ...]:
        return self._problems

    @property
    def marks(self) -> Marks:
        return self._marker.marks

    @property
    def has_more_problems(self) -> bool:
        return self._problem_index < len(self._problems)

    def restart(self) -> None:
        """Move back to the first problem. Existing marks are kept."""
        self._problem_index = 0

    def clear_marks(self) -> None:
        """Discard all marks. Call alongside :meth:`restart` for a true retry."""
        self._marker.reset()

    def get_next_problem(self) -> Problem | None:
        """Return the next problem and advance, or None when exhausted."""
        if not self.has_more_problems:
            return None
        problem = self._problems[self._problem_index]
        self._problem_index += 1
        return problem

    def peek_at_next_problem(self) -> Problem | None:
        """Return the next problem without advancing."""
        return self._problems[self._problem_index] if self.has_more_problems else None

    def mark_problem(self, problem: Problem, state: MarkState) -> None:
        self._marker.mark_item(problem, state)
