"""
Unit tests for Lesson playback and the item marker.
"""
import pytest

from src.lessons.item_marker import ItemMarker, MarkState
from src.lessons.lesson import Lesson
from src.lessons.lesson_source import compile_lesson


class TestItemMarker:
    """Score keeping."""

    def test_counts(self):
        """Marks are counted by state and kept in order."""
        marker = ItemMarker()
        marker.mark_item("a", MarkState.CORRECT)
        marker.mark_item("b", MarkState.CORRECT)
        marker.mark_item("c", MarkState.INCORRECT)
        marker.mark_item("d", MarkState.SKIPPED)
        marks = marker.marks
        assert (marks.correct, marks.incorrect, marks.skipped) == (2, 1, 1)
        assert marks.total == 4
        assert [marked.item for marked in marks.marked_items] == ["a", "b", "c", "d"]

    def test_reset(self):
        """Reset discards every mark."""
        marker = ItemMarker()
        marker.mark_item("a", MarkState.CORRECT)
        marker.reset()
        assert marker.marks.total == 0
        assert marker.marks.marked_items == []

    def test_marks_are_a_snapshot(self):
        """Marks do not change after they are read."""
        marker = ItemMarker()
        marks = marker.marks
        marker.mark_item("a", MarkState.CORRECT)
        assert marks.total == 0


class TestLesson:
    """Problem cursor and marks."""

    @pytest.fixture
    def lesson(self, sample_lesson_text):
        return compile_lesson(sample_lesson_text)

    def test_iteration(self, lesson):
        """Problems are returned in order until exhausted."""
        seen = []
        while lesson.has_more_problems:
            seen.append(lesson.get_next_problem())
        assert seen == list(lesson.problems)
        assert lesson.get_next_problem() is None
        assert lesson.peek_at_next_problem() is None

    def test_peek_does_not_advance(self, lesson):
        """Peeking leaves the cursor in place."""
        first = lesson.peek_at_next_problem()
        assert lesson.peek_at_next_problem() is first
        assert lesson.get_next_problem() is first

    def test_restart_keeps_marks(self, lesson):
        """Restart rewinds the cursor but keeps marks."""
        problem = lesson.get_next_problem()
        lesson.mark_problem(problem, MarkState.CORRECT)
        lesson.restart()
        assert lesson.peek_at_next_problem() is problem
        assert lesson.marks.correct == 1

    def test_clear_marks(self, lesson):
        """clear_marks discards the marks."""
        lesson.mark_problem(lesson.get_next_problem(), MarkState.INCORRECT)
        lesson.clear_marks()
        assert lesson.marks.total == 0

    def test_problems_are_fixed(self, lesson):
        """The problem list cannot be changed."""
        with pytest.raises(AttributeError):
            lesson.problems.append(None)

    def test_empty_lesson(self):
        """A lesson can be created with no problems."""
        lesson = Lesson()
        assert len(lesson) == 0
        assert not lesson.has_more_problems
        assert len(lesson.metadata) == 0
