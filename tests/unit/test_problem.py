"""
Unit tests for Problem question type classification.

Run: pytest tests/unit/test_problem.py -v
"""
import pytest

from src.lessons.problem import Problem, QuestionType
from src.lessons.text_item import TextItem


def make_problem(question, right=(), wrong=()):
    return Problem(
        question=TextItem.create_from_source(question),
        right_answers=[TextItem.create_from_source(source) for source in right],
        wrong_answers=[TextItem.create_from_source(source) for source in wrong],
    )


class TestQuestionType:
    """Question type is derived from content."""

    def test_simple(self):
        """One right answer is a simple question."""
        problem = make_problem("What is 2 + 2?", right=["4"], wrong=["5"])
        assert problem.question_type is QuestionType.SIMPLE

    def test_multi(self):
        """Several right answers is a multi question."""
        problem = make_problem("Pick the even numbers.", right=["2", "4"], wrong=["3"])
        assert problem.question_type is QuestionType.MULTI

    def test_fill(self):
        """Missing words with content make a fill question."""
        problem = make_problem("The sky is ...blue.", wrong=["green"])
        assert problem.question_type is QuestionType.FILL

    def test_order(self):
        """One empty missing word at the end makes an order question."""
        problem = make_problem("Put these in order ...", right=["one", "two", "three"])
        assert problem.question_type is QuestionType.ORDER

    def test_order_with_trailing_emphasis(self):
        """Emphasis before the final gap still gives an order question."""
        problem = make_problem("*Order these* ...", right=["a", "b"])
        assert problem.question_type is QuestionType.ORDER

    def test_empty_missing_word_in_middle_is_not_order(self):
        """An empty gap that is not last falls through to the answers."""
        problem = make_problem("Put ... here", right=["it"])
        assert problem.question_type is QuestionType.SIMPLE

    def test_mixed_missing_words_are_not_fill(self):
        """Empty and filled gaps together are not a fill question."""
        problem = make_problem("A ...word and ... gap", right=["x", "y"])
        assert problem.question_type is QuestionType.MULTI

    def test_slide_without_question(self):
        """No question makes a slide."""
        problem = Problem(intro=TextItem.create_from_source("Just information"))
        assert problem.question_type is QuestionType.SLIDE

    def test_slide_without_answers(self):
        """A question without answers is a slide."""
        assert make_problem("A question nobody answers?").question_type is QuestionType.SLIDE

    def test_type_follows_answers(self):
        """The type is worked out again on each read."""
        problem = make_problem("Question?", right=["a"])
        assert problem.question_type is QuestionType.SIMPLE
        problem.right_answers.append(TextItem.create_from_source("b"))
        assert problem.question_type is QuestionType.MULTI

    def test_value_is_serialisable_text(self):
        """Question types have plain string values."""
        assert QuestionType.ORDER.value == "order"


class TestFirstWords:
    """First words of answers."""

    @pytest.fixture
    def problem(self):
        return make_problem("Capital of France?", right=["Paris, of course"], wrong=["**London** town", "Rome"])

    def test_first_words_of_right_answers(self, problem):
        """First words of the right answers keep punctuation."""
        assert problem.first_words_of_right_answers == ["Paris,"]

    def test_first_words_of_wrong_answers(self, problem):
        """First words skip leading emphasis tags."""
        assert problem.first_words_of_wrong_answers == ["London", "Rome"]
