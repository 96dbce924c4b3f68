"""
The Problem: one question unit of a lesson.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from src.lessons.text_item import TextItem


class QuestionType(str, Enum):
    """Interaction types. Derived from content, never declared by the author."""

    SIMPLE = "simple"
    MULTI = "multi"
    FILL = "fill"
    ORDER = "order"
    SLIDE = "slide"


# A missing-word span at the very end, allowing closing tags after it.
MISSING_WORD_AT_END = re.compile(r'<span +class *= *"missing-word[^"]*"[^>]*></span>(?:\s*</\w+>\s*)*\s*$')


@dataclass
class Problem:
    """
    Decoded problem.

    The question type is derived from the question and the right answers
    each time it is read:

    + order: the question has exactly one missing word, it has no content
      and it is the last thing in the question. The right answers supply the
      words to be put in order; wrong answers are red herrings.
    + fill: the question has missing words and every one has content. Wrong
      answers are red herrings.
    + multi: more than one right answer.
    + simple: exactly one right answer.
    + slide: nothing to answer. This is the fallback.

    Order is tested before fill as both rely on missing words.
    """

    intro: TextItem = field(default_factory=TextItem)
    question: TextItem = field(default_factory=TextItem)
    explanation: TextItem = field(default_factory=TextItem)
    right_answers: list[TextItem] = field(default_factory=list)
    wrong_answers: list[TextItem] = field(default_factory=list)

    @property
    def question_type(self) -> QuestionType:
        if not self.question.html:
            return QuestionType.SLIDE
        if self._is_order_question():
            return QuestionType.ORDER
        if self._is_fill_question():
            return QuestionType.FILL
        if len(self.right_answers) > 1:
            return QuestionType.MULTI
        if len(self.right_answers) == 1:
            return QuestionType.SIMPLE
        return QuestionType.SLIDE

    @property
    def first_words_of_right_answers(self) -> list[str]:
        return [item.first_word for item in self.right_answers]

    @property
    def first_words_of_wrong_answers(self) -> list[str]:
        return [item.first_word for item in self.wrong_answers]

    def _is_fill_question(self) -> bool:
        missing_words = self.question.missing_words
        return bool(missing_words) and all(missing_words)

    def _is_order_question(self) -> bool:
        missing_words = self.question.missing_words
        return (
            len(missing_words) == 1
            and not missing_words[0]
            and MISSING_WORD_AT_END.search(self.question.html) is not None
        )
