"""
Lessons: compile plain lesson text into typed problems.

Core modules:
- lesson_source: split lesson text into problem sources and compile them
- problem_source: raw text of one problem
- text_item: rendered text with missing word tracking
- metadata: key/value lesson header
- emoji: emoji name lookup
- problem: problem assembly and question type classification
- lesson: compiled lesson and playback state
- item_marker: score keeping
- schemas: JSON export models
"""

from .item_marker import ItemMarker, MarkedItem, Marks, MarkState
from .lesson import Lesson
from .lesson_source import LessonSource, LessonSourceError, ProblemItemKey, compile_lesson
from .metadata import Metadata
from .problem import Problem, QuestionType
from .problem_source import ProblemSource
from .schemas import LessonExport, ProblemExport, TextItemExport
from .text_item import TextItem

__all__ = [
    "compile_lesson",
    "LessonSource",
    "LessonSourceError",
    "ProblemItemKey",
    "ProblemSource",
    "Lesson",
    "Problem",
    "QuestionType",
    "TextItem",
    "Metadata",
    "ItemMarker",
    "MarkState",
    "MarkedItem",
    "Marks",
    "LessonExport",
    "ProblemExport",
    "TextItemExport",
]
