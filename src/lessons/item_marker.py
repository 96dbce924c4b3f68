"""
Marker for keeping track of scores.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class MarkState(str, Enum):
    """Outcome of an attempted problem."""

    CORRECT = "correct"
    INCORRECT = "incorrect"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class MarkedItem:
    item: Any
    state: MarkState


@dataclass
class Marks:
    """Snapshot of the current marks."""

    correct: int = 0
    incorrect: int = 0
    skipped: int = 0
    marked_items: list[MarkedItem] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.correct + self.incorrect + self.skipped


class ItemMarker:
    """Ordered log of marked items."""

    def __init__(self) -> None:
        self._marked_items: list[MarkedItem] = []

    def reset(self) -> None:
        """Remove every mark."""
        self._marked_items = []

    def mark_item(self, item: Any, state: MarkState) -> None:
        self._marked_items.append(MarkedItem(item=item, state=state))

    @property
    def marks(self) -> Marks:
        marks = Marks(marked_items=list(self._marked_items))
        for marked_item in self._marked_items:
            if marked_item.state is MarkState.CORRECT:
                marks.correct += 1
            elif marked_item.state is MarkState.INCORRECT:
                marks.incorrect += 1
            elif marked_item.state is MarkState.SKIPPED:
                marks.skipped += 1
        return marks
