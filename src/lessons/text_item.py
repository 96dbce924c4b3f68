"""
Text items: the rendered parts of a problem.

A :class:`TextItem` is produced from one fragment of lesson source. Rendering
uses the full Markdown pipeline plus tracked replacements which record the
missing words found in the text and substitute emojis and metadata values.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from src.lessons.emoji import get_emoji_html
from src.lessons.metadata import Metadata
from src.text.encoding import get_error_attribute_html, string_to_base64
from src.text.markdown import parse_markdown
from src.text.replacements import Replacement, rule

# Requested classes are only honoured if they appear here. Keys are lower case.
SAFE_EMOJI_CLASSES = ("big", "bigger", "biggest", "small", "smaller", "smallest")

MISSING_WORD_CLASSES = {
    "row": "align-row",
    "line": "align-row",
    "col": "align-column",
    "column": "align-column",
    "left": "align-left",
    "right": "align-right",
    "center": "align-centre",
    "centre": "align-centre",
}

MISSING_WORD_SPAN = re.compile(r'<[^>]*\bmissing-word\b[^>]*>')


def make_class_safe(requested_class: str | None) -> str:
    """Return the requested emoji class if it is safe, otherwise an empty string."""
    if not requested_class:
        return ""
    requested = requested_class.lower()
    return requested if requested in SAFE_EMOJI_CLASSES else ""


def get_item_replacement(prefix: str, replace: str | Callable[[re.Match], str]) -> Replacement:
    """
    Create a replacement for finding lesson items such as ``...word`` in rendered text.

    The item format is ``prefixWORD>class`` where WORD and ``>class`` are
    optional. Groups in the resulting pattern:

    + 1: the character(s) preceding the prefix; restore it in the replacement.
    + 2: the WORD following the prefix, or None.
    + 3: the class without the ``>``, or None.

    An item starts at the start of a line, after a space, after ``>`` or
    straight after a protected fragment. It ends before whitespace,
    ``,;:.?!``, the end of a line or a closing tag.

    Args:
        prefix: Expression identifying the item. Any groups must be
            non-capturing.
        replace: Replacement template or function.
    """
    start_capture = r"(^|[ >]|\?{3})"
    word_capture = r"((?:&#?[a-zA-Z0-9]+?;|[^\s<>])+?)?"
    class_capture = r"(?:>([a-zA-Z]*))?"
    end_lookahead = r"(?=[\s,;:.?!]|$|</.+?>)"
    return rule(
        f"{start_capture}{prefix}{word_capture}{class_capture}{end_lookahead}",
        replace,
        re.MULTILINE | re.IGNORECASE,
    )


class TrackedReplacements:
    """
    Post-processing replacements that remember what they replaced.

    Used for tracking missing words and for substituting metadata and emojis.
    """

    def __init__(self, metadata: Metadata | None = None):
        self._missing_words: list[str] = []
        self._metadata = metadata
        self.replacements: list[Replacement] = [
            rule(r"\\>", "&gt;"),
            get_item_replacement(r"[.]{3}", self._replace_missing_word),
            get_item_replacement("emoji:", self._replace_emoji),
            get_item_replacement("meta:", self._replace_metadata),
        ]

    @property
    def missing_words(self) -> list[str]:
        """Copy of the missing words in the order they appeared."""
        return list(self._missing_words)

    def _replace_missing_word(self, match: re.Match) -> str:
        start, word, requested_class = match.group(1), match.group(2) or "", match.group(3)
        self._missing_words.append(word)
        classes = "missing-word"
        alignment = MISSING_WORD_CLASSES.get((requested_class or "").lower())
        if alignment:
            classes = f"{classes} {alignment}"
        return f'{start}<span class="{classes}" data-missing-word="{string_to_base64(word)}"></span>'

    def _replace_emoji(self, match: re.Match) -> str:
        start, name, requested_class = match.group(1), match.group(2), match.group(3)
        classes = "emoji"
        safe_class = make_class_safe(requested_class)
        if safe_class:
            classes = f"{classes} {safe_class}"
        return f'{start}<span class="{classes}">{get_emoji_html(name)}</span>'

    def _replace_metadata(self, match: re.Match) -> str:
        start, key = match.group(1), match.group(2) or ""
        value = self._metadata.get_value(key) if self._metadata and key else None
        if not value:
            error_attribute = get_error_attribute_html(f"Cannot find metadata {key}")
            return f"{start}<span {error_attribute}>{key}</span>"
        return f"{start}{value}"


@dataclass(frozen=True)
class TextItem:
    """
    Rendered HTML plus the missing words found while rendering it.

    Create instances with :meth:`create_from_source`.
    """

    html: str = ""
    missing_words: tuple[str, ...] = ()

    @classmethod
    def create_from_source(cls, source: str | None, metadata: Metadata | None = None) -> TextItem:
        """
        Create a TextItem from the source.

        Args:
            source: Text using the light version of Markdown.
            metadata: Values available to ``meta:KEY`` items.
        """
        if not source:
            return cls()
        tracker = TrackedReplacements(metadata)
        html = parse_markdown(source, post=tracker.replacements)
        return cls(html=html, missing_words=tuple(tracker.missing_words))

    @property
    def plain_text(self) -> str:
        """The text without markup. Missing words are shown as ``...``."""
        text = MISSING_WORD_SPAN.sub("...", self.html)
        text = re.sub(r"<[^>]*>", "", text)
        return re.sub(r"\s+", " ", text).strip()

    @property
    def first_word(self) -> str:
        """The first word after any leading tags, or an empty string."""
        match = re.match(r"(?:\s|<[^>]*>)*([^\s<]*)", self.html)
        return match.group(1) if match else ""
