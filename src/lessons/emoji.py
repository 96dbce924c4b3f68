"""
Emoji lookup for ``emoji:NAME`` items.
"""

from __future__ import annotations

import re

from loguru import logger

from src.text.encoding import get_error_attribute_html

# Keys are upper case. Underscores are avoided as they would read as emphasis.
# A value starting with @ is an alias for another key (one level only).
PREDEFINED_EMOJIS: dict[str, str] = {
    "GRINNING": "&#x1F600;",
    ")": "@GRINNING",
    "-)": "@GRINNING",
    "SMILEY": "@GRINNING",
    "SMILING": "@GRINNING",
    "HAPPY": "@GRINNING",
    "WORRIED": "&#x1F61F;",
    "SAD": "@WORRIED",
    "LAUGHING": "&#x1F602;",
    "LAUGH": "@LAUGHING",
    "CRYING": "&#x1F622;",
    "TEAR": "@CRYING",
    "FROWNING": "&#x1F641;",
    "(": "@FROWNING",
    "-(": "@FROWNING",
    "NEUTRAL": "&#x1F610;",
    "ANGRY": "&#x1F620;",
    "GRUMPY": "@ANGRY",
    "WINK": "&#x1F609;",
    "WINKY": "@WINK",
    "WINKING": "@WINK",
    "THUMBS-UP": "&#x1F44D;",
    "THUMBS-DOWN": "&#x1F44E;",
    "TICK": "&#x2714;&#xFE0F;",
    "CROSS": "&#x274C;",
    "WARNING": "&#x26A0;&#xFE0F;",
    "ALERT": "@WARNING",
    "ERROR": "@WARNING",
    "WHITE-QUESTION-MARK": "&#x2754;",
}

UNKNOWN_EMOJI = PREDEFINED_EMOJIS["WHITE-QUESTION-MARK"]

_CODE_POINT = re.compile(r"U\+([A-F0-9]{1,6})")
_CODE_POINTS = re.compile(r"(?:U\+[A-F0-9]{1,6})+")


def get_emoji_html(original_definition: str | None) -> str:
    """
    Get an emoji as HTML entities.

    Args:
        original_definition: A name from :data:`PREDEFINED_EMOJIS` or a
            sequence of code points written ``U+xxxx``. Case is ignored.

    Returns:
        The entities. A blank definition gives a single space. An unknown
        name gives a question mark glyph carrying a hidden error message.
    """
    if not original_definition:
        logger.debug("blank emoji")
        return " "
    definition = original_definition.upper()
    if definition.startswith("U+"):
        code = _CODE_POINT.sub(r"&#x\1;", definition) if _CODE_POINTS.fullmatch(definition) else None
    else:
        code = PREDEFINED_EMOJIS.get(definition)
        if code and code.startswith("@"):
            code = PREDEFINED_EMOJIS.get(code[1:])
    if not code:
        error_attribute = get_error_attribute_html(f"Cannot find emoji {original_definition}")
        return f"<span {error_attribute}>{UNKNOWN_EMOJI}</span>"
    return code
