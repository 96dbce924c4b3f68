"""
Text: the light Markdown engine used to render lesson content.

Modules:
- warden: protection of rendered HTML from later passes
- replacements: ordered rewrite rules and the line-run block builder
- markdown: the rendering pipeline and HTML helpers
- maths: plain-text equations and MathML sanitising
- encoding: attribute-safe base64 encodings
"""

from .encoding import get_error_attribute_html, string_to_base64, base64_to_string
from .markdown import (
    decode_from_entities,
    encode_to_entities,
    escape_html,
    get_plain_text_from_html,
    parse_markdown,
    parse_markdown_spans,
)
from .replacements import Replacement, all_lines_start_with, process_replacements, rule
from .warden import ParsingWarden

__all__ = [
    "ParsingWarden",
    "Replacement",
    "all_lines_start_with",
    "process_replacements",
    "rule",
    "parse_markdown",
    "parse_markdown_spans",
    "escape_html",
    "encode_to_entities",
    "decode_from_entities",
    "get_plain_text_from_html",
    "get_error_attribute_html",
    "string_to_base64",
    "base64_to_string",
]
