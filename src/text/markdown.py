"""
Parser for a light version of Markdown.

Text is converted to HTML by a fixed sequence of passes. Every pass is an
ordered list of :class:`~src.text.replacements.Replacement` rules:

1. security (control characters)
2. caller pre-processing (optional)
3. MathML protection
4. HTML escaping, ignoring ``<br>``, ``<sub>`` and ``<sup>``
5. Markdown escapes (``\\*`` etc.) to numeric entities
6. block rules (headings, quotes, code, rules, lists, maths lines)
7. paragraphs
8. span rules (maths, images, links, code, emphasis)
9. clean up
10. caller post-processing (optional)
11. reinstatement of protected HTML

Limitations:

+ Blockquotes: lazy and nested blockquotes are not supported. Each line must
  be preceded by ``>``.
+ Lists: only simple lists. Block elements cannot be nested within them.
+ HTML: inline HTML is escaped, apart from entities and ``<br>``, ``<sub>``
  and ``<sup>``.
+ Reference links are not supported.
+ Automatic links: ``<`` is escaped before parsing so ``<...>`` and
  ``&lt;...>`` are both treated as automatic links. Use ``&gt;`` for the
  closing character to prevent this.

Each call to :func:`parse_markdown` or :func:`parse_markdown_spans` owns its
own :class:`~src.text.warden.ParsingWarden`. Caller rules may therefore
render other fragments without disturbing the call in progress.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence

from src.text.maths import maths_to_html, parse_maths, parse_mathml
from src.text.replacements import (
    Replacement,
    all_lines_start_with,
    process_replacements,
    rule,
)
from src.text.warden import ParsingWarden

URL_CHARS = r"[-\w@:%.+~#=/?&;]"

# =============================================================================
# Entity helpers
# =============================================================================


def encode_char_to_entity(chr_: str) -> str:
    """Encode the first character of chr_ as a numeric HTML entity."""
    return f"&#{ord(chr_[0])};"


def encode_to_entities(data: str) -> str:
    """Encode every character of data as a numeric HTML entity."""
    return "".join(encode_char_to_entity(c) for c in data)


def decode_from_entities(data: str) -> str:
    """Decode numeric HTML entities created by :func:`encode_to_entities`."""
    return re.sub(r"&#([0-9]{1,7});", lambda match: chr(int(match.group(1))), data)


# =============================================================================
# Fixed passes
# =============================================================================

SECURITY_REPLACEMENTS: list[Replacement] = [
    rule("\0", "�"),
]

HTML_ESCAPE_IGNORING_BR_REPLACEMENTS: list[Replacement] = [
    rule(r"&(?![\w#]+?;)", "&amp;"),
    rule(r"<(?!/?(?:br|sub|sup)>)", "&lt;", re.IGNORECASE),
]

HTML_ESCAPE_ALL_REPLACEMENTS: list[Replacement] = [
    rule(r"&(?![\w#]+?;)", "&amp;"),
    rule(r"<", "&lt;"),
]

MARKDOWN_ESCAPE_REPLACEMENTS: list[Replacement] = [
    rule(r"\\([\\`*_{}\[\]()#+\-.!])", lambda match: encode_char_to_entity(match.group(1))),
]

PARAGRAPH_REPLACEMENTS: list[Replacement] = [
    rule(r"(?:(?:^|\n{2,})(?!<\w+[\s>]))((?:.(?:\n(?!\n))?)+)", r"\n\n<p>\1</p>\n\n"),
    rule(r"\n{2,}", "\n\n"),
]

CLEAN_UP_REPLACEMENTS: list[Replacement] = [
    rule(r"^\s*$", "", re.MULTILINE),
    rule(r"<(?:p|div)>\s*?</(?:p|div)>", "", re.IGNORECASE),
]


def _atx_heading(match: re.Match) -> str:
    level = min(len(match.group(1)), 6)
    return f"\n\n<h{level}>{match.group(2).strip()}</h{level}>\n"


def _protected(warden: ParsingWarden, build: Callable[[re.Match], str]) -> Callable[[re.Match], str]:
    """
    Wrap a replacement function so that its output is protected.

    Keys already present in the output are reinstated first so a protected
    fragment never hides another key.
    """

    def replace(match: re.Match) -> str:
        return warden.protect(warden.reinstate(build(match)))

    return replace


def _protected_tags(warden: ParsingWarden, *tags: str) -> Callable[[re.Match], str]:
    """
    Protect the generated tags of an emphasis match but leave its contents visible.

    Tags are opened in the order given and closed in reverse, so nested
    emphasis such as ``***text***`` is well formed.
    """
    opening = "".join(f"<{tag}>" for tag in tags)
    closing = "".join(f"</{tag}>" for tag in reversed(tags))

    def replace(match: re.Match) -> str:
        contents = "".join(group for group in match.groups() if group)
        return f"{warden.protect(opening)}{contents}{warden.protect(closing)}"

    return replace


def _block_replacements(warden: ParsingWarden) -> list[Replacement]:
    return [
        # Setext headings
        rule(r"(?:(.+)\n=+\n)", r"\n\n<h1>\1</h1>\n\n"),
        rule(r"(?:(.+)\n-+\n)", r"\n\n<h2>\1</h2>\n\n"),
        # ATX heading, any level but clamped to h6
        rule(r"^(#+)(?: *)(.+?)(?:#*)[ \t]*$", _atx_heading, re.MULTILINE),
        all_lines_start_with(r">[ \t]*", block_prefix="<blockquote>", block_suffix="</blockquote>"),
        all_lines_start_with(
            r"(?: {4}|\t)",
            block_prefix="<pre><code>",
            block_suffix="</code></pre>",
            trim_contents=True,
            protect=warden.protect,
        ),
        # Horizontal rule. Must precede unordered lists so - is not read as a bullet.
        rule(r"^(?:[*_-] *){3,}\s*$", "\n\n<hr>\n\n", re.MULTILINE),
        all_lines_start_with(
            r" {0,3}[*+-][ \t]+",
            block_prefix="<ul>",
            block_suffix="</ul>",
            line_prefix="<li>",
            line_suffix="</li>",
        ),
        all_lines_start_with(
            r" {0,3}\d+\.[ \t]+",
            block_prefix="<ol>",
            block_suffix="</ol>",
            line_prefix="<li>",
            line_suffix="</li>",
        ),
        # Maths equation on its own line
        rule(
            r"^[ \t]*maths?:[ \t]*(.+?)[ \t]*$",
            lambda match: f'\n\n<div class="maths">{warden.protect(maths_to_html(match.group(1)))}</div>\n\n',
            re.MULTILINE,
        ),
    ]


def _span_replacements(warden: ParsingWarden) -> list[Replacement]:
    def attribute(value: str | None) -> str:
        # Author text placed inside a double quoted attribute.
        return warden.reinstate(value or "").replace('"', "&quot;")

    def image(match: re.Match) -> str:
        return f'<img alt="{attribute(match.group(1))}" src="{match.group(2)}" title="{attribute(match.group(3))}"/>'

    def link(match: re.Match) -> str:
        anchor = warden.protect(
            warden.reinstate(
                f'<a target="_blank" href="{match.group(2)}" title="{attribute(match.group(3))}">{match.group(1)}</a>'
            )
        )
        # Printable copy of the url. The span is left visible to later rules.
        return f'{anchor}<span class="print-only"> ({warden.protect(match.group(2))})</span>'

    def email(match: re.Match) -> str:
        address = match.group(1)
        return f'<a href="{encode_to_entities("mailto:" + address)}">{encode_to_entities(address)}</a>'

    return [
        # inline maths
        rule(
            r"\{maths?\}(.+?)\{maths?\}",
            _protected(warden, lambda match: parse_maths(match.group(1), True)),
        ),
        # image
        rule(
            rf'!\[([^\]]*)\]\((https?://{URL_CHARS}+)(?: +"([^"]*)")?\)',
            _protected(warden, image),
        ),
        # link
        rule(rf'\[([^\]]*)\]\((https?://{URL_CHARS}+)(?: +"([^"]*)")?\)', link),
        # automatic link
        rule(
            rf"(?:&lt;|<)(https?://{URL_CHARS}+?)>",
            _protected(warden, lambda match: f'<a target="_blank" href="{match.group(1)}">{match.group(1)}</a>'),
        ),
        # automatic email
        rule(r"(?:&lt;|<)([\w.+-]+@[\w-]+(?:\.[\w-]+)+)>", _protected(warden, email)),
        # code
        rule(
            r"(?:`{2,}(.*?)`{2,}|`(.*?)`)",
            _protected(
                warden,
                lambda match: f"<code>{match.group(1) if match.group(1) is not None else match.group(2)}</code>",
            ),
        ),
        # emphasis. Single character forms first as the general forms need a
        # non-space character at each end. Combined forms run first so their
        # tags nest.
        rule(r"\*\*\*([^\s*])\*\*\*", _protected_tags(warden, "strong", "em")),
        rule(r"\*\*\*([^\s])(.*?)([^\s])\*\*\*", _protected_tags(warden, "strong", "em")),
        rule(r"___([^\s_])___", _protected_tags(warden, "strong", "em")),
        rule(r"___([^\s])(.*?)([^\s])___", _protected_tags(warden, "strong", "em")),
        rule(r"\*\*([^\s*])\*\*", _protected_tags(warden, "strong")),
        rule(r"\*\*([^\s])(.*?)([^\s])\*\*", _protected_tags(warden, "strong")),
        rule(r"__([^\s_])__", _protected_tags(warden, "strong")),
        rule(r"__([^\s])(.*?)([^\s])__", _protected_tags(warden, "strong")),
        rule(r"\*([^\s*])\*", _protected_tags(warden, "em")),
        rule(r"\*([^\s])(.*?)([^\s])\*", _protected_tags(warden, "em")),
        rule(r"_([^\s_])_", _protected_tags(warden, "em")),
        rule(r"_([^\s])(.*?)([^\s])_", _protected_tags(warden, "em")),
    ]


# =============================================================================
# Entry points
# =============================================================================


def _render(
    data: str,
    *,
    blocks: bool,
    pre: Sequence[Replacement] | None,
    post: Sequence[Replacement] | None,
) -> str:
    if not data:
        return data
    warden = ParsingWarden()
    result = data.replace("\r", "")
    result = process_replacements(result, SECURITY_REPLACEMENTS)
    result = process_replacements(result, pre)
    result = parse_mathml(result, warden.protect)
    result = process_replacements(result, HTML_ESCAPE_IGNORING_BR_REPLACEMENTS)
    result = process_replacements(result, MARKDOWN_ESCAPE_REPLACEMENTS)
    if blocks:
        result = process_replacements(result, _block_replacements(warden))
        result = process_replacements(result, PARAGRAPH_REPLACEMENTS)
    result = process_replacements(result, _span_replacements(warden))
    result = process_replacements(result, CLEAN_UP_REPLACEMENTS)
    result = process_replacements(result, post)
    return warden.reinstate(result)


def parse_markdown(
    data: str,
    pre: Sequence[Replacement] | None = None,
    post: Sequence[Replacement] | None = None,
) -> str:
    """
    Convert Markdown into HTML.

    Any HTML special characters are escaped before the Markdown is parsed.

    Args:
        data: Markdown source.
        pre: Replacements applied before any other processing.
        post: Replacements applied after the Markdown replacements but before
            protected HTML is reinstated.

    Returns:
        The resulting HTML.
    """
    return _render(data, blocks=True, pre=pre, post=post)


def parse_markdown_spans(
    data: str,
    pre: Sequence[Replacement] | None = None,
    post: Sequence[Replacement] | None = None,
) -> str:
    """Convert Markdown into HTML using span rules only. Used for titles and captions."""
    return _render(data, blocks=False, pre=pre, post=post)


def escape_html(data: str) -> str:
    """Escape HTML. No Markdown is processed."""
    data = process_replacements(data, SECURITY_REPLACEMENTS)
    return process_replacements(data, HTML_ESCAPE_ALL_REPLACEMENTS)


def get_plain_text_from_html(html: str) -> str:
    """Strip tags and collapse whitespace."""
    return re.sub(r"\s+", " ", re.sub(r"<[^>]*>", "", html))
