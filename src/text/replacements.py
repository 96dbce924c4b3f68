"""
Replacement rules for the text pipeline.

A rendering pass is an ordered list of :class:`Replacement` rules. Each rule
is applied to the entire text before the next one runs, so the order of a
list is significant.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

ReplacementFunction = Callable[[re.Match], str]


@dataclass(frozen=True)
class Replacement:
    """
    One rewrite rule.

    Attributes:
        pattern: Compiled expression to match.
        rep: Template string (``\\1`` style group references) or a function
            receiving the match and returning the replacement text.
    """

    pattern: re.Pattern
    rep: str | ReplacementFunction

    def apply(self, data: str) -> str:
        return self.pattern.sub(self.rep, data)


def rule(pattern: str, rep: str | ReplacementFunction, flags: int = 0) -> Replacement:
    """Shorthand for building a :class:`Replacement` from a pattern string."""
    return Replacement(re.compile(pattern, flags), rep)


def process_replacements(data: str, replacements: Iterable[Replacement] | None) -> str:
    """
    Apply replacements to data in order.

    Args:
        data: Text to be processed. Empty text is returned unchanged.
        replacements: Rules to apply, each over the whole of the text.

    Returns:
        The rewritten text.
    """
    if not data or not replacements:
        return data
    for replacement in replacements:
        data = replacement.apply(data)
    return data


def all_lines_start_with(
    re_start: str,
    *,
    block_prefix: str = "",
    block_suffix: str = "",
    line_prefix: str = "",
    line_suffix: str = "",
    trim_contents: bool = False,
    protect: Callable[[str], str] | None = None,
) -> Replacement:
    """
    Create a rule for a contiguous run of lines that all begin with ``re_start``.

    The run extends from the first matching line to the first line that no
    longer matches (or the end of the text). The prefix is stripped from each
    line, each line is wrapped in ``line_prefix``/``line_suffix`` and the run
    is wrapped in ``block_prefix``/``block_suffix``.

    Args:
        re_start: Expression for the start of each line. Any group it
            contains must be non-capturing.
        block_prefix: Text placed before the block.
        block_suffix: Text placed after the block.
        line_prefix: Text placed before each line.
        line_suffix: Text placed after each line.
        trim_contents: Strip leading newlines and trailing whitespace from
            the block contents.
        protect: Optional callable applied to the block contents, normally
            a warden's ``protect`` so the contents are not parsed again.

    Returns:
        The replacement rule.
    """
    block_re = re.compile(rf"(?:^|\n){re_start}(?:.|\n)*?(?:(\n(?!{re_start}))|\Z)")
    line_re = re.compile(rf"^{re_start}(.*)$", re.MULTILINE)

    def replace_block(match: re.Match) -> str:
        contents = line_re.sub(lambda line: f"{line_prefix}{line.group(1)}{line_suffix}", match.group(0))
        if trim_contents:
            contents = contents.lstrip("\r\n").rstrip()
        if protect is not None:
            contents = protect(contents)
        return f"\n\n{block_prefix}{contents}{block_suffix}\n\n"

    return Replacement(block_re, replace_block)
