"""
Simple maths rendering.

Converts a plain-text equation such as ``x^2 + y_1 <= sqrt[a/b]`` into HTML
using entities and the Unicode mathematical alphanumeric symbols. This is not
a typesetting engine; it only makes short equations readable.

Also sanitises author-supplied MathML blocks.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from src.text.replacements import Replacement, process_replacements, rule

CHAR_CODE_MATHS_UC_A = 0x1D434
CHAR_CODE_MATHS_LC_A = 0x1D44E
CHAR_CODE_MATHS_ZERO = 0x1D7F6

GREEK_LETTERS = (
    "Alpha", "Beta", "Gamma", "Delta", "Epsilon", "Zeta", "Eta", "Theta",
    "Iota", "Kappa", "Lambda", "Mu", "Nu", "Xi", "Omicron", "Pi", "Rho",
    "Sigma", "Tau", "Upsilon", "Phi", "Chi", "Psi", "Omega",
)  # fmt: skip


def get_maths_character(chr_: str) -> str:
    """Convert a single latin letter or digit to its maths equivalent."""
    if "A" <= chr_ <= "Z":
        return chr(CHAR_CODE_MATHS_UC_A + ord(chr_) - ord("A"))
    if "a" <= chr_ <= "z":
        # U+1D455 (maths italic h) is unassigned; Planck constant is used instead.
        if chr_ == "h":
            return "ℎ"
        return chr(CHAR_CODE_MATHS_LC_A + ord(chr_) - ord("a"))
    if "0" <= chr_ <= "9":
        return chr(CHAR_CODE_MATHS_ZERO + ord(chr_) - ord("0"))
    return chr_


def _to_maths_characters(match: re.Match) -> str:
    return "".join(get_maths_character(c) for c in match.group(1))


def replace_greek_letters(data: str) -> str:
    """Replace Greek letter names, capitalised or lower case, with entities."""
    for letter in GREEK_LETTERS:
        for name in (letter, letter.lower()):
            data = re.sub(rf"(?<![a-zA-Z&]){name}(?![a-zA-Z])", f"&{name};", data)
    return data


# Replacements that only create HTML entities. No tags allowed.
ENTITY_REPLACEMENTS: list[Replacement] = [
    rule(r"\s*-\s*", " &minus; "),
    rule(r"\s*\*\s*", " &times; "),
    rule(r"\s+ne(?= )", " &ne; "),
    rule(r"\s*(?:!=|/=)\s*", " &ne; "),
    rule(r"\s*(?:<|&lt;)=\s*", " &le; "),
    rule(r"\s*(?:>|&gt;)=\s*", " &ge; "),
    rule(r"(^|[^a-zA-Z&])sqrt(?=[^a-zA-Z]|$)", r"\1&radic;", re.IGNORECASE),
    rule(r"(^|[^a-zA-Z&])sum(?=[^a-zA-Z]|$)", r"\1&sum;", re.IGNORECASE),
    rule(r"(^|[^a-zA-Z&])int(?=[^a-zA-Z]|$)", r"\1&int;", re.IGNORECASE),
    rule(r"(?:^|\s*)d:", " &part;"),
    rule(r"([a-zA-Z0-9])\.(?=[a-zA-Z])", r"\1&sdot;"),
]

# Digits and latin letters. Entity names (preceded by &) are left alone.
CHARACTER_REPLACEMENTS: list[Replacement] = [
    rule(r"([0-9]+)", _to_maths_characters),
    rule(r"(?<![&a-zA-Z])([a-zA-Z]+)(?![a-zA-Z]*;)", _to_maths_characters),
]

# Replacements that introduce tags.
TAG_REPLACEMENTS: list[Replacement] = [
    rule(
        r"((?:\(.*?\))|[^\s/]+)\s*/\s*((?:\(.*?\))|[^\s/]+)",
        r"<table><tr><td>\1</td></tr><tr><td>\2</td></tr></table>",
    ),
    rule(r"\s*\^\s*((?:\(.*?\))|[^\s)<]+)", r"<sup>\1</sup>"),
    rule(r"\s*_\s*((?:\(.*?\))|[^\s)<]+)", r"<sub>\1</sub>"),
    rule(r" +", "&nbsp;"),
    rule(r"(&int;)", r'<span class="high-symbol">\1</span>'),
    rule(r"&radic;\[([^\]]*?)\]", r'<span class="radic">&radic;</span><span class="sqrt">\1</span>'),
]


def maths_to_html(data: str) -> str:
    """Convert an equation to HTML without any wrapping element."""
    data = replace_greek_letters(data.strip())
    data = process_replacements(data, ENTITY_REPLACEMENTS)
    data = process_replacements(data, CHARACTER_REPLACEMENTS)
    return process_replacements(data, TAG_REPLACEMENTS)


def parse_maths(data: str, inline: bool) -> str:
    """
    Simple parsing of maths data.

    Args:
        data: The equation.
        inline: True for a span, otherwise a div.

    Returns:
        The equation wrapped in an element with the ``maths`` class.
    """
    tag = "span" if inline else "div"
    return f' <{tag} class="maths">{maths_to_html(data)}</{tag}> '


# Links, styles and event handlers are removed from every MathML tag.
UNSAFE_MATHML_ATTRIBUTE = re.compile(
    r"""[\s/]+(?:[\w:-]*href|style|on\w+)\s*=\s*(?:"[^"]*"|'[^']*'|[^\s>]+)""",
    re.IGNORECASE,
)
# A whole tag; quoted attribute values may contain '>'.
MATHML_TAG = re.compile(r"""<(?:[^>"']|"[^"]*"|'[^']*')*>""")


def _sanitise_mathml_block(html: str) -> str:
    html = MATHML_TAG.sub(lambda tag: UNSAFE_MATHML_ATTRIBUTE.sub("", tag.group(0)), html)
    # escape every tag that is not MathML
    return re.sub(r"<(?!semantics|annotation|[m/])", "&lt;", html)


def parse_mathml(data: str, protect: Callable[[str], str]) -> str:
    """
    Sanitise MathML blocks and protect them from further parsing.

    Args:
        data: Text that might contain ``<math>`` blocks. It must not have
            been HTML escaped yet.
        protect: Called with each sanitised block; its result replaces the
            block in the text.

    Returns:
        The data with every MathML block replaced.
    """
    return re.sub(
        r"<math[^>]*?>.*?</math>",
        lambda match: protect(_sanitise_mathml_block(match.group(0))),
        data,
        flags=re.DOTALL,
    )
