"""
Unit tests for attribute encodings and replacement rules.
"""
from src.text.encoding import (
    base64_to_string,
    get_error_attribute_html,
    string_to_base64,
    unescape_attribute,
)
from src.text.replacements import all_lines_start_with, process_replacements, rule


class TestEncoding:
    """Base64 attribute encodings."""

    def test_string_to_base64_uri_encodes_first(self):
        """Text is URI encoded before base64."""
        assert string_to_base64("a b") == "YSUyMGI="

    def test_unicode_survives(self):
        """Non-ASCII text decodes back to itself."""
        assert base64_to_string(string_to_base64("café ∑")) == "café ∑"

    def test_error_attribute(self):
        """The error message is hidden in a data-error attribute."""
        attribute = get_error_attribute_html('Cannot find "x"')
        assert attribute.startswith('data-error="')
        value = attribute[len('data-error="') : -1]
        assert unescape_attribute(value) == 'Cannot find "x"'


class TestReplacements:
    """Ordered rewrite rules."""

    def test_rules_apply_in_order(self):
        """Later rules see the output of earlier ones."""
        result = process_replacements("abc", [rule("a", "x"), rule("x", "y")])
        assert result == "ybc"

    def test_empty_data(self):
        """Empty text is returned unchanged."""
        assert process_replacements("", [rule("a", "b")]) == ""

    def test_no_rules(self):
        """No rules leaves the text unchanged."""
        assert process_replacements("abc", None) == "abc"

    def test_function_replacement(self):
        """Rules can use a replacement function."""
        result = process_replacements("a1b2", [rule(r"\d", lambda m: str(int(m.group(0)) * 2))])
        assert result == "a2b4"


class TestAllLinesStartWith:
    """Line-run block rules."""

    def test_block_ends_at_first_unmatched_line(self):
        """The block stops at the first line without the prefix."""
        replacement = all_lines_start_with(r">[ \t]*", block_prefix="<q>", block_suffix="</q>")
        result = replacement.apply("> a\n> b\nc")
        assert "<q>a\nb" in result
        assert result.endswith("c")

    def test_line_wrapping(self):
        """Each line is wrapped individually."""
        replacement = all_lines_start_with(r"- ", line_prefix="<li>", line_suffix="</li>")
        result = replacement.apply("- one\n- two")
        assert "<li>one</li>\n<li>two</li>" in result

    def test_protect_applied_to_contents(self):
        """Trimmed contents are passed to protect."""
        replacement = all_lines_start_with(
            r" {4}",
            block_prefix="[",
            block_suffix="]",
            trim_contents=True,
            protect=lambda contents: contents.upper(),
        )
        result = replacement.apply("    code\n    more\n")
        assert "[CODE\nMORE]" in result
