"""
Unit tests for ParsingWarden.

Run: pytest tests/unit/test_parsing_warden.py -v
"""
import pytest

from src.text.warden import KEY_PATTERN, ParsingWarden


class TestProtect:
    """Protecting fragments."""

    @pytest.fixture
    def warden(self):
        return ParsingWarden()

    def test_empty_data_is_returned_untouched(self, warden):
        """Empty data is not protected."""
        assert warden.protect("") == ""
        assert len(warden) == 0

    def test_key_matches_key_pattern(self, warden):
        """Issued keys are recognised by the reinstate pattern."""
        key = warden.protect("<b>bold</b>")
        assert KEY_PATTERN.fullmatch(key)
        assert key.startswith("???0")
        assert key.endswith("???")

    def test_key_hides_markup(self, warden):
        """Keys contain no Markdown or HTML characters."""
        key = warden.protect("<b>**bold**</b>")
        assert "<" not in key
        assert "*" not in key
        assert "=" not in key

    def test_same_data_gets_distinct_keys(self, warden):
        """Protecting the same data twice gives two keys."""
        first = warden.protect("x")
        second = warden.protect("x")
        assert first != second
        assert len(warden) == 2

    def test_keys_unique_after_retrieval(self, warden):
        """A retrieval does not let a key be issued again."""
        first = warden.protect("a")
        warden.retrieve(first)
        second = warden.protect("a")
        assert first != second


class TestReinstate:
    """Restoring fragments."""

    @pytest.fixture
    def warden(self):
        return ParsingWarden()

    def test_reinstate_restores_all_keys(self, warden):
        """Every key is replaced and the table drained."""
        text = f"start {warden.protect('<i>one</i>')} middle {warden.protect('<i>two</i>')} end"
        assert warden.reinstate(text) == "start <i>one</i> middle <i>two</i> end"
        assert len(warden) == 0

    def test_retrieve_removes_ward(self, warden):
        """Retrieving a key removes its ward."""
        key = warden.protect("value")
        assert warden.retrieve(key) == "value"
        assert len(warden) == 0

    def test_unknown_key_is_left_in_place(self, warden):
        """Keys from another warden stay visible."""
        other = ParsingWarden()
        foreign_key = other.protect("secret")
        assert warden.reinstate(f"a {foreign_key} b") == f"a {foreign_key} b"

    def test_reinstate_empty(self, warden):
        """Empty text is returned unchanged."""
        assert warden.reinstate("") == ""

    def test_clear(self, warden):
        """Clear empties the table and restarts numbering."""
        warden.protect("a")
        warden.protect("b")
        warden.clear()
        assert len(warden) == 0
        assert warden.protect("c").startswith("???0")
