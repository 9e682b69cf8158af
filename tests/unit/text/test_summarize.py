"""Tests for plain-text summaries."""

from pagemeta.text import (
    DESCRIPTION_LENGTH,
    ELLIPSIS,
    LIST_EXCERPT_LENGTH,
    excerpt,
    strip_markup,
    summarize,
)


class TestStripMarkup:
    """Tests for strip_markup."""

    def test_removes_tags(self):
        """Tags are dropped and their text kept."""
        assert strip_markup("<p>Hello <strong>there</strong></p>") == "Hello there"

    def test_collapses_whitespace(self):
        """Runs of spaces, tabs and newlines become one space."""
        assert strip_markup("  one\n\n\ttwo   three  ") == "one two three"

    def test_none_and_empty(self):
        """Missing input yields an empty string."""
        assert strip_markup(None) == ""
        assert strip_markup("") == ""

    def test_decodes_entities(self):
        """HTML entities become their characters."""
        assert strip_markup("<p>Fish &amp; chips</p>") == "Fish & chips"


class TestSummarize:
    """Tests for summarize."""

    def test_short_markup_has_no_ellipsis(self):
        """Text under the cap is returned cleaned and whole."""
        assert summarize("<p>Hello   world</p>", 160) == "Hello world"

    def test_long_text_truncates_to_cap_plus_ellipsis(self):
        """Text over the cap keeps exactly max_length characters."""
        text = "a" * 200
        result = summarize(text, 160)

        assert result == "a" * 160 + ELLIPSIS
        assert len(result) == 163

    def test_exactly_at_cap_is_not_truncated(self):
        """Length equal to the cap is kept intact."""
        text = "b" * 160
        assert summarize(text, 160) == text

    def test_empty_input(self):
        """Empty or None input yields an empty string, no ellipsis."""
        assert summarize("", 160) == ""
        assert summarize(None, 160) == ""
        assert summarize("<p>  </p>", 160) == ""

    def test_truncation_counts_characters_not_bytes(self):
        """Multi-byte characters count as one each."""
        text = "é" * 100
        result = summarize(text, 80)

        assert result == "é" * 80 + ELLIPSIS

    def test_cap_applies_to_cleaned_text(self):
        """Markup and collapsed whitespace do not count toward the cap."""
        text = "<div>" + "word " * 10 + "</div>"
        assert summarize(text, 160) == ("word " * 10).strip()

    def test_default_cap_is_description_length(self):
        """The default cap is the description length."""
        result = summarize("x" * 500)
        assert result == "x" * DESCRIPTION_LENGTH + ELLIPSIS

    def test_caps(self):
        """Listing and description caps are distinct."""
        assert LIST_EXCERPT_LENGTH == 80
        assert DESCRIPTION_LENGTH == 160


class TestExcerpt:
    """Tests for excerpt."""

    def test_plain_truncation(self):
        """Plain text is truncated without stripping markup."""
        assert excerpt("<b>" + "c" * 100, 80) == ("<b>" + "c" * 77) + ELLIPSIS

    def test_short_text_unchanged(self):
        """Text under the cap is returned as-is."""
        assert excerpt("  spaced  ", 80) == "  spaced  "

    def test_empty(self):
        """Empty input yields an empty string."""
        assert excerpt(None, 80) == ""
