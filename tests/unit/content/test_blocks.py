"""
test_blocks.py
--------------
Unit tests for memento.content.blocks.

Tests segmentation of entry text into text, URL and checklist segments,
and checklist completion helpers.
"""
import pytest

from memento.content.blocks import (
    checklist_items,
    extract_checklist,
    is_checklist_line,
    parse,
    parse_blocks,
    prune_completed,
    residual_text,
    toggle_completed,
)
from memento.dataclasses.segments import ChecklistSegment, TextSegment, UrlSegment


class TestPlainText:
    """Text without markers or URLs."""

    @pytest.mark.parametrize("text", ["hello", "  padded  ", "line one\nline two", "\n\nx\n\n"])
    def test_single_text_segment(self, text):
        """Plain text is one stripped TextSegment."""
        assert parse(text) == [TextSegment(text.strip())]

    @pytest.mark.parametrize("text", [None, "", "   ", "\n\n"])
    def test_empty_input(self, text):
        """Empty or blank input parses to nothing."""
        assert parse(text) == []

    def test_non_string_is_stringified(self):
        """Non-text input becomes a single text segment."""
        assert parse(42) == [TextSegment("42")]

    def test_markdown_is_kept_verbatim(self):
        """Headings and emphasis stay inside the text segment."""
        text = "# Title\n\n**bold** and _it_"
        assert parse(text) == [TextSegment(text)]


class TestUrls:
    """URL extraction."""

    def test_standalone_url_line(self):
        """A line holding only a URL becomes a URL segment."""
        assert parse("https://example.com/a") == [UrlSegment("https://example.com/a")]

    def test_standalone_url_splits_text(self):
        """Text before and after a URL line stays in separate segments."""
        result = parse("before\nhttp://x.example\nafter")
        assert result == [
            TextSegment("before"),
            UrlSegment("http://x.example"),
            TextSegment("after"),
        ]

    def test_standalone_url_with_surrounding_whitespace(self):
        """Whitespace around a lone URL is ignored."""
        assert parse("   http://x.example  ") == [UrlSegment("http://x.example")]

    def test_inline_urls(self):
        """Inline URLs follow the residual text of their line."""
        result = parse("Check this http://a.example and http://b.example")
        assert result == [
            TextSegment("Check this"),
            UrlSegment("http://a.example"),
            UrlSegment("http://b.example"),
        ]

    def test_inline_url_flushes_buffer(self):
        """Earlier lines are joined with the residual text."""
        result = parse("Intro line\nRead https://a.example today")
        assert result == [
            TextSegment("Intro line\nRead  today"),
            UrlSegment("https://a.example"),
        ]

    def test_markdown_link_not_decomposed(self):
        """Lines with Markdown link syntax are left for the renderer."""
        text = "See [the docs](https://docs.example) for more"
        assert parse(text) == [TextSegment(text)]

    def test_markdown_link_line_keeps_bare_url(self):
        """A bare URL beside a Markdown link stays inside the text."""
        text = "See [docs](https://d.example) and https://bare.example"
        assert parse(text) == [TextSegment(text)]

    def test_non_http_scheme_is_text(self):
        """Only http and https URLs are recognized."""
        assert parse("ftp://files.example") == [TextSegment("ftp://files.example")]


class TestResidualText:
    """Text left on a line after its URLs are removed."""

    def test_connectives_dropped_at_edges(self):
        assert residual_text("http://a.example or http://b.example") == ""

    def test_inner_connectives_kept(self):
        assert residual_text("salt and pepper http://a.example") == "salt and pepper"

    def test_inner_whitespace_kept(self):
        assert residual_text("a   http://x.example   b") == "a      b"

    def test_connective_only_dropped_next_to_url(self):
        assert residual_text("rock and roll http://x.example and") == "rock and roll"

    def test_connective_prefix_of_word_kept(self):
        assert residual_text("http://x.example android") == "android"

    def test_list_bullet_kept(self):
        assert parse("+ read https://a.example") == [
            TextSegment("+ read"),
            UrlSegment("https://a.example"),
        ]

    def test_table_pipes_kept(self):
        assert parse("| site | https://a.example |") == [
            TextSegment("| site |  |"),
            UrlSegment("https://a.example"),
        ]


class TestChecklist:
    """Checklist extraction and numbering."""

    def test_two_items_no_text(self):
        """Checklist-only text yields numbered items and no text."""
        assert parse("○ buy milk\n○ walk dog") == [
            ChecklistSegment("buy milk", 0),
            ChecklistSegment("walk dog", 1),
        ]

    def test_checklist_after_blocks(self):
        """Checklist items follow all text and URL segments."""
        result = parse("Groceries\n○ milk\nhttp://shop.example\n○ bread")
        assert result == [
            TextSegment("Groceries"),
            UrlSegment("http://shop.example"),
            ChecklistSegment("milk", 0),
            ChecklistSegment("bread", 1),
        ]

    def test_indices_contiguous_across_segments(self):
        """Indices count across the whole entry."""
        items = checklist_items("○ a\nhttp://x.example\n○ b\ntext\n○ c")
        assert [item.index for item in items] == [0, 1, 2]
        assert [item.content for item in items] == ["a", "b", "c"]

    def test_reparse_is_stable(self):
        """Identical text yields identical indices."""
        text = "notes\n○ one\n○ two\nmore\n○ three"
        assert checklist_items(text) == checklist_items(text)

    def test_bare_marker_is_empty_item(self):
        """A lone glyph counts as an empty item."""
        assert parse("○") == [ChecklistSegment("", 0)]

    def test_marker_needs_space(self):
        """A glyph glued to text is ordinary text."""
        assert parse("○nope") == [TextSegment("○nope")]

    def test_indented_marker_is_text(self):
        assert not is_checklist_line("  ○ indented")

    def test_extract_keeps_surrounding_text(self):
        """Non-checklist lines of a segment stay in order."""
        blocks, checklist = extract_checklist(parse_blocks("top\n○ x\nbottom"))
        assert blocks == [TextSegment("top\nbottom")]
        assert checklist == [ChecklistSegment("x", 0)]


class TestCompletion:
    """Completion index helpers."""

    def test_toggle_adds_and_removes(self):
        assert toggle_completed(frozenset(), 1) == frozenset({1})
        assert toggle_completed({1, 3}, 1) == frozenset({3})

    def test_toggle_twice_is_identity(self):
        start = frozenset({0, 2})
        assert toggle_completed(toggle_completed(start, 5), 5) == start

    def test_prune_drops_out_of_range(self):
        assert prune_completed({0, 2, 7, -1}, 3) == frozenset({0, 2})
