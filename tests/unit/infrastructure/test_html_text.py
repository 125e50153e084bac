"""Tests for HTML tag stripping."""

from __future__ import annotations

from vodsearch.infrastructure.common.html_text import strip_html_tags


class TestStripHtmlTags:
    def test_empty(self) -> None:
        assert strip_html_tags(None) == ""
        assert strip_html_tags("") == ""

    def test_blocks_become_lines(self) -> None:
        assert strip_html_tags("<p>Line one</p><p>Line two</p>") == "Line one\nLine two"

    def test_nbsp_becomes_space(self) -> None:
        assert strip_html_tags("<p>A&nbsp;B</p>") == "A B"

    def test_collapses_inline_whitespace(self) -> None:
        assert strip_html_tags("<p>  lots   of\t\tspace </p>") == "lots of space"

    def test_plain_text_passes_through(self) -> None:
        assert strip_html_tags("plain text") == "plain text"
