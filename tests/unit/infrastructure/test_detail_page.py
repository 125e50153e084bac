"""Tests for HTML detail page scraping."""

from __future__ import annotations

from vodsearch.domain.entities import SourceDescriptor
from vodsearch.infrastructure.extraction.detail_page import (
    parse_detail_page,
    scrape_cover,
    scrape_description,
    scrape_title,
    scrape_year,
)

FFZY_LINK = "https://v.ffzy.test/20240101/12345_0a1b2c3d/index.m3u8"

DETAIL_HTML = f"""
<html><head><title>Iron Man - FFZY</title></head>
<body>
  <div class="poster"><img src="https://img.ffzy.test/cover/42.jpg"></div>
  <h1 class="title">  Iron Man  </h1>
  <ul>
    <li><span>Year:</span><a>2008</a></li>
  </ul>
  <div class="sketch"><p>Tony&nbsp;Stark builds a suit.</p></div>
  <ul class="playlist">
    <li>$https://ads.test/promo.m3u8</li>
    <li>EP01${FFZY_LINK}</li>
  </ul>
</body></html>
"""


class TestFieldScrapers:
    def test_title(self) -> None:
        assert scrape_title(DETAIL_HTML) == "Iron Man"

    def test_title_missing(self) -> None:
        assert scrape_title("<h2>Nope</h2>") == ""

    def test_description(self) -> None:
        assert scrape_description(DETAIL_HTML) == "Tony Stark builds a suit."

    def test_description_needs_exact_class(self) -> None:
        assert scrape_description('<div class="sketch-box">x</div>') == ""

    def test_description_single_quotes(self) -> None:
        assert scrape_description("<div id='d' class='sketch'>Plot</div>") == "Plot"

    def test_cover_is_first_jpg(self) -> None:
        assert scrape_cover(DETAIL_HTML) == "https://img.ffzy.test/cover/42.jpg"

    def test_cover_missing(self) -> None:
        assert scrape_cover('<img src="https://img.test/a.png">') == ""

    def test_year_inside_tag_text(self) -> None:
        assert scrape_year(DETAIL_HTML) == "2008"

    def test_year_ignores_attribute_digits(self) -> None:
        assert scrape_year('<a href="/2008/">Year 2008</a>') == "unknown"

    def test_year_needs_ascii_digits(self) -> None:
        assert scrape_year("<span>２０２３</span>") == "unknown"
        assert scrape_year("<b>２０２３</b><a>2023</a>") == "2023"


class TestParseDetailPage:
    def test_full_page(self, scrape_source: SourceDescriptor) -> None:
        result = parse_detail_page(DETAIL_HTML, "42", scrape_source)

        assert result.id == "42"
        assert result.title == "Iron Man"
        assert result.poster == "https://img.ffzy.test/cover/42.jpg"
        assert result.episodes == (FFZY_LINK,)
        assert result.source == "ffzy"
        assert result.source_name == "FFZY"
        assert result.year == "2008"
        assert result.desc == "Tony Stark builds a suit."
        assert result.class_ == ""
        assert result.type_name == ""
        assert result.douban_id == 0

    def test_empty_page(self, scrape_source: SourceDescriptor) -> None:
        result = parse_detail_page("<html></html>", "42", scrape_source)

        assert result.title == ""
        assert result.poster == ""
        assert result.episodes == ()
        assert result.year == "unknown"
        assert result.desc == ""
