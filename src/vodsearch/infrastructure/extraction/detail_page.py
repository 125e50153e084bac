"""Field scraping for MacCMS HTML detail pages.

Used for sources without a JSON detail endpoint. Extraction is regex based
on purpose: the patterns below are the contract with the upstream templates.
"""

from __future__ import annotations

import re

from vodsearch.domain.entities import UNKNOWN_YEAR, SearchResult, SourceDescriptor
from vodsearch.infrastructure.common.html_text import strip_html_tags

from .links import extract_html_episodes

TITLE_PATTERN = re.compile(r"<h1[^>]*>([^<]+)</h1>")
DESC_PATTERN = re.compile(r"""<div[^>]*class=["']sketch["'][^>]*>([\s\S]*?)</div>""")
COVER_PATTERN = re.compile(r"""(https?://[^"'\s]+?\.jpg)""")
YEAR_PATTERN = re.compile(r">(\d{4})<", re.ASCII)


def scrape_title(html: str) -> str:
    m = TITLE_PATTERN.search(html)
    return m.group(1).strip() if m else ""


def scrape_description(html: str) -> str:
    m = DESC_PATTERN.search(html)
    return strip_html_tags(m.group(1)) if m else ""


def scrape_cover(html: str) -> str:
    m = COVER_PATTERN.search(html)
    return m.group(1).strip() if m else ""


def scrape_year(html: str) -> str:
    m = YEAR_PATTERN.search(html)
    return m.group(1) if m else UNKNOWN_YEAR


def parse_detail_page(html: str, item_id: str, source: SourceDescriptor) -> SearchResult:
    """Build a ``SearchResult`` from a scraped detail page.

    Category and type are not present in the markup and come back empty;
    the Douban id is 0.
    """
    return SearchResult(
        id=item_id,
        title=scrape_title(html),
        poster=scrape_cover(html),
        episodes=tuple(extract_html_episodes(html, source.key)),
        source=source.key,
        source_name=source.name,
        class_="",
        year=scrape_year(html),
        desc=scrape_description(html),
        type_name="",
        douban_id=0,
    )
