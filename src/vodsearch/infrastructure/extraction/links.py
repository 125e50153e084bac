"""Stream link extraction from MacCMS play lists and detail pages.

MacCMS encodes play lists as ``label$url#label$url`` entries, with
alternative play sources ("lines") separated by ``$$$``. Scraped pages embed
the same strings, so every pattern here anchors on the ``$`` that precedes a
URL.

The patterns are behavioural contracts; tests pin them.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

PLAY_SOURCE_SEPARATOR = "$$$"
EPISODE_SEPARATOR = "#"
LABEL_SEPARATOR = "$"

# $https://host/path/file.m3u8
M3U8_PATTERN = re.compile(r"""\$(https?://[^"'\s]+?\.m3u8)""")

# Stricter per-provider patterns for scraped pages, tried before M3U8_PATTERN.
# ffzy: .../20240101/12345_0a1b2c3d/index.m3u8
PROVIDER_PATTERNS: dict[str, re.Pattern[str]] = {
    "ffzy": re.compile(r"""\$(https?://[^"'\s]+?/[0-9]{8}/[0-9]+_[a-f0-9]+/index\.m3u8)"""),
}


def clean_link(link: str) -> str:
    """Strip a leading ``$`` and a trailing ``(...)`` presentation suffix."""
    if link.startswith(LABEL_SEPARATOR):
        link = link[1:]
    paren = link.find("(")
    return link[:paren] if paren > 0 else link


def unique_links(links: Iterable[str]) -> list[str]:
    """Clean and deduplicate, keeping the first occurrence of each link."""
    seen: set[str] = set()
    result: list[str] = []
    for raw in links:
        link = clean_link(raw)
        if link and link not in seen:
            seen.add(link)
            result.append(link)
    return result


def _dollar_matches(pattern: re.Pattern[str], text: str) -> list[str]:
    # Whole match including the "$" prefix; clean_link drops it.
    return [m.group(0) for m in pattern.finditer(text)]


def extract_play_list_episodes(play_url: str | None) -> list[str]:
    """Pick the play source with the most m3u8 links.

    Ties keep the earliest play source.
    """
    if not play_url:
        return []

    best: list[str] = []
    for group in play_url.split(PLAY_SOURCE_SEPARATOR):
        matches = _dollar_matches(M3U8_PATTERN, group)
        if len(matches) > len(best):
            best = matches
    return unique_links(best)


def extract_structured_episodes(play_url: str | None) -> list[str]:
    """Read ``label$url`` entries of the first play source.

    Only absolute http(s) URLs survive; the file type is not checked.
    """
    if not play_url:
        return []

    main_source = play_url.split(PLAY_SOURCE_SEPARATOR)[0]
    urls: list[str] = []
    for entry in main_source.split(EPISODE_SEPARATOR):
        parts = entry.split(LABEL_SEPARATOR)
        url = parts[1] if len(parts) > 1 else ""
        if url.startswith(("http://", "https://")):
            urls.append(url)
    return unique_links(urls)


def extract_content_episodes(content: str | None) -> list[str]:
    """Scan free text (usually ``vod_content``) for ``$``-prefixed m3u8 links."""
    if not content:
        return []
    return unique_links(_dollar_matches(M3U8_PATTERN, content))


def extract_html_episodes(html: str, source_key: str) -> list[str]:
    """Scan a scraped detail page.

    A provider-specific pattern wins when it finds anything; otherwise the
    generic pattern runs over the whole page.
    """
    matches: list[str] = []
    strict = PROVIDER_PATTERNS.get(source_key)
    if strict is not None:
        matches = _dollar_matches(strict, html)
    if not matches:
        matches = _dollar_matches(M3U8_PATTERN, html)
    return unique_links(matches)
