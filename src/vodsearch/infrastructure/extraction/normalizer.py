"""Normalization of raw MacCMS ``list`` items into ``SearchResult`` records."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

from vodsearch.domain.entities import UNKNOWN_YEAR, SearchResult, SourceDescriptor
from vodsearch.infrastructure.common.html_text import strip_html_tags

from .links import extract_play_list_episodes

_WHITESPACE = re.compile(r"\s+")
_YEAR = re.compile(r"\d{4}", re.ASCII)


def normalize_title(value: Any) -> str:
    """Trim and collapse whitespace runs (newlines, tabs) to single spaces."""
    if value is None:
        return ""
    return _WHITESPACE.sub(" ", str(value).strip())


def extract_year(value: Any) -> str:
    """First run of four digits, or ``"unknown"``.

    >>> extract_year("2011年")
    '2011'
    """
    if value is None:
        return UNKNOWN_YEAR
    match = _YEAR.search(str(value))
    return match.group(0) if match else UNKNOWN_YEAR


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


def normalize_item(
    raw: Mapping[str, Any],
    source: SourceDescriptor,
    *,
    episodes: Sequence[str] | None = None,
    item_id: str | None = None,
) -> SearchResult:
    """Build a ``SearchResult`` from one raw API item.

    ``episodes`` overrides the play list extraction (detail lookups use the
    structured-episode mode). ``item_id`` overrides ``vod_id``.
    """
    if episodes is None:
        episodes = extract_play_list_episodes(raw.get("vod_play_url"))

    return SearchResult(
        id=item_id if item_id is not None else str(raw.get("vod_id", "")),
        title=normalize_title(raw.get("vod_name")),
        poster=str(raw.get("vod_pic") or ""),
        episodes=tuple(episodes),
        source=source.key,
        source_name=source.name,
        class_=_optional_str(raw.get("vod_class")),
        year=extract_year(raw.get("vod_year")),
        desc=strip_html_tags(raw.get("vod_content")),
        type_name=_optional_str(raw.get("type_name")),
        douban_id=raw.get("vod_douban_id"),
    )
