"""Shared test fixtures for the vodsearch test suite."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Mapping
from typing import Any

import pytest

from vodsearch.domain.entities import SearchResult, SourceDescriptor
from vodsearch.domain.ports import FetchResponse
from vodsearch.infrastructure.config import ApiConfig

API_BASE = "https://api.demo.test/api.php/provide/vod"
DETAIL_BASE = "https://ffzy.test"

# ---------------------------------------------------------------------------
# Fake fetcher (satisfies FetcherPort)
# ---------------------------------------------------------------------------


class FakeFetcher:
    """In-memory FetcherPort.

    Unknown URLs answer 404. Routes may hold a FetchResponse or an exception
    to raise. ``delays`` lets tests reorder completion of concurrent fetches.
    """

    def __init__(self) -> None:
        self.routes: dict[str, FetchResponse | BaseException] = {}
        self.delays: dict[str, float] = {}
        self.calls: list[str] = []
        self.timeouts: list[float] = []
        self.headers: list[dict[str, str]] = []

    def add_json(self, url: str, payload: Any, *, status: int = 200) -> None:
        self.routes[url] = FetchResponse(
            url=url, status_code=status, text=json.dumps(payload)
        )

    def add_text(self, url: str, text: str, *, status: int = 200) -> None:
        self.routes[url] = FetchResponse(url=url, status_code=status, text=text)

    def add_error(self, url: str, exc: BaseException) -> None:
        self.routes[url] = exc

    async def fetch(
        self,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float,
    ) -> FetchResponse:
        self.calls.append(url)
        self.timeouts.append(timeout)
        self.headers.append(dict(headers or {}))

        delay = self.delays.get(url)
        if delay:
            await asyncio.sleep(delay)

        outcome = self.routes.get(url)
        if outcome is None:
            return FetchResponse(url=url, status_code=404, text="")
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture()
def fake_fetcher() -> FakeFetcher:
    return FakeFetcher()


# ---------------------------------------------------------------------------
# Domain fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def api_source() -> SourceDescriptor:
    """Source served through the JSON detail endpoint."""
    return SourceDescriptor(key="demo", name="Demo TV", api=API_BASE)


@pytest.fixture()
def scrape_source() -> SourceDescriptor:
    """Source whose details are scraped from HTML pages (strict ffzy pattern)."""
    return SourceDescriptor(
        key="ffzy",
        name="FFZY",
        api="https://api.ffzy.test/api.php/provide/vod",
        detail=DETAIL_BASE,
    )


@pytest.fixture()
def api_config() -> ApiConfig:
    return ApiConfig(max_search_pages=3)


@pytest.fixture()
def search_result() -> SearchResult:
    """Minimal valid SearchResult."""
    return SearchResult(
        id="101",
        title="Iron Man",
        poster="https://img.demo.test/101.jpg",
        source="demo",
        source_name="Demo TV",
        episodes=("https://cdn.demo.test/101/1.m3u8",),
        year="2008",
        desc="A movie about Iron Man",
        class_="Action",
        type_name="Movie",
        douban_id=1432146,
    )


def make_item(vod_id: int | str, name: str = "Title", **extra: Any) -> dict[str, Any]:
    """Raw MacCMS list item."""
    item: dict[str, Any] = {
        "vod_id": vod_id,
        "vod_name": name,
        "vod_pic": f"https://img.demo.test/{vod_id}.jpg",
        "vod_play_url": f"EP1$https://cdn.demo.test/{vod_id}/1.m3u8",
    }
    item.update(extra)
    return item


@pytest.fixture()
def item_factory():
    return make_item
