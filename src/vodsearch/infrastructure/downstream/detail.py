"""Detail lookups: JSON detail endpoint or scraped HTML detail page."""

from __future__ import annotations

from typing import Any

import structlog

from vodsearch.domain.entities import (
    InvalidPayload,
    MalformedPayload,
    RequestFailed,
    SearchResult,
    SourceDescriptor,
)
from vodsearch.domain.ports import FetcherPort, FetchResponse
from vodsearch.infrastructure.config.schema import ApiConfig
from vodsearch.infrastructure.extraction import (
    extract_content_episodes,
    extract_structured_episodes,
    normalize_item,
    parse_detail_page,
)

log = structlog.get_logger(__name__)


class DetailResolver:
    """Resolves one title of one source to a ``SearchResult``.

    Unlike search, failures are raised: ``RequestFailed`` for a non-2xx
    answer and ``InvalidPayload`` for a JSON body without items.
    ``NetworkFailure`` and ``FetchTimeout`` from the fetcher pass through
    unchanged.
    """

    def __init__(self, fetcher: FetcherPort, api: ApiConfig) -> None:
        self._fetcher = fetcher
        self._api = api

    def api_url(self, source: SourceDescriptor, item_id: str) -> str:
        return f"{source.api}{self._api.detail_path}{item_id}"

    def page_url(self, source: SourceDescriptor, item_id: str) -> str:
        return f"{source.detail}{self._api.detail_page_path.replace('{id}', item_id)}"

    async def get_detail(self, source: SourceDescriptor, item_id: str) -> SearchResult:
        item_id = str(item_id)
        if source.scrapes_detail:
            return await self._detail_from_page(source, item_id)
        return await self._detail_from_api(source, item_id)

    async def _fetch(self, url: str, *, what: str) -> FetchResponse:
        resp = await self._fetcher.fetch(
            url,
            headers=self._api.detail_headers,
            timeout=self._api.detail_timeout_seconds,
        )
        if not resp.ok:
            log.warning("detail_bad_status", url=url, status=resp.status_code)
            raise RequestFailed(
                f"{what} request failed: {resp.status_code}",
                url=url,
                status_code=resp.status_code,
            )
        return resp

    async def _detail_from_api(
        self, source: SourceDescriptor, item_id: str
    ) -> SearchResult:
        url = self.api_url(source, item_id)
        resp = await self._fetch(url, what="Detail")

        try:
            data: Any = resp.json()
        except MalformedPayload as exc:
            raise InvalidPayload("Detail response is not valid JSON", url=url) from exc

        items = data.get("list") if isinstance(data, dict) else None
        if not isinstance(items, list) or not items or not isinstance(items[0], dict):
            raise InvalidPayload("Detail response contains no items", url=url)

        raw = items[0]
        episodes = extract_structured_episodes(raw.get("vod_play_url"))
        if not episodes:
            episodes = extract_content_episodes(raw.get("vod_content"))

        log.debug(
            "detail_resolved",
            source=source.key,
            id=item_id,
            mode="api",
            episodes=len(episodes),
        )
        return normalize_item(raw, source, episodes=episodes, item_id=item_id)

    async def _detail_from_page(
        self, source: SourceDescriptor, item_id: str
    ) -> SearchResult:
        url = self.page_url(source, item_id)
        resp = await self._fetch(url, what="Detail page")
        result = parse_detail_page(resp.text, item_id, source)

        log.debug(
            "detail_resolved",
            source=source.key,
            id=item_id,
            mode="html",
            episodes=len(result.episodes),
        )
        return result
