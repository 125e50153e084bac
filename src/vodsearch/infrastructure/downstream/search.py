"""Paginated search against one MacCMS video API source."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

import structlog

from vodsearch.domain.entities import (
    BadStatus,
    FetchError,
    FetchTimeout,
    MalformedPayload,
    SearchResult,
    SourceDescriptor,
)
from vodsearch.domain.ports import FetcherPort
from vodsearch.infrastructure.config.schema import ApiConfig
from vodsearch.infrastructure.extraction import normalize_item

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SearchPage:
    """Normalized results of one page plus the page count it advertised."""

    results: list[SearchResult] = field(default_factory=list)
    page_count: int = 1


_EMPTY_PAGE = SearchPage()


def _encode_query(query: str) -> str:
    # Same reserved set as JavaScript's encodeURIComponent.
    return quote(query, safe="!~*'()")


def _parse_page_count(value: Any) -> int:
    # "3", 3.0 and "2.5" all count; fractions truncate
    try:
        count = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 1
    return count if count >= 1 else 1


class SearchOrchestrator:
    """Fetches page 1, then the remaining pages in parallel.

    ``search()`` never raises: every failure degrades to fewer (or no)
    results and a log line carrying the offending URL.
    """

    def __init__(self, fetcher: FetcherPort, api: ApiConfig) -> None:
        self._fetcher = fetcher
        self._api = api

    def page_one_url(self, source: SourceDescriptor, query: str) -> str:
        return f"{source.api}{self._api.search_path}{_encode_query(query)}"

    def page_url(self, source: SourceDescriptor, query: str, page: int) -> str:
        path = self._api.search_page_path.replace(
            "{query}", _encode_query(query)
        ).replace("{page}", str(page))
        return f"{source.api}{path}"

    async def fetch_page(self, url: str, source: SourceDescriptor) -> SearchPage:
        """Fetch and normalize one page. Failures yield an empty page."""
        try:
            resp = await self._fetcher.fetch(
                url,
                headers=self._api.search_headers,
                timeout=self._api.search_timeout_seconds,
            )
            if not resp.ok:
                raise BadStatus(
                    f"API request failed with status {resp.status_code}",
                    url=url,
                    status_code=resp.status_code,
                )

            data = resp.json()
            items = data.get("list") if isinstance(data, dict) else None
            if not isinstance(items, list):
                raise MalformedPayload("Response has no 'list' array", url=url)
            if not items:
                return _EMPTY_PAGE

            return SearchPage(
                results=[normalize_item(item, source) for item in items],
                page_count=_parse_page_count(data.get("pagecount")),
            )
        except FetchTimeout:
            log.warning("search_page_timeout", source=source.key, url=url)
        except BadStatus as exc:
            log.warning(
                "search_page_bad_status",
                source=source.key,
                url=url,
                status=exc.status_code,
            )
        except FetchError as exc:
            log.warning(
                "search_page_failed",
                source=source.key,
                url=url,
                error_type=type(exc).__name__,
                error=str(exc),
            )
        except Exception as exc:  # noqa: BLE001
            log.warning(
                "search_page_parse_error",
                source=source.key,
                url=url,
                error=str(exc),
            )
        return _EMPTY_PAGE

    async def search(self, source: SourceDescriptor, query: str) -> list[SearchResult]:
        try:
            first = await self.fetch_page(self.page_one_url(source, query), source)
            if not first.results:
                return []

            pages_to_fetch = min(first.page_count, self._api.max_search_pages)
            if pages_to_fetch <= 1:
                return list(first.results)

            # gather() keeps argument order, so page order survives any
            # completion order.
            rest = await asyncio.gather(
                *(
                    self.fetch_page(self.page_url(source, query, page), source)
                    for page in range(2, pages_to_fetch + 1)
                )
            )

            results = list(first.results)
            for page in rest:
                results.extend(page.results)

            log.debug(
                "search_completed",
                source=source.key,
                query=query,
                pages=pages_to_fetch,
                count=len(results),
            )
            return results
        except Exception as exc:  # noqa: BLE001
            log.error(
                "search_failed",
                source=source.key,
                query=query,
                error=str(exc),
            )
            return []
