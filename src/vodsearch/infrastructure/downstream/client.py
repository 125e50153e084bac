"""Video API client combining paginated search and detail resolution."""

from __future__ import annotations

from vodsearch.domain.entities import SearchResult, SourceDescriptor
from vodsearch.domain.ports import FetcherPort
from vodsearch.infrastructure.config.schema import ApiConfig

from .detail import DetailResolver
from .search import SearchOrchestrator


class VideoApiClient:
    """Implements ``VideoApiPort`` on top of a fetcher and an ``ApiConfig``."""

    def __init__(self, fetcher: FetcherPort, api: ApiConfig) -> None:
        self.searcher = SearchOrchestrator(fetcher, api)
        self.resolver = DetailResolver(fetcher, api)

    async def search(self, source: SourceDescriptor, query: str) -> list[SearchResult]:
        return await self.searcher.search(source, query)

    async def get_detail(self, source: SourceDescriptor, item_id: str) -> SearchResult:
        return await self.resolver.get_detail(source, item_id)


async def search_from_api(
    source: SourceDescriptor,
    query: str,
    *,
    fetcher: FetcherPort,
    api: ApiConfig,
) -> list[SearchResult]:
    """Search one source. Never raises; failures return ``[]``."""
    return await SearchOrchestrator(fetcher, api).search(source, query)


async def get_detail_from_api(
    source: SourceDescriptor,
    item_id: str,
    *,
    fetcher: FetcherPort,
    api: ApiConfig,
) -> SearchResult:
    """Resolve one title. Raises ``RequestFailed``/``InvalidPayload``."""
    return await DetailResolver(fetcher, api).get_detail(source, item_id)
