"""Fan one query out over every configured source."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

import structlog

from vodsearch.domain.entities import SearchResult, SourceDescriptor
from vodsearch.domain.ports import VideoApiPort

log = structlog.get_logger(__name__)


class AggregateSearchUseCase:
    """Searches all sources concurrently and flattens the results.

    Results are grouped per source in the order the sources were given,
    regardless of which source answers first. A source that raises is
    logged and skipped.
    """

    def __init__(
        self,
        video_api: VideoApiPort,
        sources: Sequence[SourceDescriptor],
        *,
        max_concurrent: int = 10,
    ) -> None:
        self.video_api = video_api
        self.sources = list(sources)
        self._max_concurrent = max_concurrent

    async def execute(
        self, query: str, *, source_keys: Sequence[str] | None = None
    ) -> list[SearchResult]:
        query = query.strip()
        if not query:
            return []

        sources = self.sources
        if source_keys:
            wanted = set(source_keys)
            sources = [s for s in sources if s.key in wanted]
        if not sources:
            return []

        sem = asyncio.Semaphore(self._max_concurrent)

        async def _search_one(source: SourceDescriptor) -> list[SearchResult]:
            async with sem:
                try:
                    return await self.video_api.search(source, query)
                except Exception as exc:  # noqa: BLE001
                    log.warning(
                        "aggregate_source_failed",
                        source=source.key,
                        query=query,
                        error=str(exc),
                    )
                    return []

        per_source = await asyncio.gather(*(_search_one(s) for s in sources))

        results: list[SearchResult] = []
        for batch in per_source:
            results.extend(batch)

        log.info(
            "aggregate_search",
            query=query,
            sources=len(sources),
            count=len(results),
        )
        return results
