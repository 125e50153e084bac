"""Port for per-source search and detail lookups."""

from __future__ import annotations

from typing import Protocol

from vodsearch.domain.entities import SearchResult, SourceDescriptor


class VideoApiPort(Protocol):
    """Async access to one MacCMS-style source at a time."""

    async def search(
        self, source: SourceDescriptor, query: str
    ) -> list[SearchResult]: ...

    async def get_detail(
        self, source: SourceDescriptor, item_id: str
    ) -> SearchResult: ...
