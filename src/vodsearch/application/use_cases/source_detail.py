"""Detail lookup by source key."""

from __future__ import annotations

from collections.abc import Sequence

from vodsearch.domain.entities import SearchResult, SourceDescriptor, SourceNotFound
from vodsearch.domain.ports import VideoApiPort


class SourceDetailUseCase:
    """Finds the configured source and delegates to the video API.

    Raises ``SourceNotFound`` for unknown keys. Errors from the detail lookup
    are not caught here.
    """

    def __init__(
        self, video_api: VideoApiPort, sources: Sequence[SourceDescriptor]
    ) -> None:
        self.video_api = video_api
        self._sources = {s.key: s for s in sources}

    async def execute(self, source_key: str, item_id: str) -> SearchResult:
        source = self._sources.get(source_key)
        if source is None:
            raise SourceNotFound(f"Unknown source: {source_key!r}")
        return await self.video_api.get_detail(source, item_id)
