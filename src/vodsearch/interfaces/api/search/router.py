"""Search endpoints: aggregate search and the configured source list."""

from __future__ import annotations

from typing import cast

import structlog
from fastapi import APIRouter, Query, Request

from vodsearch.application.use_cases import AggregateSearchUseCase
from vodsearch.interfaces.app_state import AppState

log = structlog.get_logger(__name__)

router = APIRouter(prefix="/api", tags=["search"])


@router.get("/search")
async def search(
    request: Request,
    q: str = Query(..., min_length=1, description="Search query"),
    source: list[str] | None = Query(
        default=None, description="Restrict to these source keys (repeatable)."
    ),
) -> dict:
    """Search every configured source (or the given subset).

    Always answers 200; sources that fail contribute no results.
    """
    state = cast(AppState, request.app.state)
    uc = AggregateSearchUseCase(
        video_api=state.video_api,
        sources=state.config.descriptors(),
        max_concurrent=state.config.max_concurrent_sources,
    )
    results = await uc.execute(q, source_keys=source)
    return {
        "query": q,
        "count": len(results),
        "results": [r.to_dict() for r in results],
    }


@router.get("/sources")
async def sources(request: Request) -> dict:
    state = cast(AppState, request.app.state)
    return {
        "sources": [
            {"key": s.key, "name": s.name, "scrapes_detail": s.scrapes_detail}
            for s in state.config.descriptors()
        ]
    }
