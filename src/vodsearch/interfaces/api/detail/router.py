"""Detail endpoint with error mapping for surfaced lookup failures."""

from __future__ import annotations

from typing import cast

import structlog
from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from vodsearch.application.use_cases import SourceDetailUseCase
from vodsearch.domain.entities import (
    DetailError,
    FetchError,
    FetchTimeout,
    SourceNotFound,
)
from vodsearch.interfaces.app_state import AppState

log = structlog.get_logger(__name__)

router = APIRouter(prefix="/api", tags=["detail"])


def _error(status_code: int, error: str, detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "detail": detail},
    )


@router.get("/detail")
async def detail(
    request: Request,
    source: str = Query(..., min_length=1, description="Source key"),
    id: str = Query(..., min_length=1, description="Item id within the source"),
) -> JSONResponse:
    state = cast(AppState, request.app.state)
    uc = SourceDetailUseCase(
        video_api=state.video_api,
        sources=state.config.descriptors(),
    )

    try:
        result = await uc.execute(source, id)
    except SourceNotFound as exc:
        return _error(404, "source_not_found", str(exc))
    except DetailError as exc:
        # RequestFailed / InvalidPayload: upstream answered, but uselessly.
        log.warning("detail_failed", source=source, id=id, error=str(exc))
        return _error(502, "upstream_error", str(exc))
    except FetchTimeout as exc:
        log.warning("detail_timeout", source=source, id=id, url=exc.url)
        return _error(504, "upstream_timeout", str(exc))
    except FetchError as exc:
        log.warning("detail_unreachable", source=source, id=id, error=str(exc))
        return _error(502, "upstream_unreachable", str(exc))

    return JSONResponse(content=result.to_dict())
