from __future__ import annotations

import time

import structlog
from fastapi import FastAPI, Request

from vodsearch import __version__
from vodsearch.infrastructure.config import AppConfig
from vodsearch.interfaces.app_state import AppState
from vodsearch.interfaces.composition import lifespan

log = structlog.get_logger(__name__)


def build_app(config: AppConfig) -> FastAPI:
    """Build the FastAPI app. Only configuration is stored here.

    Resources (HTTP client, fetcher, video API client) are created in lifespan().
    """
    app = FastAPI(
        title="vodsearch",
        description="Aggregated search over MacCMS-style video APIs",
        version=__version__,
        lifespan=lifespan,
    )

    app.state = AppState()
    app.state.config = config

    from vodsearch.interfaces.api.detail.router import router as detail_router
    from vodsearch.interfaces.api.search.router import router as search_router

    app.include_router(search_router)
    app.include_router(detail_router)

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration_ms = (time.perf_counter() - start) * 1000.0
            log.info(
                "http_request",
                method=request.method,
                path=request.url.path,
                query=str(request.url.query),
                status_code=status_code,
                duration_ms=round(duration_ms, 2),
                client_host=(request.client.host if request.client else None),
            )

    return app
