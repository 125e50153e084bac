"""Composition root: dependency injection via FastAPI lifespan."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, cast

import httpx
import structlog
from fastapi import FastAPI

from vodsearch.infrastructure.config.schema import AppConfig
from vodsearch.infrastructure.downstream import VideoApiClient
from vodsearch.infrastructure.http import HttpxFetcher
from vodsearch.interfaces.app_state import AppState

log = structlog.get_logger(__name__)


def build_http_client(config: AppConfig) -> httpx.AsyncClient:
    """Shared client; per-request deadlines come from the fetcher."""
    return httpx.AsyncClient(
        follow_redirects=config.http_follow_redirects,
        headers={"User-Agent": config.http_user_agent},
        limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    state = cast(AppState, app.state)
    config = state.config

    state.http_client = build_http_client(config)
    state.fetcher = HttpxFetcher(state.http_client)
    state.video_api = VideoApiClient(state.fetcher, config.api)

    log.info(
        "app_started",
        sources=[s.key for s in config.sources],
        max_search_pages=config.api.max_search_pages,
    )
    try:
        yield
    finally:
        await state.http_client.aclose()
        log.info("app_stopped")
