"""Application state container for FastAPI dependency injection."""

from __future__ import annotations

import httpx
from starlette.datastructures import State

from vodsearch.domain.ports import FetcherPort, VideoApiPort
from vodsearch.infrastructure.config import AppConfig


class AppState(State):
    """FastAPI application state with all DI resources.

    Lifecycle managed by composition.py::lifespan().
    """

    # Configuration
    config: AppConfig

    # Infrastructure
    http_client: httpx.AsyncClient
    fetcher: FetcherPort

    # Domain Ports
    video_api: VideoApiPort
