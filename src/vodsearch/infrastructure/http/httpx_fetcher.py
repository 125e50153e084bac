"""httpx implementation of the fetcher port.

Every call carries its own deadline. The deadline wraps the whole exchange
(connect, headers and body) so a slow body cannot outlive it, and it only
cancels the request it belongs to.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping

import httpx
import structlog

from vodsearch.domain.entities import FetchTimeout, NetworkFailure
from vodsearch.domain.ports import FetchResponse

log = structlog.get_logger(__name__)


class HttpxFetcher:
    """Fetcher backed by a shared ``httpx.AsyncClient``.

    The client is owned by the caller (FastAPI lifespan or CLI command) and is
    not closed here.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch(
        self,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float,
    ) -> FetchResponse:
        try:
            resp = await asyncio.wait_for(
                self._client.get(url, headers=dict(headers or {}), timeout=timeout),
                timeout=timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            log.debug("fetch_timeout", url=url, timeout=timeout)
            raise FetchTimeout(
                f"Request timed out after {timeout}s", url=url
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            log.debug("fetch_network_failure", url=url, error=str(exc))
            raise NetworkFailure(f"Request failed: {exc}", url=url) from exc

        return FetchResponse(url=url, status_code=resp.status_code, text=resp.text)
