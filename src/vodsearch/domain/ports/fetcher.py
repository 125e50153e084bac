"""Port for fetching upstream API responses and detail pages."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from vodsearch.domain.entities.errors import MalformedPayload


@dataclass(frozen=True)
class FetchResponse:
    """Status and decoded body of one upstream response."""

    url: str
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        # some upstreams prefix the body with a UTF-8 BOM
        text = self.text.removeprefix("\ufeff")
        try:
            return json.loads(text)
        except ValueError as exc:
            raise MalformedPayload(f"Invalid JSON body: {exc}", url=self.url) from exc


class FetcherPort(Protocol):
    """Async GET with a per-request deadline.

    Implementations raise ``NetworkFailure`` or ``FetchTimeout``. Non-2xx
    responses are returned, not raised; callers decide what a bad status
    means for them.
    """

    async def fetch(
        self,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float,
    ) -> FetchResponse: ...
