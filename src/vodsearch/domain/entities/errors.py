"""Error taxonomy for fetches and detail lookups."""

from __future__ import annotations


class VodSearchError(Exception):
    """Base class for all vodsearch errors."""


class SourceNotFound(VodSearchError):
    """Raised when a source key is not configured."""


# ---------------------------------------------------------------------------
# Fetch errors (produced by the fetcher port)
# ---------------------------------------------------------------------------


class FetchError(VodSearchError):
    """A single upstream request failed."""

    def __init__(self, message: str, *, url: str = "") -> None:
        super().__init__(message)
        self.url = url


class NetworkFailure(FetchError):
    """Transport-level failure (DNS, connect, TLS, protocol)."""


class FetchTimeout(FetchError):
    """The request was aborted after its deadline."""


class BadStatus(FetchError):
    """Upstream answered with a non-2xx status."""

    def __init__(self, message: str, *, url: str = "", status_code: int) -> None:
        super().__init__(message, url=url)
        self.status_code = status_code


class MalformedPayload(FetchError):
    """Body could not be decoded or lacks the expected shape."""


# ---------------------------------------------------------------------------
# Detail errors (surfaced to callers of the detail lookup)
# ---------------------------------------------------------------------------


class DetailError(VodSearchError):
    """Detail lookup failed in a way the caller should see."""


class RequestFailed(BadStatus, DetailError):
    pass


class InvalidPayload(MalformedPayload, DetailError):
    pass
