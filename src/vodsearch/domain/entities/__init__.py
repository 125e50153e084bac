from .errors import (
    BadStatus,
    DetailError,
    FetchError,
    FetchTimeout,
    InvalidPayload,
    MalformedPayload,
    NetworkFailure,
    RequestFailed,
    SourceNotFound,
    VodSearchError,
)
from .video import UNKNOWN_YEAR, SearchResult, SourceDescriptor

__all__ = [
    "UNKNOWN_YEAR",
    "BadStatus",
    "DetailError",
    "FetchError",
    "FetchTimeout",
    "InvalidPayload",
    "MalformedPayload",
    "NetworkFailure",
    "RequestFailed",
    "SearchResult",
    "SourceDescriptor",
    "SourceNotFound",
    "VodSearchError",
]
