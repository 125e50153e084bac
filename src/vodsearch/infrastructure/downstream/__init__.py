from .client import VideoApiClient, get_detail_from_api, search_from_api
from .detail import DetailResolver
from .search import SearchOrchestrator, SearchPage

__all__ = [
    "DetailResolver",
    "SearchOrchestrator",
    "SearchPage",
    "VideoApiClient",
    "get_detail_from_api",
    "search_from_api",
]
