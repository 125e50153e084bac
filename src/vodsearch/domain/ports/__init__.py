from .fetcher import FetcherPort, FetchResponse
from .video_api import VideoApiPort

__all__ = [
    "FetchResponse",
    "FetcherPort",
    "VideoApiPort",
]
