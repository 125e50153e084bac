from .httpx_fetcher import HttpxFetcher

__all__ = ["HttpxFetcher"]
