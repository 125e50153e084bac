"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "vodsearch",
    "environment": "dev",
    "sources": [],
    "api": {
        "search_path": "?ac=videolist&wd=",
        "search_page_path": "?ac=videolist&wd={query}&pg={page}",
        "detail_path": "?ac=videolist&ids=",
        "detail_page_path": "/index.php/vod/detail/id/{id}.html",
        "max_search_pages": 5,
        "search_timeout_seconds": 8.0,
        "detail_timeout_seconds": 10.0,
    },
    "http": {
        "follow_redirects": True,
        "max_concurrent_sources": 10,
    },
    "logging": {
        "level": "INFO",
        "format": None,  # Derived from environment in schema.py
    },
}
