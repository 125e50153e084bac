from .detail_page import parse_detail_page
from .links import (
    extract_content_episodes,
    extract_html_episodes,
    extract_play_list_episodes,
    extract_structured_episodes,
)
from .normalizer import extract_year, normalize_item, normalize_title

__all__ = [
    "extract_content_episodes",
    "extract_html_episodes",
    "extract_play_list_episodes",
    "extract_structured_episodes",
    "extract_year",
    "normalize_item",
    "normalize_title",
    "parse_detail_page",
]
