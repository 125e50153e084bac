"""Source descriptors and the canonical search result record."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

UNKNOWN_YEAR = "unknown"


@dataclass(frozen=True)
class SourceDescriptor:
    """One upstream video API provider.

    ``detail`` is the base URL of the provider's HTML site. When set, detail
    lookups scrape ``{detail}/index.php/vod/detail/id/{id}.html`` instead of
    calling the JSON detail endpoint.
    """

    key: str
    name: str
    api: str
    detail: str | None = None

    @property
    def scrapes_detail(self) -> bool:
        return bool(self.detail)


@dataclass(frozen=True)
class SearchResult:
    """Normalized search/detail record."""

    id: str
    title: str
    poster: str
    source: str
    source_name: str
    episodes: tuple[str, ...] = field(default_factory=tuple)
    year: str = UNKNOWN_YEAR
    desc: str = ""

    # Optional provider fields (None when the provider omits them)
    class_: str | None = None
    type_name: str | None = None
    douban_id: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Render the wire shape (``class`` instead of ``class_``)."""
        return {
            "id": self.id,
            "title": self.title,
            "poster": self.poster,
            "episodes": list(self.episodes),
            "source": self.source,
            "source_name": self.source_name,
            "class": self.class_,
            "year": self.year,
            "desc": self.desc,
            "type_name": self.type_name,
            "douban_id": self.douban_id,
        }
