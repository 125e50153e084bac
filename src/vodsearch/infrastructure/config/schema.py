"""Pydantic configuration models with validation."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    Field,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from vodsearch.domain.entities import SourceDescriptor

Environment = Literal["dev", "test", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/131.0.0.0 Safari/537.36"
)


def _default_headers() -> dict[str, str]:
    return {"User-Agent": DEFAULT_USER_AGENT, "Accept": "application/json"}


class SourceConfig(BaseModel):
    """One upstream API site (YAML: ``sources[]``)."""

    key: str = Field(min_length=1, description="Stable source id.")
    name: str = Field(min_length=1, description="Display name.")
    api: str = Field(min_length=1, description="Base API URL.")
    detail: Optional[str] = Field(
        default=None,
        description="HTML site base URL. When set, details are scraped.",
    )

    @field_validator("api", "detail")
    @classmethod
    def _strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip().rstrip("/")

    def to_descriptor(self) -> SourceDescriptor:
        return SourceDescriptor(
            key=self.key,
            name=self.name,
            api=self.api,
            detail=self.detail or None,
        )


class ApiConfig(BaseModel):
    """Request shapes shared by every source (YAML: ``api.*``).

    ``search_page_path`` must contain ``{query}`` and ``{page}``;
    ``detail_page_path`` must contain ``{id}``.
    """

    search_path: str = Field(default="?ac=videolist&wd=")
    search_page_path: str = Field(default="?ac=videolist&wd={query}&pg={page}")
    detail_path: str = Field(default="?ac=videolist&ids=")
    detail_page_path: str = Field(default="/index.php/vod/detail/id/{id}.html")

    search_headers: dict[str, str] = Field(default_factory=_default_headers)
    detail_headers: dict[str, str] = Field(default_factory=_default_headers)

    max_search_pages: int = Field(
        default=5,
        description="Upper bound on pages fetched per source and query.",
    )
    search_timeout_seconds: float = Field(default=8.0)
    detail_timeout_seconds: float = Field(default=10.0)

    @field_validator("max_search_pages")
    @classmethod
    def _validate_max_pages(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_search_pages must be >= 1")
        return v

    @field_validator("search_timeout_seconds", "detail_timeout_seconds")
    @classmethod
    def _validate_timeouts(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeouts must be > 0")
        return v

    @field_validator("search_page_path")
    @classmethod
    def _validate_page_template(cls, v: str) -> str:
        if "{query}" not in v or "{page}" not in v:
            raise ValueError("search_page_path needs {query} and {page} placeholders")
        return v

    @field_validator("detail_page_path")
    @classmethod
    def _validate_detail_template(cls, v: str) -> str:
        if "{id}" not in v:
            raise ValueError("detail_page_path needs an {id} placeholder")
        return v


class AppConfig(BaseModel):
    """
    Canonical application configuration (validated, final).

    Note:
    - YAML is expected to be sectioned (sources/api/http/logging).
    - Environment variables are handled by EnvOverrides(BaseSettings) to allow strict
      precedence control (defaults < YAML < ENV < CLI) in load.py.
    """

    app_name: str = Field(default="vodsearch", description="Application name.")
    environment: Environment = Field(
        default="dev",
        description="Runtime environment (affects defaults like log format).",
    )

    sources: list[SourceConfig] = Field(default_factory=list)
    api: ApiConfig = Field(default_factory=ApiConfig)

    # HTTP (YAML section: http.*)
    http_user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        validation_alias=AliasChoices(
            "http_user_agent",
            AliasPath("http", "user_agent"),
        ),
        description="Default User-Agent for the shared HTTP client.",
    )
    http_follow_redirects: bool = Field(
        default=True,
        validation_alias=AliasChoices(
            "http_follow_redirects",
            AliasPath("http", "follow_redirects"),
        ),
    )
    max_concurrent_sources: int = Field(
        default=10,
        validation_alias=AliasChoices(
            "max_concurrent_sources",
            AliasPath("http", "max_concurrent_sources"),
        ),
        description="Max sources searched in parallel by one aggregate search.",
    )

    # Logging (YAML section: logging.*)
    log_level: LogLevel = Field(
        default="INFO",
        validation_alias=AliasChoices(
            "log_level",
            AliasPath("logging", "level"),
        ),
    )
    log_format: Optional[LogFormat] = Field(
        default=None,
        validation_alias=AliasChoices(
            "log_format",
            AliasPath("logging", "format"),
        ),
        description="console/json. If unset, derived from environment.",
    )

    @field_validator("max_concurrent_sources")
    @classmethod
    def _validate_concurrency(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_concurrent_sources must be >= 1")
        return v

    @field_validator("sources")
    @classmethod
    def _validate_unique_keys(cls, v: list[SourceConfig]) -> list[SourceConfig]:
        seen: set[str] = set()
        for source in v:
            if source.key in seen:
                raise ValueError(f"duplicate source key: {source.key!r}")
            seen.add(source.key)
        return v

    @model_validator(mode="after")
    def _derive_defaults(self) -> "AppConfig":
        # Default log format: console in dev/test, json in prod.
        if self.log_format is None:
            self.log_format = "json" if self.environment == "prod" else "console"
        return self

    def descriptors(self) -> list[SourceDescriptor]:
        return [s.to_descriptor() for s in self.sources]

    def to_sectioned_dict(self) -> dict[str, Any]:
        """
        Dump configuration in the sectioned shape used by config.yaml/docs.
        """
        return {
            "app_name": self.app_name,
            "environment": self.environment,
            "sources": [s.model_dump() for s in self.sources],
            "api": self.api.model_dump(),
            "http": {
                "user_agent": self.http_user_agent,
                "follow_redirects": self.http_follow_redirects,
                "max_concurrent_sources": self.max_concurrent_sources,
            },
            "logging": {"level": self.log_level, "format": self.log_format},
        }


class EnvOverrides(BaseSettings):
    """
    Environment-variable overrides (all optional).

    Supported env var examples (flat, explicit):
    - VODSEARCH_ENVIRONMENT
    - VODSEARCH_LOG_LEVEL
    - VODSEARCH_MAX_SEARCH_PAGES
    - VODSEARCH_SEARCH_TIMEOUT_SECONDS
    """

    model_config = SettingsConfigDict(
        env_prefix="VODSEARCH_",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: Optional[str] = None
    environment: Optional[Environment] = None

    http_user_agent: Optional[str] = None
    http_follow_redirects: Optional[bool] = None
    max_concurrent_sources: Optional[int] = None

    max_search_pages: Optional[int] = None
    search_timeout_seconds: Optional[float] = None
    detail_timeout_seconds: Optional[float] = None

    log_level: Optional[LogLevel] = None
    log_format: Optional[LogFormat] = None

    def to_update_dict(self) -> dict[str, Any]:
        """
        Return only values that were actually provided (non-None), for merging.
        """
        return self.model_dump(exclude_none=True)
