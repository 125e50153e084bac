from __future__ import annotations

import argparse
import asyncio
import json
import os
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog
import uvicorn

from vodsearch.application.use_cases import AggregateSearchUseCase, SourceDetailUseCase
from vodsearch.domain.entities import SearchResult, VodSearchError
from vodsearch.infrastructure.config import AppConfig, load_config
from vodsearch.infrastructure.downstream import VideoApiClient
from vodsearch.infrastructure.http import HttpxFetcher
from vodsearch.infrastructure.logging.setup import configure_logging
from vodsearch.interfaces.composition import build_http_client
from vodsearch.interfaces.main import build_app

log = structlog.get_logger(__name__)


def _parse_args(argv: Iterable[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="vodsearch")

    # Config wiring flags (no business logic)
    parser.add_argument("--config", default=None, help="Path to YAML config file.")
    parser.add_argument("--dotenv", default=None, help="Path to .env file.")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override log level.",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "console"],
        help="Override log format.",
    )
    parser.add_argument(
        "--max-pages",
        default=None,
        type=int,
        help="Override the per-source search page cap.",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API.")
    serve.add_argument("--host", default=None, help="Bind host (overrides HOST env).")
    serve.add_argument(
        "--port", default=None, type=int, help="Bind port (overrides PORT env)."
    )

    search = sub.add_parser("search", help="Search all (or selected) sources.")
    search.add_argument("query")
    search.add_argument(
        "--source",
        action="append",
        default=None,
        help="Restrict to a source key (repeatable).",
    )

    detail = sub.add_parser("detail", help="Resolve one title of one source.")
    detail.add_argument("source")
    detail.add_argument("id")

    return parser.parse_args(argv)


def _dump(payload: Any) -> None:
    json.dump(payload, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")


async def _run_search(
    config: AppConfig, query: str, source_keys: list[str] | None
) -> list[SearchResult]:
    async with build_http_client(config) as client:
        uc = AggregateSearchUseCase(
            video_api=VideoApiClient(HttpxFetcher(client), config.api),
            sources=config.descriptors(),
            max_concurrent=config.max_concurrent_sources,
        )
        return await uc.execute(query, source_keys=source_keys)


async def _run_detail(config: AppConfig, source_key: str, item_id: str) -> SearchResult:
    async with build_http_client(config) as client:
        uc = SourceDetailUseCase(
            video_api=VideoApiClient(HttpxFetcher(client), config.api),
            sources=config.descriptors(),
        )
        return await uc.execute(source_key, item_id)


def start(argv: Iterable[str] | None = None) -> int:
    """
    Process entrypoint.

    Config is loaded exactly once here and handed to whatever the command builds.
    """
    if argv is None:
        argv = sys.argv[1:]

    args = _parse_args(argv)

    cli_overrides: dict[str, Any] = {}
    if args.log_level:
        cli_overrides["log_level"] = args.log_level
    if args.log_format:
        cli_overrides["log_format"] = args.log_format
    if args.max_pages is not None:
        cli_overrides["max_search_pages"] = args.max_pages

    config = load_config(
        config_path=Path(args.config) if args.config else None,
        dotenv_path=Path(args.dotenv) if args.dotenv else None,
        cli_overrides=cli_overrides,
    )
    log_config = configure_logging(config)

    if args.command == "serve":
        host = args.host or os.getenv("HOST", "0.0.0.0")
        port = int(args.port or os.getenv("PORT", "7980"))
        uvicorn.run(build_app(config), host=host, port=port, log_config=log_config)
        return 0

    if args.command == "search":
        results = asyncio.run(_run_search(config, args.query, args.source))
        _dump([r.to_dict() for r in results])
        return 0

    try:
        result = asyncio.run(_run_detail(config, args.source, args.id))
    except VodSearchError as exc:
        log.error(
            "detail_failed",
            source=args.source,
            id=args.id,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return 1
    _dump(result.to_dict())
    return 0


if __name__ == "__main__":
    raise SystemExit(start())
