"""Tests for the vodsearch command line."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import structlog
import yaml

from vodsearch.domain.entities import RequestFailed, SearchResult, SourceNotFound
from vodsearch.interfaces.cli import cli

CLI = "vodsearch.interfaces.cli.cli"


@pytest.fixture()
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(
        yaml.dump(
            {
                "sources": [
                    {"key": "demo", "name": "Demo TV", "api": "https://api.demo.test"}
                ]
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def _no_logging_setup():
    """Skip dictConfig; structlog writes to stderr so stdout holds only JSON."""
    structlog.configure(logger_factory=structlog.PrintLoggerFactory(file=sys.stderr))
    try:
        with patch(f"{CLI}.configure_logging", return_value={}) as mock:
            yield mock
    finally:
        structlog.reset_defaults()


class TestSearchCommand:
    def test_prints_results_as_json(
        self,
        config_file: Path,
        search_result: SearchResult,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        with patch(
            f"{CLI}._run_search", AsyncMock(return_value=[search_result])
        ) as run:
            code = cli.start(["--config", str(config_file), "search", "iron man"])

        assert code == 0
        config, query, source_keys = run.await_args.args
        assert query == "iron man"
        assert source_keys is None
        assert [s.key for s in config.sources] == ["demo"]
        assert json.loads(capsys.readouterr().out) == [search_result.to_dict()]

    def test_source_flag_is_repeatable(self, config_file: Path) -> None:
        with patch(f"{CLI}._run_search", AsyncMock(return_value=[])) as run:
            cli.start(
                [
                    "--config",
                    str(config_file),
                    "search",
                    "iron",
                    "--source",
                    "a",
                    "--source",
                    "b",
                ]
            )

        assert run.await_args.args[2] == ["a", "b"]

    def test_global_overrides_reach_config(self, config_file: Path) -> None:
        with patch(f"{CLI}._run_search", AsyncMock(return_value=[])) as run:
            cli.start(
                [
                    "--config",
                    str(config_file),
                    "--max-pages",
                    "2",
                    "--log-level",
                    "DEBUG",
                    "search",
                    "iron",
                ]
            )

        config = run.await_args.args[0]
        assert config.api.max_search_pages == 2
        assert config.log_level == "DEBUG"


class TestDetailCommand:
    def test_prints_detail_as_json(
        self,
        config_file: Path,
        search_result: SearchResult,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        with patch(
            f"{CLI}._run_detail", AsyncMock(return_value=search_result)
        ) as run:
            code = cli.start(["--config", str(config_file), "detail", "demo", "101"])

        assert code == 0
        assert run.await_args.args[1:] == ("demo", "101")
        assert json.loads(capsys.readouterr().out)["id"] == "101"

    @pytest.mark.parametrize(
        "exc",
        [
            SourceNotFound("Unknown source: 'nope'"),
            RequestFailed("Detail request failed: 500", status_code=500),
        ],
    )
    def test_lookup_failure_exits_non_zero(
        self,
        exc: Exception,
        config_file: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        with patch(f"{CLI}._run_detail", AsyncMock(side_effect=exc)):
            code = cli.start(["--config", str(config_file), "detail", "nope", "1"])

        assert code == 1
        assert capsys.readouterr().out == ""


class TestServeCommand:
    def test_runs_uvicorn_with_logging_config(
        self, config_file: Path, _no_logging_setup: MagicMock
    ) -> None:
        _no_logging_setup.return_value = {"version": 1}
        with (
            patch(f"{CLI}.uvicorn.run") as run,
            patch(f"{CLI}.build_app", return_value="app") as build,
        ):
            code = cli.start(
                ["--config", str(config_file), "serve", "--host", "127.0.0.1", "--port", "9000"]
            )

        assert code == 0
        build.assert_called_once()
        run.assert_called_once_with(
            "app", host="127.0.0.1", port=9000, log_config={"version": 1}
        )


def test_command_is_required() -> None:
    with pytest.raises(SystemExit):
        cli.start([])
