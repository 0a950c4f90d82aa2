"""Tests for the command line interface."""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from go_source_server.cli.app import app

runner = CliRunner()


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["resolve"],
        ["fetch"],
        ["serve"],
        ["serve", "api"],
    ],
    ids=["root", "resolve", "fetch", "serve", "serve-api"],
)
def test_short_help_flag(args: list[str]) -> None:
    result = runner.invoke(app, [*args, "-h"])
    assert result.exit_code == 0
    assert "Usage" in result.output


class TestResolveCommand:
    def test_prints_location(self) -> None:
        result = runner.invoke(
            app,
            [
                "resolve",
                "github.com/felixge/httpsnoop.(*Metrics).CaptureMetrics",
                "/home/runner/go/pkg/mod/github.com/felixge/httpsnoop@v1.0.3/capture_metrics.go",
            ],
        )
        assert result.exit_code == 0
        assert "github.com/felixge/httpsnoop" in result.output
        assert "v1.0.3" in result.output
        assert "capture_metrics.go" in result.output

    def test_standard_library(self) -> None:
        result = runner.invoke(app, ["resolve", "runtime.gopark", "/go/src/runtime/proc.go"])
        assert result.exit_code == 0
        assert "standard library" in result.output

    def test_ambiguous_exits_non_zero(self) -> None:
        result = runner.invoke(app, ["resolve", "", "some/bare/relative/path.go"])
        assert result.exit_code == 1


class TestFetchCommand:
    def test_prints_file(self, materializer: Any, stdlib: Any, tmp_path: Path) -> None:
        with patch("go_source_server.cli.lookup._get_toolchain", return_value=(materializer, stdlib)):
            result = runner.invoke(
                app,
                ["fetch", "github.com/felixge/httpsnoop@v1.0.3/capture_metrics.go", "--data-dir", str(tmp_path)],
            )
        assert result.exit_code == 0
        assert result.stdout == "package httpsnoop // capture\n"

    def test_passes_revision_and_repository(self, materializer: Any, stdlib: Any) -> None:
        with patch("go_source_server.cli.lookup._get_toolchain", return_value=(materializer, stdlib)):
            result = runner.invoke(
                app,
                [
                    "fetch",
                    "capture_metrics.go",
                    "--repository",
                    "github.com/felixge/httpsnoop",
                    "--revision",
                    "v1.0.3",
                ],
            )
        assert result.exit_code == 0
        assert materializer.calls == [("github.com/felixge/httpsnoop", "v1.0.3")]

    def test_failure_exits_non_zero(self, materializer: Any, stdlib: Any) -> None:
        with patch("go_source_server.cli.lookup._get_toolchain", return_value=(materializer, stdlib)):
            result = runner.invoke(app, ["fetch", "github.com/unknown/module@v1.0.0/x.go"])
        assert result.exit_code == 1


class TestServeApiCommand:
    def test_explicit_port_zero_is_kept(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GO_SOURCE_PORT", "9000")
        with (
            patch("go_source_server.cli.serve.configure_logging"),
            patch("uvicorn.run") as run,
        ):
            result = runner.invoke(
                app, ["serve", "api", "--host", "0.0.0.0", "--port", "0", "--data-dir", str(tmp_path)]
            )
        assert result.exit_code == 0
        assert run.call_args.kwargs["host"] == "0.0.0.0"
        assert run.call_args.kwargs["port"] == 0

    def test_defaults_come_from_environment(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GO_SOURCE_PORT", "9000")
        with (
            patch("go_source_server.cli.serve.configure_logging"),
            patch("uvicorn.run") as run,
        ):
            result = runner.invoke(app, ["serve", "api", "--data-dir", str(tmp_path)])
        assert result.exit_code == 0
        assert run.call_args.kwargs["port"] == 9000
