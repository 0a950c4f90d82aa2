"""Tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from go_source_server.settings import Settings


class TestSettingsLoad:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("DATA_DIR", "HOST", "PORT", "GO_BINARY", "GOROOT", "DEFAULT_REVISION", "LOG_LEVEL"):
            monkeypatch.delenv(f"GO_SOURCE_{name}", raising=False)
        settings = Settings.load()
        assert settings == Settings()
        assert settings.port == 8090
        assert settings.default_revision == "latest"
        assert settings.goroot is None

    def test_overrides(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("GO_SOURCE_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("GO_SOURCE_PORT", "9000")
        monkeypatch.setenv("GO_SOURCE_GOROOT", "/usr/local/go")
        monkeypatch.setenv("GO_SOURCE_LOG_LEVEL", "debug")
        settings = Settings.load()
        assert settings.data_dir == tmp_path
        assert settings.port == 9000
        assert settings.goroot == Path("/usr/local/go")
        assert settings.log_level == "DEBUG"

    def test_invalid_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GO_SOURCE_PORT", "eighty")
        with pytest.raises(ValueError, match="GO_SOURCE_PORT"):
            Settings.load()


class TestGoEnv:
    def test_caches_are_absolute(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        env = Settings(data_dir=Path("data")).go_env()
        assert env == {
            "GOPATH": str(tmp_path.resolve() / "data" / "go-mod-cache"),
            "GOCACHE": str(tmp_path.resolve() / "data" / "go-cache"),
            "GOMODCACHE": str(tmp_path.resolve() / "data" / "go-mod-cache"),
        }
