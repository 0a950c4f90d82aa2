from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

_ENV_PREFIX = "GO_SOURCE_"


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(_ENV_PREFIX + name, default)


def _env_int(name: str, default: int) -> int:
    raw = _env_str(name).strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{_ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    data_dir: Path = Path("./data")
    host: str = "127.0.0.1"
    port: int = 8090
    go_binary: str = "go"
    goroot: Path | None = None
    default_revision: str = "latest"
    log_level: str = "INFO"

    @staticmethod
    def load() -> Settings:
        goroot = _env_str("GOROOT").strip()
        return Settings(
            data_dir=Path(_env_str("DATA_DIR", "./data")),
            host=_env_str("HOST", "127.0.0.1").strip(),
            port=_env_int("PORT", 8090),
            go_binary=_env_str("GO_BINARY", "go").strip(),
            goroot=Path(goroot) if goroot else None,
            default_revision=_env_str("DEFAULT_REVISION", "latest").strip() or "latest",
            log_level=_env_str("LOG_LEVEL", "INFO").strip().upper(),
        )

    @property
    def module_cache_dir(self) -> Path:
        return self.data_dir.resolve() / "go-mod-cache"

    @property
    def build_cache_dir(self) -> Path:
        return self.data_dir.resolve() / "go-cache"

    def go_env(self) -> dict[str, str]:
        """Environment overrides that keep the go tool's caches under ``data_dir``."""
        return {
            "GOPATH": str(self.module_cache_dir),
            "GOCACHE": str(self.build_cache_dir),
            "GOMODCACHE": str(self.module_cache_dir),
        }
