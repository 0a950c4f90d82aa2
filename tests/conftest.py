"""Shared fixtures and helpers for tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from go_source_server.core.errors import MaterializationError
from go_source_server.core.location import ModuleSnapshot

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Fake toolchain adapters
# ---------------------------------------------------------------------------


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Create *files* (relative path -> content) below *root*."""
    for rel, content in files.items():
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    return root


class FakeMaterializer:
    """Serves pre-built module trees keyed by repository."""

    def __init__(self, modules: dict[str, Path] | None = None, resolved_revision: str = "v1.0.0") -> None:
        self.modules = modules or {}
        self.resolved_revision = resolved_revision
        self.calls: list[tuple[str, str]] = []

    async def materialize(self, repository: str, revision: str) -> ModuleSnapshot:
        self.calls.append((repository, revision))
        if repository not in self.modules:
            raise MaterializationError(repository, revision, "unknown module")
        return ModuleSnapshot(
            directory=self.modules[repository],
            repository=repository,
            revision=self.resolved_revision,
        )


class FakeStdlibRoot:
    def __init__(self, directory: Path) -> None:
        self.directory = directory
        self.calls = 0

    async def root(self) -> Path:
        self.calls += 1
        return self.directory


@pytest.fixture
def stdlib_dir(tmp_path: Path) -> Path:
    return write_tree(
        tmp_path / "goroot" / "src",
        {
            "runtime/proc.go": "package runtime // proc\n",
            "compress/gzip/gzip.go": "package gzip\n",
        },
    )


@pytest.fixture
def module_dir(tmp_path: Path) -> Path:
    return write_tree(
        tmp_path / "mod" / "github.com" / "felixge" / "httpsnoop@v1.0.3",
        {
            "capture_metrics.go": "package httpsnoop // capture\n",
            "wrap_generated.go": "package httpsnoop // wrap\n",
        },
    )


@pytest.fixture
def materializer(module_dir: Path) -> FakeMaterializer:
    return FakeMaterializer({"github.com/felixge/httpsnoop": module_dir}, resolved_revision="v1.0.3")


@pytest.fixture
def stdlib(stdlib_dir: Path) -> FakeStdlibRoot:
    return FakeStdlibRoot(stdlib_dir)


@pytest.fixture
def make_tree() -> Callable[[Path, dict[str, str]], Path]:
    return write_tree
