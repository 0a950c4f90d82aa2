from __future__ import annotations

from fastapi import Request

from go_source_server.core.ports.toolchain import ModuleMaterializer, StandardLibraryRoot
from go_source_server.settings import Settings


def get_settings(request: Request) -> Settings:
    settings: Settings = request.app.state.settings
    return settings


def get_materializer(request: Request) -> ModuleMaterializer:
    materializer: ModuleMaterializer = request.app.state.materializer
    return materializer


def get_stdlib_root(request: Request) -> StandardLibraryRoot:
    stdlib: StandardLibraryRoot = request.app.state.stdlib
    return stdlib
