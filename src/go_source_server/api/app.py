from __future__ import annotations

from fastapi import FastAPI

from go_source_server.api.lifespan import lifespan
from go_source_server.api.middleware import RequestLogMiddleware
from go_source_server.api.routes.health import router as health_router
from go_source_server.api.routes.resolve import router as resolve_router
from go_source_server.api.routes.root import router as root_router
from go_source_server.api.routes.source import router as source_router
from go_source_server.core.ports.toolchain import ModuleMaterializer, StandardLibraryRoot
from go_source_server.golang import GoModuleMaterializer, GoRootProvider
from go_source_server.settings import Settings


def create_app(
    settings: Settings | None = None,
    materializer: ModuleMaterializer | None = None,
    stdlib: StandardLibraryRoot | None = None,
) -> FastAPI:
    settings = settings or Settings.load()

    app = FastAPI(
        title="Go Source Server",
        description="Serve Go source files for symbols and paths recorded by profilers.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.materializer = materializer or GoModuleMaterializer(settings)
    app.state.stdlib = stdlib or GoRootProvider(settings)

    app.add_middleware(RequestLogMiddleware)

    app.include_router(root_router, include_in_schema=False)
    app.include_router(health_router, include_in_schema=False)
    app.include_router(source_router)
    app.include_router(resolve_router)

    return app
