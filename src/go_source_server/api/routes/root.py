from __future__ import annotations

from typing import Any

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root discovery endpoint listing the API's links."""
    return {
        "meta": {
            "title": "Go Source Server",
            "description": "Serve Go source files for symbols and paths recorded by profilers.",
            "version": "0.1.0",
        },
        "links": {
            "self": "/",
            "source": "/source/go",
            "resolve": "/resolve/go",
            "health": "/healthz/ready",
            "openapi": "/openapi.json",
            "docs": "/docs",
        },
    }
