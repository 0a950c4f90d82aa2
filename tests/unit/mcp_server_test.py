"""Tests for the MCP server tool definitions."""

from __future__ import annotations

from typing import Any

import pytest

from go_source_server.mcp.server import create_mcp_server


class TestMcpServerCreation:
    def test_creates_server(self, materializer: Any, stdlib: Any) -> None:
        server = create_mcp_server(materializer, stdlib)
        assert server is not None
        assert server.name == "go-source-server"

    def test_server_has_tools(self, materializer: Any, stdlib: Any) -> None:
        server = create_mcp_server(materializer, stdlib)
        tool_names = {t.name for t in server._tool_manager._tools.values()}
        assert tool_names == {"resolve_location", "read_source"}


class TestMcpTools:
    @pytest.mark.asyncio
    async def test_resolve_location(self, materializer: Any, stdlib: Any) -> None:
        server = create_mcp_server(materializer, stdlib)
        fn = server._tool_manager._tools["resolve_location"].fn  # type: ignore[attr-defined]
        result = await fn(path="sigs.k8s.io/controller-runtime@v0.13.1/pkg/internal/controller/controller.go")
        assert result == {
            "repository": "sigs.k8s.io/controller-runtime",
            "revision": "v0.13.1",
            "relative_path": "pkg/internal/controller/controller.go",
        }

    @pytest.mark.asyncio
    async def test_resolve_location_reports_errors(self, materializer: Any, stdlib: Any) -> None:
        server = create_mcp_server(materializer, stdlib)
        fn = server._tool_manager._tools["resolve_location"].fn  # type: ignore[attr-defined]
        result = await fn(path="a/b.go")
        assert "error" in result

    @pytest.mark.asyncio
    async def test_read_source(self, materializer: Any, stdlib: Any) -> None:
        server = create_mcp_server(materializer, stdlib)
        fn = server._tool_manager._tools["read_source"].fn  # type: ignore[attr-defined]
        text = await fn(path="/usr/lib/go/src/compress/gzip/gzip.go", function="compress/gzip.(*Writer).Reset")
        assert text == "package gzip\n"

    @pytest.mark.asyncio
    async def test_read_source_reports_errors(self, materializer: Any, stdlib: Any) -> None:
        server = create_mcp_server(materializer, stdlib)
        fn = server._tool_manager._tools["read_source"].fn  # type: ignore[attr-defined]
        text = await fn(path="github.com/unknown/module@v1.0.0/x.go")
        assert text.startswith("Error:")
