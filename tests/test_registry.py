from __future__ import annotations

import asyncio
from typing import Any

import pytest

from runcloud_mcp.errors import DuplicateToolError, ErrorKind, UnknownToolError
from runcloud_mcp.server.dispatcher import ToolDispatcher
from runcloud_mcp.tools import ALL_TOOLS
from runcloud_mcp.tools.base import EndpointTool
from runcloud_mcp.tools.registry import ToolRegistry, build_registry


_SAMPLES = {"string": "x", "number": 1, "boolean": True}


class FakeClient:
    base_url = "https://runcloud.test/api/v2"

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        self.calls.append((method, path))
        return {"ok": True}


def _minimal_arguments(schema: dict[str, Any]) -> dict[str, Any]:
    arguments: dict[str, Any] = {}
    for name in schema.get("required", []):
        prop = schema["properties"][name]
        arguments[name] = prop["enum"][0] if prop.get("enum") else _SAMPLES[prop["type"]]
    return arguments


def test_register_rejects_duplicate_names() -> None:
    registry = ToolRegistry()
    tool = EndpointTool(name="ping", description="Ping", method="GET", path="/ping")
    registry.register(tool)
    with pytest.raises(DuplicateToolError):
        registry.register(EndpointTool(name="ping", description="Other", method="GET", path="/other"))


def test_frozen_registry_rejects_register() -> None:
    registry = build_registry(tools=())
    with pytest.raises(RuntimeError):
        registry.register(EndpointTool(name="ping", description="Ping", method="GET", path="/ping"))


def test_catalog_names_are_unique() -> None:
    names = [tool.name for tool in ALL_TOOLS]
    assert len(names) == len(set(names))
    assert len(build_registry()) == len(ALL_TOOLS)


def test_list_tools_keeps_registration_order() -> None:
    registry = build_registry()
    listed = registry.list_tools()
    assert [item["name"] for item in listed] == [tool.name for tool in ALL_TOOLS]
    assert listed[0]["name"] == "health_check"
    for item in listed:
        assert set(item) == {"name", "description", "inputSchema"}
        assert item["inputSchema"]["type"] == "object"


def test_resolve_unknown_tool() -> None:
    registry = build_registry()
    with pytest.raises(UnknownToolError) as exc_info:
        registry.resolve("nonexistent_tool")
    assert exc_info.value.kind is ErrorKind.UNKNOWN_TOOL


def test_enabled_allow_list_filters_catalog() -> None:
    registry = build_registry(enabled=["get_server", "list_servers", "not_a_tool"])
    assert registry.names() == ["list_servers", "get_server"]
    assert "create_database" not in registry


def test_every_listed_tool_dispatches() -> None:
    async def run() -> None:
        client = FakeClient()
        dispatcher = ToolDispatcher(build_registry(), client)
        for item in dispatcher.list_tools():
            result = await dispatcher.invoke(item["name"], _minimal_arguments(item["inputSchema"]))
            assert result.success, (item["name"], result.message)
        assert len(client.calls) == len(ALL_TOOLS)
        for _, path in client.calls:
            assert "{" not in path

    asyncio.run(run())


def test_listing_is_a_copy() -> None:
    async def run() -> None:
        client = FakeClient()
        dispatcher = ToolDispatcher(build_registry(), client)
        listed = {item["name"]: item for item in dispatcher.list_tools()}
        listed["get_server"]["inputSchema"]["required"].clear()
        listed["get_server"]["inputSchema"]["properties"].clear()

        result = await dispatcher.invoke("get_server", {})
        assert result.error_kind is ErrorKind.INVALID_ARGUMENTS
        assert client.calls == []
        fresh = {item["name"]: item for item in dispatcher.list_tools()}
        assert fresh["get_server"]["inputSchema"]["required"] == ["serverId"]

    asyncio.run(run())
