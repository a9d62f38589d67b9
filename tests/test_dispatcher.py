from __future__ import annotations

import asyncio
import logging
from typing import Any

import pytest

from runcloud_mcp.errors import ErrorKind, RemoteAPIError, TransportError
from runcloud_mcp.server.dispatcher import InvocationResult, ToolDispatcher, render_payload
from runcloud_mcp.tools import ALL_TOOLS
from runcloud_mcp.tools.registry import build_registry


class FakeClient:
    base_url = "https://runcloud.test/api/v2"

    def __init__(self, response: Any = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[tuple[str, str, dict[str, Any] | None, dict[str, Any] | None]] = []

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> Any:
        self.calls.append((method, path, params, json_body))
        if self.error is not None:
            raise self.error
        return self.response


def _dispatcher(client: FakeClient) -> ToolDispatcher:
    return ToolDispatcher(build_registry(), client)


def test_get_server_success() -> None:
    async def run() -> InvocationResult:
        client = FakeClient(response={"id": 123, "name": "prod"})
        result = await _dispatcher(client).invoke("get_server", {"serverId": 123})
        assert client.calls == [("GET", "/servers/123", {}, None)]
        return result

    result = asyncio.run(run())
    assert result.success
    assert result.payload == {"id": 123, "name": "prod"}
    assert render_payload(result.payload) == '{\n  "id": 123,\n  "name": "prod"\n}'


def test_create_database_sends_default_collation() -> None:
    async def run() -> None:
        client = FakeClient(response={"id": 9})
        await _dispatcher(client).call_tool("create_database", {"serverId": 5, "name": "app_db"})
        assert client.calls == [
            ("POST", "/servers/5/databases", {}, {"name": "app_db", "collation": "utf8mb4_general_ci"}),
        ]

    asyncio.run(run())


def test_missing_argument_makes_no_request() -> None:
    async def run() -> None:
        client = FakeClient(response={})
        result = await _dispatcher(client).invoke("get_server", {})
        assert not result.success
        assert result.error_kind is ErrorKind.INVALID_ARGUMENTS
        assert result.details == {"field": "serverId", "reason": "missing"}
        assert client.calls == []

    asyncio.run(run())


_SAMPLES = {"string": "x", "number": 1, "boolean": True}


def _required_cases() -> list[tuple[str, str, dict[str, Any]]]:
    cases = []
    for tool in ALL_TOOLS:
        schema = tool.input_schema
        full = {}
        for name in schema.get("required", []):
            prop = schema["properties"][name]
            full[name] = prop["enum"][0] if prop.get("enum") else _SAMPLES[prop["type"]]
        for name in full:
            cases.append((tool.name, name, {key: value for key, value in full.items() if key != name}))
    return cases


@pytest.mark.parametrize("tool_name,dropped,arguments", _required_cases())
def test_missing_required_field_never_calls_remote(
    tool_name: str,
    dropped: str,
    arguments: dict[str, Any],
) -> None:
    async def run() -> InvocationResult:
        client = FakeClient(response={})
        result = await _dispatcher(client).invoke(tool_name, arguments)
        assert client.calls == []
        return result

    result = asyncio.run(run())
    assert result.error_kind is ErrorKind.INVALID_ARGUMENTS
    assert result.details == {"field": dropped, "reason": "missing"}


def test_unknown_tool() -> None:
    async def run() -> None:
        client = FakeClient(response={})
        result = await _dispatcher(client).invoke("nonexistent_tool", {})
        assert result.error_kind is ErrorKind.UNKNOWN_TOOL
        assert result.message == "Unknown tool: nonexistent_tool"
        assert client.calls == []

    asyncio.run(run())


def test_remote_error_message_is_surfaced() -> None:
    async def run() -> None:
        error = RemoteAPIError(422, "Name already taken", {"message": "Name already taken"})
        client = FakeClient(error=error)
        result = await _dispatcher(client).invoke("create_database", {"serverId": 5, "name": "app_db"})
        assert not result.success
        assert result.error_kind is ErrorKind.REMOTE_API_ERROR
        assert "Name already taken" in result.message
        assert result.message.startswith("RunCloud API Error: ")
        assert result.details["status_code"] == 422

    asyncio.run(run())


def test_transport_error_is_surfaced() -> None:
    async def run() -> None:
        client = FakeClient(error=TransportError("ConnectError: connection refused"))
        result = await _dispatcher(client).invoke("list_servers", {})
        assert result.error_kind is ErrorKind.TRANSPORT_ERROR
        assert result.message == "ConnectError: connection refused"

    asyncio.run(run())


def test_failure_is_logged_with_stage(caplog) -> None:
    async def run() -> None:
        await _dispatcher(FakeClient(response={})).invoke("get_server", {"serverId": "x"})

    with caplog.at_level(logging.WARNING, logger="runcloud_mcp.server.dispatcher"):
        asyncio.run(run())
    records = [record for record in caplog.records if record.name == "runcloud_mcp.server.dispatcher"]
    assert records
    assert records[-1].stage == "validating"
    assert records[-1].kind == "invalid_arguments"


def test_concurrent_invocations_are_independent() -> None:
    async def run() -> list[InvocationResult]:
        client = FakeClient(response={"ok": True})
        dispatcher = _dispatcher(client)
        return await asyncio.gather(
            dispatcher.invoke("get_server", {"serverId": 1}),
            dispatcher.invoke("get_server", {}),
            dispatcher.invoke("list_webapps", {"serverId": 2, "page": 3}),
        )

    ok, invalid, listed = asyncio.run(run())
    assert ok.success
    assert invalid.error_kind is ErrorKind.INVALID_ARGUMENTS
    assert listed.success
