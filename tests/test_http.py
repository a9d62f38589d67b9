from __future__ import annotations

import asyncio
from typing import Any

import httpx

from runcloud_mcp.config import Settings
from runcloud_mcp.errors import RemoteAPIError
from runcloud_mcp.server.app_factory import create_app


class FakeClient:
    base_url = "https://runcloud.test/api/v2"

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, dict[str, Any] | None]] = []

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> Any:
        self.calls.append((method, path, json_body))
        if method == "POST" and path.endswith("/databases"):
            raise RemoteAPIError(422, "Name already taken", {"message": "Name already taken"})
        return {"id": 123, "name": "prod"}


def _run(check) -> FakeClient:
    client = FakeClient()

    async def run() -> None:
        app = create_app(Settings(), client=client)
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
            await check(http)

    asyncio.run(run())
    return client


def test_http_routes() -> None:
    async def check(http: httpx.AsyncClient) -> None:
        root = await http.get("/")
        assert root.json() == {"status": "ok", "service": "runcloud-mcp-server"}
        health = await http.get("/health")
        assert health.status_code == 200
        tools = await http.get("/mcp/tools")
        assert tools.status_code == 200
        names = [tool["name"] for tool in tools.json()["tools"]]
        assert "get_server" in names
        assert "create_database" in names

    _run(check)


def test_call_tool_success() -> None:
    async def check(http: httpx.AsyncClient) -> None:
        response = await http.post("/mcp/tools/get_server", json={"params": {"serverId": 123}})
        assert response.status_code == 200
        assert response.json() == {"success": True, "data": {"id": 123, "name": "prod"}, "error": None}

    client = _run(check)
    assert client.calls == [("GET", "/servers/123", None)]


def test_call_tool_errors() -> None:
    async def check(http: httpx.AsyncClient) -> None:
        missing = await http.post("/mcp/tools/no_such_tool", json={"params": {}})
        assert missing.status_code == 404

        invalid = await http.post("/mcp/tools/get_server", json={"params": {}})
        body = invalid.json()
        assert body["success"] is False
        assert body["error"]["code"] == "invalid_arguments"
        assert body["error"]["detail"] == {"field": "serverId", "reason": "missing"}

        remote = await http.post("/mcp/tools/create_database", json={"params": {"serverId": 5, "name": "app_db"}})
        body = remote.json()
        assert body["error"]["code"] == "remote_api_error"
        assert "Name already taken" in body["error"]["message"]

    _run(check)


def test_jsonrpc_endpoint() -> None:
    async def check(http: httpx.AsyncClient) -> None:
        response = await http.post(
            "/mcp",
            json={"jsonrpc": "2.0", "id": 1, "method": "tools/call", "params": {"name": "get_server", "arguments": {"serverId": 1}}},
        )
        result = response.json()["result"]
        assert result["content"][0]["type"] == "text"

        notification = await http.post("/mcp", json={"jsonrpc": "2.0", "method": "notifications/initialized"})
        assert notification.status_code == 202

        broken = await http.post("/mcp", content=b"{not json", headers={"Content-Type": "application/json"})
        assert broken.json()["error"]["code"] == -32700

    _run(check)
