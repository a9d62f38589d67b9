from __future__ import annotations

import asyncio
import io
import json
import threading
import time
from typing import Any

import pytest

from runcloud_mcp.server.dispatcher import ToolDispatcher
from runcloud_mcp.server.stdio import serve_stdio
from runcloud_mcp.tools.registry import build_registry


class FakeClient:
    base_url = "https://runcloud.test/api/v2"

    def __init__(self, block_on: str | None = None) -> None:
        self.block_on = block_on
        self.cancelled = False

    async def request(self, method: str, path: str, params=None, json_body=None) -> Any:
        if path == self.block_on:
            try:
                await asyncio.Event().wait()
            except asyncio.CancelledError:
                self.cancelled = True
                raise
        return {"path": path}


def _serve(lines: list[Any], client: FakeClient | None = None) -> list[dict[str, Any]]:
    stdin = io.StringIO(
        "".join((line if isinstance(line, str) else json.dumps(line)) + "\n" for line in lines)
    )
    stdout = io.StringIO()
    dispatcher = ToolDispatcher(build_registry(), client or FakeClient())
    asyncio.run(serve_stdio(dispatcher, stdin=stdin, stdout=stdout))
    return [json.loads(line) for line in stdout.getvalue().splitlines()]


def test_stdio_roundtrip() -> None:
    responses = _serve([
        {"jsonrpc": "2.0", "id": 1, "method": "initialize", "params": {}},
        {"jsonrpc": "2.0", "method": "notifications/initialized"},
        "",
        {"jsonrpc": "2.0", "id": 2, "method": "tools/list"},
        {"jsonrpc": "2.0", "id": 3, "method": "tools/call", "params": {"name": "get_server", "arguments": {"serverId": 5}}},
    ])
    by_id = {response["id"]: response for response in responses}
    assert set(by_id) == {1, 2, 3}
    assert by_id[1]["result"]["serverInfo"]["name"] == "runcloud-mcp-server"
    assert by_id[2]["result"]["tools"]
    text = by_id[3]["result"]["content"][0]["text"]
    assert json.loads(text) == {"path": "/servers/5"}


def test_stdio_parse_error() -> None:
    responses = _serve(["{broken", {"jsonrpc": "2.0", "id": 1, "method": "ping"}])
    assert responses[0] == {"jsonrpc": "2.0", "id": None, "error": {"code": -32700, "message": "Parse error"}}
    assert responses[1]["result"] == {}


def test_stdio_cancellation() -> None:
    client = FakeClient(block_on="/servers/9")
    responses = _serve(
        [
            {"jsonrpc": "2.0", "id": 1, "method": "tools/call", "params": {"name": "get_server", "arguments": {"serverId": 9}}},
            {"jsonrpc": "2.0", "method": "notifications/cancelled", "params": {"requestId": 1}},
            {"jsonrpc": "2.0", "id": 2, "method": "tools/call", "params": {"name": "get_server", "arguments": {"serverId": 2}}},
        ],
        client,
    )
    assert [response["id"] for response in responses] == [2]


def test_stdio_invalid_utf8_line() -> None:
    stdin = io.TextIOWrapper(
        io.BytesIO(b"\xff\xfe garbage\n" + json.dumps({"jsonrpc": "2.0", "id": 1, "method": "ping"}).encode() + b"\n"),
        encoding="utf-8",
    )
    stdout = io.StringIO()
    dispatcher = ToolDispatcher(build_registry(), FakeClient())
    asyncio.run(serve_stdio(dispatcher, stdin=stdin, stdout=stdout))
    responses = [json.loads(line) for line in stdout.getvalue().splitlines()]
    assert responses[0]["error"]["code"] == -32700
    assert responses[1] == {"jsonrpc": "2.0", "id": 1, "result": {}}


class BlockingStdin:
    def __init__(self) -> None:
        self.release = threading.Event()

    def readline(self) -> str:
        self.release.wait()
        return ""


def test_stdio_shutdown_does_not_wait_for_stdin() -> None:
    stdin = BlockingStdin()
    dispatcher = ToolDispatcher(build_registry(), FakeClient())

    async def run() -> None:
        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(serve_stdio(dispatcher, stdin=stdin, stdout=io.StringIO()), timeout=0.2)

    started = time.monotonic()
    try:
        asyncio.run(run())
        assert time.monotonic() - started < 5
    finally:
        stdin.release.set()
