"""
描述: MCP JSON-RPC 2.0 消息处理
主要功能:
    - 处理 initialize / ping / tools/list / tools/call
    - 将工具调用错误类别映射为 JSON-RPC 错误码
    - 与具体传输 (stdio / HTTP) 无关
"""

from __future__ import annotations

import logging
from typing import Any

from runcloud_mcp import __version__
from runcloud_mcp.errors import ErrorKind, ToolInvocationError
from runcloud_mcp.server.dispatcher import ToolDispatcher, render_payload


logger = logging.getLogger(__name__)

SERVER_NAME = "runcloud-mcp-server"
PROTOCOL_VERSION = "2024-11-05"

# region 错误码
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

_KIND_CODES = {
    ErrorKind.UNKNOWN_TOOL: METHOD_NOT_FOUND,
    ErrorKind.INVALID_ARGUMENTS: INVALID_PARAMS,
}
# endregion


def error_code_for(kind: ErrorKind) -> int:
    return _KIND_CODES.get(kind, INTERNAL_ERROR)


def make_result(request_id: Any, result: Any) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "result": result}


def make_error(request_id: Any, code: int, message: str, data: Any = None) -> dict[str, Any]:
    error: dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": "2.0", "id": request_id, "error": error}


def initialize_result(requested_version: str | None = None) -> dict[str, Any]:
    return {
        "protocolVersion": requested_version or PROTOCOL_VERSION,
        "capabilities": {"tools": {}},
        "serverInfo": {"name": SERVER_NAME, "version": __version__},
    }


def is_notification(message: Any) -> bool:
    return isinstance(message, dict) and "id" not in message


async def handle_message(dispatcher: ToolDispatcher, message: Any) -> dict[str, Any] | None:
    """
    处理单条 JSON-RPC 消息

    参数:
        dispatcher: 工具分发器
        message: 已解码的 JSON 消息

    返回:
        响应对象; 通知消息返回 None
    """
    if not isinstance(message, dict) or not isinstance(message.get("method"), str):
        request_id = message.get("id") if isinstance(message, dict) else None
        return make_error(request_id, INVALID_REQUEST, "Invalid Request")

    method = message["method"]
    params = message.get("params") or {}
    notification = is_notification(message)
    request_id = message.get("id")

    if notification:
        logger.debug("Notification received", extra={"rpc_method": method})
        return None

    if not isinstance(params, dict):
        return make_error(request_id, INVALID_PARAMS, "params must be an object")

    if method == "initialize":
        return make_result(request_id, initialize_result(params.get("protocolVersion")))
    if method == "ping":
        return make_result(request_id, {})
    if method == "tools/list":
        return make_result(request_id, {"tools": dispatcher.list_tools()})
    if method == "tools/call":
        return await _handle_tools_call(dispatcher, request_id, params)
    return make_error(request_id, METHOD_NOT_FOUND, f"Method not found: {method}")


async def _handle_tools_call(
    dispatcher: ToolDispatcher,
    request_id: Any,
    params: dict[str, Any],
) -> dict[str, Any]:
    name = params.get("name")
    if not isinstance(name, str) or not name:
        return make_error(request_id, INVALID_PARAMS, "tools/call requires a tool name")

    try:
        payload = await dispatcher.call_tool(name, params.get("arguments"))
    except ToolInvocationError as exc:
        return make_error(
            request_id,
            error_code_for(exc.kind),
            exc.message,
            {"kind": exc.kind.value, "details": exc.details},
        )
    except Exception as exc:
        logger.exception("Unexpected error while calling %s", name)
        return make_error(
            request_id,
            INTERNAL_ERROR,
            str(exc) or exc.__class__.__name__,
            {"kind": ErrorKind.INTERNAL_ERROR.value, "details": {}},
        )
    return make_result(
        request_id,
        {"content": [{"type": "text", "text": render_payload(payload)}]},
    )
