"""
HTTP API for MCP tools.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request, Response

from runcloud_mcp.errors import ErrorKind
from runcloud_mcp.server.dispatcher import ToolDispatcher
from runcloud_mcp.server.jsonrpc import PARSE_ERROR, SERVER_NAME, handle_message, make_error
from runcloud_mcp.server.schema import ToolError, ToolRequest, ToolResponse


router = APIRouter()


def _dispatcher(request: Request) -> ToolDispatcher:
    return request.app.state.dispatcher


@router.get("/")
async def root() -> dict[str, str]:
    return {"status": "ok", "service": SERVER_NAME}


@router.get("/favicon.ico")
async def favicon() -> Response:
    return Response(status_code=204)


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/mcp/tools")
async def list_tools(request: Request) -> dict[str, Any]:
    return {"tools": _dispatcher(request).list_tools()}


@router.post("/mcp/tools/{tool_name}", response_model=ToolResponse)
async def call_tool(tool_name: str, payload: ToolRequest, request: Request) -> ToolResponse:
    dispatcher = _dispatcher(request)
    if tool_name not in dispatcher.registry:
        raise HTTPException(status_code=404, detail="Tool not found")

    result = await dispatcher.invoke(tool_name, payload.params)
    if result.success:
        return ToolResponse(success=True, data=result.payload)
    kind = result.error_kind or ErrorKind.INTERNAL_ERROR
    return ToolResponse(
        success=False,
        error=ToolError(code=kind.value, message=result.message, detail=result.details or None),
    )


@router.post("/mcp")
async def rpc(request: Request) -> Any:
    try:
        message = await request.json()
    except ValueError:
        return make_error(None, PARSE_ERROR, "Parse error")
    response = await handle_message(_dispatcher(request), message)
    if response is None:
        return Response(status_code=202)
    return response
