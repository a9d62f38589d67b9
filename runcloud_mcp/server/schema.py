"""
描述: HTTP 传输层请求/响应模型
主要功能:
    - ToolRequest: 工具调用请求体
    - ToolResponse / ToolError: 统一响应包装
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ToolRequest(BaseModel):
    params: dict[str, Any] = Field(default_factory=dict)


class ToolError(BaseModel):
    code: str
    message: str
    detail: Any | None = None


class ToolResponse(BaseModel):
    success: bool
    data: Any | None = None
    error: ToolError | None = None
