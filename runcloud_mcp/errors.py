"""
描述: 工具调用异常定义
主要功能:
    - 定义 ErrorKind 错误类别枚举
    - 定义调用链各阶段的类型化异常 (未知工具/参数错误/远端错误/传输错误)
    - 定义启动期配置异常
"""

from __future__ import annotations

from enum import Enum
from typing import Any


# region 错误类别
class ErrorKind(str, Enum):
    """工具调用失败类别"""
    UNKNOWN_TOOL = "unknown_tool"
    INVALID_ARGUMENTS = "invalid_arguments"
    REMOTE_API_ERROR = "remote_api_error"
    TRANSPORT_ERROR = "transport_error"
    INTERNAL_ERROR = "internal_error"
# endregion


# region 调用异常
class ToolInvocationError(Exception):
    """工具调用异常基类"""
    kind: ErrorKind = ErrorKind.INTERNAL_ERROR

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return self.message


class UnknownToolError(ToolInvocationError):
    """工具未注册"""
    kind = ErrorKind.UNKNOWN_TOOL

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Unknown tool: {tool_name}", {"tool": tool_name})
        self.tool_name = tool_name


class InvalidArgumentsError(ToolInvocationError):
    """参数不满足工具 inputSchema"""
    kind = ErrorKind.INVALID_ARGUMENTS

    def __init__(self, field: str, reason: str, message: str) -> None:
        super().__init__(message, {"field": field, "reason": reason})
        self.field = field
        self.reason = reason


class RemoteAPIError(ToolInvocationError):
    """RunCloud API 返回非 2xx 状态"""
    kind = ErrorKind.REMOTE_API_ERROR

    def __init__(self, status_code: int, message: str, detail: Any | None = None) -> None:
        super().__init__(
            f"RunCloud API Error: {message}",
            {"status_code": status_code, "response": detail},
        )
        self.status_code = status_code
        self.detail = detail


class TransportError(ToolInvocationError):
    """出站请求未能获得响应 (DNS/连接/超时)"""
    kind = ErrorKind.TRANSPORT_ERROR


class InternalToolError(ToolInvocationError):
    """请求映射等内部不变量被破坏"""
    kind = ErrorKind.INTERNAL_ERROR
# endregion


# region 启动期异常
class ConfigError(RuntimeError):
    """启动配置缺失或非法"""
    pass


class DuplicateToolError(ValueError):
    """注册了重名工具"""

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Tool {tool_name} already registered")
        self.tool_name = tool_name
# endregion
