"""
描述: 工具调用分发器
主要功能:
    - 按 解析 -> 校验 -> 映射 -> 调用 的顺序执行一次工具调用
    - 任一阶段失败即终止, 不重试
    - 将结果或类型化错误包装为 InvocationResult
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field
from typing import Any

from runcloud_mcp.errors import ErrorKind, InternalToolError, ToolInvocationError
from runcloud_mcp.runcloud.client import RunCloudClient
from runcloud_mcp.tools.registry import ToolRegistry
from runcloud_mcp.tools.validation import validate_arguments
from runcloud_mcp.utils.logger import clear_request_context, generate_request_id, set_request_context


logger = logging.getLogger(__name__)


# region 调用结果
@dataclass
class InvocationResult:
    """一次工具调用的结果 (成功时 payload 为远端 JSON 原文)"""
    success: bool
    payload: Any = None
    error_kind: ErrorKind | None = None
    message: str = ""
    details: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, payload: Any) -> InvocationResult:
        return cls(success=True, payload=payload)

    @classmethod
    def failed(cls, exc: ToolInvocationError) -> InvocationResult:
        return cls(success=False, error_kind=exc.kind, message=exc.message, details=exc.details)


def render_payload(payload: Any) -> str:
    """远端响应体的文本形式 (2 空格缩进的 JSON)"""
    return json.dumps(payload, indent=2, ensure_ascii=False)
# endregion


# region 分发器
class ToolDispatcher:
    """
    工具调用分发器

    注册中心与客户端在启动后只读, 并发调用之间不共享可变状态。
    """

    def __init__(self, registry: ToolRegistry, client: RunCloudClient) -> None:
        self._registry = registry
        self._client = client

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    def list_tools(self) -> list[dict[str, Any]]:
        return self._registry.list_tools()

    async def call_tool(self, name: str, arguments: Any = None) -> Any:
        """
        执行工具调用

        参数:
            name: 工具名称
            arguments: 调用参数 (原始 JSON)

        返回:
            远端响应 JSON

        抛出:
            UnknownToolError: 工具未注册
            InvalidArgumentsError: 参数校验失败 (此时未发出任何请求)
            RemoteAPIError: 远端返回非 2xx
            TransportError: 网络异常
            InternalToolError: 请求映射失败
        """
        set_request_context(generate_request_id(), name)
        started = time.perf_counter()
        stage = "resolving"
        try:
            tool = self._registry.resolve(name)

            stage = "validating"
            validated = validate_arguments(tool.input_schema, arguments)

            stage = "mapping"
            try:
                call = tool.build_call(validated)
            except Exception as exc:
                raise InternalToolError(
                    f"Failed to build request for {name}: {exc}",
                    {"tool": name},
                ) from exc

            stage = "calling"
            logger.debug("Calling RunCloud API", extra={"method": call.method, "path": call.path})
            payload = await self._client.request(
                call.method,
                call.path,
                params=call.query,
                json_body=call.body,
            )
        except ToolInvocationError as exc:
            logger.warning(
                "Tool call failed: %s",
                exc.message,
                extra={"kind": exc.kind.value, "stage": stage, "duration_ms": _elapsed_ms(started)},
            )
            raise
        else:
            logger.info(
                "Tool call completed",
                extra={"outcome": "success", "duration_ms": _elapsed_ms(started)},
            )
            return payload
        finally:
            clear_request_context()

    async def invoke(self, name: str, arguments: Any = None) -> InvocationResult:
        """执行工具调用, 类型化错误转为失败结果而不抛出"""
        try:
            payload = await self.call_tool(name, arguments)
        except ToolInvocationError as exc:
            return InvocationResult.failed(exc)
        return InvocationResult.ok(payload)
# endregion


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
