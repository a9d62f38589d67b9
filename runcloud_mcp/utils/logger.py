"""
描述: MCP Server 日志工具库
主要功能:
    - JSON 格式结构化输出 (Structured Logging)
    - 自动注入调用上下文 (Request ID, Tool Name)
    - 统一日志配置初始化 (固定输出到 stderr)
"""

from __future__ import annotations

import json
import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Any

from runcloud_mcp.config import LoggingSettings


# region 上下文变量 (Context Vars)
request_id_var: ContextVar[str] = ContextVar("request_id", default="")
tool_name_var: ContextVar[str] = ContextVar("tool_name", default="")
# endregion


_RESERVED_ATTRS = frozenset(
    (
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "pathname", "process", "processName", "relativeCreated",
        "stack_info", "exc_info", "exc_text", "thread", "threadName",
        "message", "asctime", "taskName",
    )
)


# region 日志 Formatter
class StructuredJsonFormatter(logging.Formatter):
    """
    JSON 结构化日志格式化器

    功能:
        - 将日志记录转换为单行 JSON
        - 自动注入当前上下文变量与 extra 字段
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if request_id := request_id_var.get():
            payload["request_id"] = request_id
        if tool_name := tool_name_var.get():
            payload["tool"] = tool_name

        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS or key.startswith("_"):
                continue
            payload[key] = value

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


class SimpleFormatter(logging.Formatter):
    """简单文本格式化器（开发环境用）"""

    def format(self, record: logging.LogRecord) -> str:
        base = f"[{self.formatTime(record)}] {record.levelname:5} {record.name}: {record.getMessage()}"

        context_parts = []
        if request_id := request_id_var.get():
            context_parts.append(f"req={request_id}")
        if tool_name := tool_name_var.get():
            context_parts.append(f"tool={tool_name}")
        if context_parts:
            base += f" ({', '.join(context_parts)})"

        extras = []
        for key in ("kind", "stage", "duration_ms"):
            if hasattr(record, key):
                extras.append(f"{key}={getattr(record, key)}")
        if extras:
            base += f" [{', '.join(extras)}]"

        if record.exc_info:
            base += "\n" + self.formatException(record.exc_info)
        return base
# endregion


# region 上下文管理
def set_request_context(request_id: str | None = None, tool_name: str | None = None) -> None:
    """
    设置当前调用的上下文信息

    参数:
        request_id: 调用唯一标识
        tool_name: 当前执行的工具名称
    """
    if request_id:
        request_id_var.set(request_id)
    if tool_name:
        tool_name_var.set(tool_name)


def clear_request_context() -> None:
    """清除调用上下文"""
    request_id_var.set("")
    tool_name_var.set("")


def generate_request_id() -> str:
    """生成调用 ID"""
    return str(uuid.uuid4())[:12]
# endregion


# region 日志初始化
def setup_logging(settings: LoggingSettings) -> None:
    """
    初始化日志系统

    stdout 保留给 stdio 传输的协议帧, 日志统一写入 stderr。

    参数:
        settings: 日志配置对象
    """
    level = getattr(logging, settings.level.upper(), logging.INFO)
    handler = logging.StreamHandler(sys.stderr)
    if settings.format == "json":
        handler.setFormatter(StructuredJsonFormatter())
    else:
        handler.setFormatter(SimpleFormatter())
    logging.basicConfig(level=level, handlers=[handler], force=True)
# endregion
