"""
描述: MCP 工具注册中心
主要功能:
    - 启动时一次性注册全部 RunCloud 工具 (重名即失败)
    - 提供工具查找与元数据列表功能
    - 构建完成后冻结, 运行期只读
"""

from __future__ import annotations

import logging
from typing import Any, Collection, Iterable

from runcloud_mcp.errors import DuplicateToolError, UnknownToolError
from runcloud_mcp.tools import ALL_TOOLS
from runcloud_mcp.tools.base import EndpointTool


logger = logging.getLogger(__name__)


# region 工具注册中心
class ToolRegistry:
    """工具注册中心 (按注册顺序保存)"""

    def __init__(self) -> None:
        self._tools: dict[str, EndpointTool] = {}
        self._frozen = False

    def register(self, tool: EndpointTool) -> EndpointTool:
        if self._frozen:
            raise RuntimeError(f"Registry is frozen, cannot register {tool.name}")
        if not tool.name:
            raise ValueError("Tool must define a name")
        if tool.name in self._tools:
            raise DuplicateToolError(tool.name)
        self._tools[tool.name] = tool
        return tool

    def freeze(self) -> ToolRegistry:
        self._frozen = True
        return self

    def resolve(self, name: str) -> EndpointTool:
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(name)
        return tool

    def list_tools(self) -> list[dict[str, Any]]:
        """获取所有已注册工具的元数据 (name/description/inputSchema)"""
        return [tool.descriptor.to_dict() for tool in self._tools.values()]

    def names(self) -> list[str]:
        return list(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
# endregion


def build_registry(
    tools: Iterable[EndpointTool] = ALL_TOOLS,
    enabled: Collection[str] | None = None,
) -> ToolRegistry:
    """
    构建并冻结工具注册中心

    参数:
        tools: 工具声明
        enabled: 启用白名单, 为空时注册全部工具

    返回:
        只读注册中心
    """
    registry = ToolRegistry()
    allowed = set(enabled or ())
    for tool in tools:
        if allowed and tool.name not in allowed:
            continue
        registry.register(tool)

    unknown = allowed - set(registry.names())
    if unknown:
        logger.warning("Enabled tools not found in catalog: %s", ", ".join(sorted(unknown)))
    return registry.freeze()
