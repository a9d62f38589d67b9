"""
描述: RunCloud 工具目录
主要功能:
    - 汇总各资源模块声明的 EndpointTool
    - ALL_TOOLS 的顺序即 tools/list 的展示顺序
"""

from __future__ import annotations

from runcloud_mcp.tools import (
    cron,
    databases,
    domains,
    external_api,
    git,
    health,
    installers,
    logs,
    security,
    servers,
    services,
    ssl,
    static,
    supervisor,
    system_users,
    webapps,
)
from runcloud_mcp.tools.base import EndpointTool


ALL_TOOLS: tuple[EndpointTool, ...] = (
    *health.TOOLS,
    *servers.TOOLS,
    *services.TOOLS,
    *webapps.TOOLS,
    *git.TOOLS,
    *domains.TOOLS,
    *ssl.TOOLS,
    *databases.TOOLS,
    *system_users.TOOLS,
    *cron.TOOLS,
    *supervisor.TOOLS,
    *logs.TOOLS,
    *security.TOOLS,
    *installers.TOOLS,
    *static.TOOLS,
    *external_api.TOOLS,
)

__all__ = ["ALL_TOOLS", "EndpointTool"]
