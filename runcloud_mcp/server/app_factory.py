"""
描述: FastAPI 应用工厂
主要功能:
    - 一次性构建工具注册中心、RunCloud 客户端与分发器
    - 分发器挂载在 app.state 上供路由使用
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from runcloud_mcp import __version__
from runcloud_mcp.config import Settings, resolve_credential
from runcloud_mcp.runcloud.client import RunCloudClient
from runcloud_mcp.server.dispatcher import ToolDispatcher
from runcloud_mcp.server.http import router as http_router
from runcloud_mcp.tools.registry import build_registry


logger = logging.getLogger(__name__)


def build_dispatcher(settings: Settings, client: RunCloudClient | None = None) -> ToolDispatcher:
    """
    构建工具分发器

    参数:
        settings: 全局配置
        client: 可选的客户端实例 (测试注入); 为空时按凭证创建

    抛出:
        ConfigError: 未注入客户端且凭证缺失
    """
    if client is None:
        client = RunCloudClient(
            resolve_credential(settings),
            timeout=settings.runcloud.request.timeout,
        )
    registry = build_registry(enabled=settings.tools.enabled)
    logger.info(
        "MCP server config loaded",
        extra={"tools_registered": len(registry), "base_url": client.base_url},
    )
    return ToolDispatcher(registry, client)


def create_app(settings: Settings, client: RunCloudClient | None = None) -> FastAPI:
    app = FastAPI(title="RunCloud MCP Server", version=__version__)
    app.state.dispatcher = build_dispatcher(settings, client)
    app.include_router(http_router)
    return app
