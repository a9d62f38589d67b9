"""
描述: HTTP 模式 ASGI 入口
主要功能:
    - 加载 .env 与配置
    - 初始化日志
    - 暴露模块级 app 供 uvicorn 引用 (runcloud_mcp.main:app)
"""

from __future__ import annotations

from dotenv import load_dotenv

from runcloud_mcp.config import get_settings
from runcloud_mcp.server.app_factory import create_app
from runcloud_mcp.utils.logger import setup_logging


# region 初始化
load_dotenv()
settings = get_settings()
setup_logging(settings.logging)
# endregion

app = create_app(settings)
