"""
描述: 命令行入口
主要功能:
    - 解析传输方式与监听参数
    - 凭证缺失时输出诊断并以非零状态退出
    - stdio 模式运行消息循环, http 模式启动 uvicorn
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Sequence

from dotenv import find_dotenv, load_dotenv

from runcloud_mcp import __version__
from runcloud_mcp.config import Settings, load_settings
from runcloud_mcp.errors import ConfigError
from runcloud_mcp.utils.logger import setup_logging


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="runcloud-mcp",
        description="Expose the RunCloud API v2 as MCP tools.",
    )
    parser.add_argument("--transport", choices=("stdio", "http"), help="Transport to serve (default from config)")
    parser.add_argument("--host", help="HTTP listen host")
    parser.add_argument("--port", type=int, help="HTTP listen port")
    parser.add_argument("--config", help="Path to the YAML config file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _apply_args(settings: Settings, args: argparse.Namespace) -> Settings:
    server = settings.server.model_copy(
        update={
            key: value
            for key, value in (
                ("transport", args.transport),
                ("host", args.host),
                ("port", args.port),
            )
            if value is not None
        }
    )
    return settings.model_copy(update={"server": server})


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    load_dotenv(find_dotenv(usecwd=True))
    settings = _apply_args(load_settings(args.config), args)
    setup_logging(settings.logging)

    try:
        if settings.server.transport == "http":
            return _serve_http(settings)
        return _serve_stdio(settings)
    except ConfigError as exc:
        logger.error("%s", exc)
        return 1


def _serve_stdio(settings: Settings) -> int:
    from runcloud_mcp.server.app_factory import build_dispatcher
    from runcloud_mcp.server.stdio import serve_stdio

    dispatcher = build_dispatcher(settings)
    try:
        asyncio.run(serve_stdio(dispatcher))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    return 0


def _serve_http(settings: Settings) -> int:
    import uvicorn

    from runcloud_mcp.server.app_factory import create_app

    app = create_app(settings)
    logger.info(
        "Starting RunCloud MCP server on http://%s:%s",
        settings.server.host,
        settings.server.port,
    )
    uvicorn.run(app, host=settings.server.host, port=settings.server.port, log_config=None)
    return 0
