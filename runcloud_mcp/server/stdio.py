"""
描述: MCP stdio 传输
主要功能:
    - 守护线程按行读取 stdin 上的 JSON-RPC 消息, 响应写入 stdout
    - 每个请求独立成任务并发执行
    - 支持 notifications/cancelled 取消进行中的调用
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
import threading
from typing import Any, TextIO

from runcloud_mcp.server.dispatcher import ToolDispatcher
from runcloud_mcp.server.jsonrpc import PARSE_ERROR, handle_message, is_notification, make_error


logger = logging.getLogger(__name__)

CANCELLED_NOTIFICATION = "notifications/cancelled"


def _write(stdout: TextIO, message: dict[str, Any]) -> None:
    stdout.write(json.dumps(message, ensure_ascii=False, separators=(",", ":")) + "\n")
    stdout.flush()


def _request_key(message: Any) -> str | int | float | None:
    if is_notification(message) or not isinstance(message, dict):
        return None
    request_id = message.get("id")
    if isinstance(request_id, (str, int, float)) and not isinstance(request_id, bool):
        return request_id
    return None


def _start_reader(stdin: TextIO, loop: asyncio.AbstractEventLoop, queue: asyncio.Queue) -> None:
    """
    在守护线程中逐行读取 stdin 并投递到事件循环

    优先读取底层字节流, 非法 UTF-8 以替换字符解码, 由 JSON 解析报告错误。
    阻塞中的 readline 不会阻止进程退出。
    """
    readline = getattr(stdin, "buffer", stdin).readline

    def pump() -> None:
        while True:
            try:
                item: Any = readline()
            except Exception as exc:
                item = exc
            try:
                loop.call_soon_threadsafe(queue.put_nowait, item)
            except RuntimeError:
                # 事件循环已关闭
                return
            if isinstance(item, Exception) or not item:
                return

    threading.Thread(target=pump, name="stdio-reader", daemon=True).start()


async def serve_stdio(
    dispatcher: ToolDispatcher,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """
    运行 stdio 消息循环, 直到 stdin 关闭

    参数:
        dispatcher: 工具分发器
        stdin: 输入流 (默认 sys.stdin)
        stdout: 输出流 (默认 sys.stdout)
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    pending: set[asyncio.Task[None]] = set()
    in_flight: dict[Any, asyncio.Task[None]] = {}
    lines: asyncio.Queue = asyncio.Queue()

    async def run(message: Any) -> None:
        response = await handle_message(dispatcher, message)
        if response is not None:
            _write(stdout, response)

    def cancel(message: dict[str, Any]) -> None:
        params = message.get("params") or {}
        request_id = params.get("requestId") if isinstance(params, dict) else None
        try:
            task = in_flight.get(request_id)
        except TypeError:
            task = None
        if task is not None and not task.done():
            logger.info("Cancelling in-flight request", extra={"rpc_id": request_id})
            task.cancel()

    _start_reader(stdin, asyncio.get_running_loop(), lines)
    logger.info("RunCloud MCP server running on stdio")
    while True:
        item = await lines.get()
        if isinstance(item, Exception):
            raise item
        if not item:
            break
        if isinstance(item, bytes):
            item = item.decode("utf-8", errors="replace")
        line = item.strip()
        if not line:
            continue
        try:
            message = json.loads(line)
        except ValueError:
            _write(stdout, make_error(None, PARSE_ERROR, "Parse error"))
            continue

        if isinstance(message, dict) and message.get("method") == CANCELLED_NOTIFICATION:
            cancel(message)
            continue

        task = asyncio.create_task(run(message))
        pending.add(task)
        key = _request_key(message)
        if key is not None:
            in_flight[key] = task

        def _done(finished: asyncio.Task[None], key: Any = key) -> None:
            pending.discard(finished)
            if key is not None and in_flight.get(key) is finished:
                del in_flight[key]

        task.add_done_callback(_done)

    if pending:
        await asyncio.gather(*pending, return_exceptions=True)
    logger.info("stdin closed, stdio transport stopped")
