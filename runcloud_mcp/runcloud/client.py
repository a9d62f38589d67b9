"""
描述: RunCloud API v2 客户端
主要功能:
    - 封装 HTTP 请求与 Basic 鉴权
    - 统一 JSON 请求头
    - 将非 2xx 响应与网络异常转换为类型化错误 (不做重试)
"""

from __future__ import annotations

from typing import Any

import httpx

from runcloud_mcp.config import RunCloudCredential
from runcloud_mcp.errors import RemoteAPIError, TransportError


DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


# region RunCloud 客户端
class RunCloudClient:
    """
    RunCloud API 客户端

    功能:
        - 所有请求使用同一组 Basic 凭证 (API Key / API Secret)
        - 成功时返回解析后的 JSON 响应体
    """

    def __init__(
        self,
        credential: RunCloudCredential,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        初始化客户端

        参数:
            credential: 进程级凭证
            timeout: 单次请求超时 (秒)
            transport: 可选的 httpx 传输层 (测试注入)
        """
        self._credential = credential
        self._timeout = timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._credential.base_url

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> Any:
        """
        执行 API 请求

        参数:
            method: HTTP 方法 (GET/POST/PATCH/PUT/DELETE)
            path: API 路径 (不含 Base URL)
            params: 查询参数
            json_body: JSON 请求体

        返回:
            响应 JSON 数据 (空响应体返回 None)

        抛出:
            RemoteAPIError: 远端返回非 2xx
            TransportError: 网络异常, 未获得响应
        """
        url = f"{self._credential.base_url}{path}"
        try:
            async with httpx.AsyncClient(
                auth=httpx.BasicAuth(self._credential.key, self._credential.secret),
                headers=DEFAULT_HEADERS,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(
                    method,
                    url,
                    params=params or None,
                    json=json_body,
                )
        except httpx.HTTPError as exc:
            error_message = str(exc).strip()
            if error_message:
                raise TransportError(f"{exc.__class__.__name__}: {error_message}") from exc
            raise TransportError(exc.__class__.__name__) from exc

        payload = _decode_body(response)
        if response.status_code >= 300:
            message = None
            if isinstance(payload, dict):
                message = payload.get("message")
            raise RemoteAPIError(
                status_code=response.status_code,
                message=str(message) if message else f"Request failed with status code {response.status_code}",
                detail=payload,
            )
        return payload

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(
        self,
        path: str,
        json_body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await self.request("POST", path, params=params, json_body=json_body)

    async def patch(
        self,
        path: str,
        json_body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await self.request("PATCH", path, params=params, json_body=json_body)

    async def put(
        self,
        path: str,
        json_body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await self.request("PUT", path, params=params, json_body=json_body)

    async def delete(
        self,
        path: str,
        json_body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await self.request("DELETE", path, params=params, json_body=json_body)
# endregion


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
