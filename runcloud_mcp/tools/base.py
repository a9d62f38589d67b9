"""
描述: MCP 工具基础定义
主要功能:
    - 定义 ToolParam 参数声明 (类型/枚举/默认值/位置/条件字段)
    - 定义 ToolDescriptor 工具元数据与 OutboundCall 出站请求
    - 定义 EndpointTool 声明式工具记录, 由通用映射器生成出站请求
"""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Literal, Mapping
from urllib.parse import quote


HttpMethod = Literal["GET", "POST", "PATCH", "PUT", "DELETE"]
ParamLocation = Literal["path", "query", "body"]


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


# region 参数与元数据
@dataclass(frozen=True)
class ToolParam:
    """
    工具参数声明

    属性:
        name: 参数名 (同时是 inputSchema 字段名与路径占位符)
        type: JSON 基础类型 (string/number/boolean)
        location: 映射位置 (path/query/body)
        api_name: 发送到 RunCloud 时使用的字段名
        when: (兄弟字段, 取值), 仅当兄弟字段的生效值等于该值时才映射
    """
    name: str
    type: str = "string"
    description: str = ""
    required: bool = False
    enum: tuple[str, ...] | None = None
    default: Any = MISSING
    location: ParamLocation = "body"
    api_name: str | None = None
    when: tuple[str, Any] | None = None

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    @property
    def wire_name(self) -> str:
        return self.api_name or self.name

    def to_schema(self) -> dict[str, Any]:
        prop: dict[str, Any] = {"type": self.type}
        if self.enum:
            prop["enum"] = list(self.enum)
        description = self.description
        if self.has_default:
            prop["default"] = self.default
            description = f"{description} (default: {json.dumps(self.default)})"
        if self.when:
            sibling, expected = self.when
            description = f"{description} (only used when {sibling} is {json.dumps(expected)})"
        prop["description"] = description
        return prop


@dataclass(frozen=True)
class ToolDescriptor:
    """工具元数据 (用于 tools/list)"""
    name: str
    description: str
    input_schema: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        # 返回副本, 注册中心内的 schema 只读
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": copy.deepcopy(self.input_schema),
        }


@dataclass(frozen=True)
class OutboundCall:
    """已解析的 RunCloud HTTP 请求"""
    method: HttpMethod
    path: str
    query: dict[str, Any] = field(default_factory=dict)
    body: dict[str, Any] | None = None
# endregion


# region 声明式工具
@dataclass(frozen=True)
class EndpointTool:
    """
    声明式 RunCloud 工具

    一条记录同时承载工具元数据与请求映射规则:
    路径模板中的 {name} 占位符由 location="path" 的参数填充。
    """
    name: str
    description: str
    method: HttpMethod
    path: str
    params: tuple[ToolParam, ...] = ()

    @cached_property
    def descriptor(self) -> ToolDescriptor:
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {param.name: param.to_schema() for param in self.params},
        }
        required = [param.name for param in self.params if param.required]
        if required:
            schema["required"] = required
        return ToolDescriptor(self.name, self.description, schema)

    @property
    def input_schema(self) -> dict[str, Any]:
        return self.descriptor.input_schema

    def build_call(self, arguments: Mapping[str, Any]) -> OutboundCall:
        """
        将已校验的参数映射为出站请求

        参数:
            arguments: 调用参数 (未声明的字段被忽略)

        返回:
            新的 OutboundCall 实例

        抛出:
            KeyError: 路径参数缺失 (校验器应已拦截)
        """
        resolved: dict[str, Any] = {}
        for param in self.params:
            if param.when is None:
                _resolve(param, arguments, resolved)
        for param in self.params:
            if param.when is None:
                continue
            sibling, expected = param.when
            if resolved.get(sibling) == expected:
                _resolve(param, arguments, resolved)

        path_values = {
            param.name: _format_path_value(resolved[param.name])
            for param in self.params
            if param.location == "path"
        }
        query = {
            param.wire_name: resolved[param.name]
            for param in self.params
            if param.location == "query" and param.name in resolved
        }
        body: dict[str, Any] | None = None
        if any(param.location == "body" for param in self.params):
            body = {
                param.wire_name: resolved[param.name]
                for param in self.params
                if param.location == "body" and param.name in resolved
            }
        return OutboundCall(
            method=self.method,
            path=self.path.format_map(path_values),
            query=query,
            body=body,
        )
# endregion


def _resolve(param: ToolParam, arguments: Mapping[str, Any], resolved: dict[str, Any]) -> None:
    value = arguments.get(param.name)
    if value is None and param.has_default:
        value = param.default
    if value is not None:
        resolved[param.name] = value


def _format_path_value(value: Any) -> str:
    # 路径参数是不透明的单个 segment, "/" 等字符一律编码
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return quote(str(value), safe="")


# region 声明辅助
def path_id(name: str, description: str) -> ToolParam:
    return ToolParam(name, "number", description, required=True, location="path")


def query(name: str, type: str = "string", description: str = "", **kwargs: Any) -> ToolParam:
    return ToolParam(name, type, description, location="query", **kwargs)


def body(name: str, type: str = "string", description: str = "", **kwargs: Any) -> ToolParam:
    return ToolParam(name, type, description, location="body", **kwargs)


SERVER_ID = path_id("serverId", "The ID of the server")
WEBAPP_ID = path_id("webappId", "The ID of the web application")
PAGE = query("page", "number", "Page number for pagination")
LINES = query("lines", "number", "Number of lines to retrieve")


def search(description: str) -> ToolParam:
    return query("search", "string", description)
# endregion
