"""
描述: 工具参数校验
主要功能:
    - 按 inputSchema 校验必填字段、JSON 类型与枚举值
    - 校验失败时抛出 InvalidArgumentsError (携带字段名与原因)
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from runcloud_mcp.errors import InvalidArgumentsError


MISSING_FIELD = "missing"
WRONG_TYPE = "wrong_type"
NOT_IN_ENUM = "not_in_enum"
INVALID_ARGUMENTS = "invalid_arguments"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


_TYPE_CHECKS: dict[str, Callable[[Any], bool]] = {
    "string": lambda value: isinstance(value, str),
    "number": _is_number,
    "boolean": lambda value: isinstance(value, bool),
}


def validate_arguments(schema: Mapping[str, Any], arguments: Any) -> dict[str, Any]:
    """
    校验调用参数

    未在 schema 中声明的字段原样保留, 不做校验。
    显式传入的 null 等同于未传。

    参数:
        schema: 工具 inputSchema
        arguments: 原始参数 (未经类型检查的 JSON)

    返回:
        参数字典副本

    抛出:
        InvalidArgumentsError: 参数不满足 schema
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise InvalidArgumentsError(
            "arguments",
            INVALID_ARGUMENTS,
            f"Invalid arguments: expected an object, got {_json_type(arguments)}",
        )

    properties: Mapping[str, Any] = schema.get("properties") or {}
    for name in schema.get("required") or []:
        if arguments.get(name) is None:
            raise InvalidArgumentsError(name, MISSING_FIELD, f"Missing required argument: {name}")

    for name, prop in properties.items():
        value = arguments.get(name)
        if value is None:
            continue
        expected = prop.get("type")
        check = _TYPE_CHECKS.get(expected or "")
        if check is not None and not check(value):
            raise InvalidArgumentsError(
                name,
                WRONG_TYPE,
                f"Invalid argument {name}: expected {expected}, got {_json_type(value)}",
            )
        allowed = prop.get("enum")
        if allowed and value not in allowed:
            raise InvalidArgumentsError(
                name,
                NOT_IN_ENUM,
                f"Invalid argument {name}: {value!r} is not one of {', '.join(map(str, allowed))}",
            )

    return dict(arguments)


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__
