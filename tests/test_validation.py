from __future__ import annotations

import pytest

from runcloud_mcp.errors import InvalidArgumentsError
from runcloud_mcp.tools.registry import build_registry
from runcloud_mcp.tools.validation import (
    INVALID_ARGUMENTS,
    MISSING_FIELD,
    NOT_IN_ENUM,
    WRONG_TYPE,
    validate_arguments,
)


REGISTRY = build_registry()


def _schema(name: str) -> dict:
    return REGISTRY.resolve(name).input_schema


def test_missing_required_field() -> None:
    with pytest.raises(InvalidArgumentsError) as exc_info:
        validate_arguments(_schema("get_server"), {})
    assert exc_info.value.field == "serverId"
    assert exc_info.value.reason == MISSING_FIELD
    assert "serverId" in exc_info.value.message


def test_null_counts_as_missing() -> None:
    with pytest.raises(InvalidArgumentsError) as exc_info:
        validate_arguments(_schema("get_server"), {"serverId": None})
    assert exc_info.value.reason == MISSING_FIELD


@pytest.mark.parametrize("value", ["123", True, [1]])
def test_number_rejects_other_types(value: object) -> None:
    with pytest.raises(InvalidArgumentsError) as exc_info:
        validate_arguments(_schema("get_server"), {"serverId": value})
    assert exc_info.value.reason == WRONG_TYPE


def test_number_accepts_int_and_float() -> None:
    assert validate_arguments(_schema("get_server"), {"serverId": 7}) == {"serverId": 7}
    assert validate_arguments(_schema("get_server"), {"serverId": 7.0}) == {"serverId": 7.0}


def test_enum_violation() -> None:
    arguments = {"serverId": 1, "action": "explode", "service": "mysql"}
    with pytest.raises(InvalidArgumentsError) as exc_info:
        validate_arguments(_schema("control_service"), arguments)
    assert exc_info.value.field == "action"
    assert exc_info.value.reason == NOT_IN_ENUM


def test_optional_field_type_is_checked() -> None:
    with pytest.raises(InvalidArgumentsError) as exc_info:
        validate_arguments(_schema("list_servers"), {"page": "two"})
    assert exc_info.value.field == "page"
    assert exc_info.value.reason == WRONG_TYPE


def test_extra_fields_pass_through() -> None:
    validated = validate_arguments(_schema("get_server"), {"serverId": 1, "verbose": "yes"})
    assert validated == {"serverId": 1, "verbose": "yes"}


def test_arguments_must_be_an_object() -> None:
    with pytest.raises(InvalidArgumentsError) as exc_info:
        validate_arguments(_schema("list_servers"), ["serverId"])
    assert exc_info.value.reason == INVALID_ARGUMENTS


def test_none_arguments_treated_as_empty() -> None:
    assert validate_arguments(_schema("list_servers"), None) == {}
