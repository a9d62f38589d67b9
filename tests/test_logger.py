from __future__ import annotations

import json
import logging

from runcloud_mcp.utils.logger import (
    SimpleFormatter,
    StructuredJsonFormatter,
    clear_request_context,
    set_request_context,
)


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord("runcloud_mcp.test", logging.INFO, __file__, 1, "Tool call completed", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_context_and_extra() -> None:
    set_request_context("req-1", "get_server")
    try:
        payload = json.loads(StructuredJsonFormatter().format(_record(duration_ms=1.5)))
    finally:
        clear_request_context()
    assert payload["message"] == "Tool call completed"
    assert payload["request_id"] == "req-1"
    assert payload["tool"] == "get_server"
    assert payload["duration_ms"] == 1.5


def test_json_formatter_without_context() -> None:
    payload = json.loads(StructuredJsonFormatter().format(_record()))
    assert "request_id" not in payload
    assert "tool" not in payload


def test_simple_formatter() -> None:
    set_request_context("req-2", "list_servers")
    try:
        line = SimpleFormatter().format(_record(kind="remote_api_error", stage="calling"))
    finally:
        clear_request_context()
    assert "req=req-2" in line
    assert "tool=list_servers" in line
    assert "kind=remote_api_error" in line
    assert "stage=calling" in line
