"""Server and web application log tools."""

from __future__ import annotations

from runcloud_mcp.tools.base import LINES, SERVER_ID, WEBAPP_ID, EndpointTool, ToolParam


SERVER_LOG_TYPES = (
    "agent",
    "nginx-error",
    "nginx-access",
    "apache-error",
    "apache-access",
    "mysql-general",
    "mysql-error",
    "mysql-slow-query",
)
WEBAPP_LOG_TYPES = ("error", "access")


def _log_type(choices: tuple[str, ...]) -> ToolParam:
    return ToolParam("type", "string", "Log type", required=True, enum=choices, location="path")


TOOLS = (
    EndpointTool(
        name="get_server_logs",
        description="Get server logs",
        method="GET",
        path="/servers/{serverId}/logs/{type}",
        params=(SERVER_ID, _log_type(SERVER_LOG_TYPES), LINES),
    ),
    EndpointTool(
        name="get_webapp_logs",
        description="Get web application logs",
        method="GET",
        path="/servers/{serverId}/webapps/{webappId}/logs/{type}",
        params=(SERVER_ID, WEBAPP_ID, _log_type(WEBAPP_LOG_TYPES), LINES),
    ),
)
