"""Server service control tools."""

from __future__ import annotations

from runcloud_mcp.tools.base import SERVER_ID, EndpointTool, body


SERVICE_NAMES = (
    "nginx-rc",
    "apache2-rc",
    "mysql",
    "redis-server",
    "memcached",
    "beanstalkd",
    "supervisord",
)

TOOLS = (
    EndpointTool(
        name="list_services",
        description="List all services on a server with their status",
        method="GET",
        path="/servers/{serverId}/services",
        params=(SERVER_ID,),
    ),
    EndpointTool(
        name="control_service",
        description="Start, stop, restart, or reload a service on a server",
        method="PATCH",
        path="/servers/{serverId}/services",
        params=(
            SERVER_ID,
            body(
                "action",
                "string",
                "Action to perform",
                required=True,
                enum=("start", "stop", "restart", "reload"),
            ),
            body(
                "service",
                "string",
                "Service name",
                required=True,
                enum=SERVICE_NAMES,
                api_name="realName",
            ),
        ),
    ),
)
