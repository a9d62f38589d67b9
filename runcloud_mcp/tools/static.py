"""Static reference data published by RunCloud."""

from __future__ import annotations

from runcloud_mcp.tools.base import EndpointTool, query


TOOLS = (
    EndpointTool(
        name="list_timezones",
        description="List available timezones",
        method="GET",
        path="/static/timezones",
    ),
    EndpointTool(
        name="list_available_installers",
        description="List available script installers",
        method="GET",
        path="/static/appinstallers",
    ),
    EndpointTool(
        name="list_available_php_versions",
        description="List PHP versions available for a web server stack",
        method="GET",
        path="/static/phpversions",
        params=(
            query("webServer", "string", "Web server stack", enum=("nginx", "apache", "openlitespeed")),
        ),
    ),
)
