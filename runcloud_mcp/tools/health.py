"""API health check tool."""

from __future__ import annotations

from runcloud_mcp.tools.base import EndpointTool


TOOLS = (
    EndpointTool(
        name="health_check",
        description="Check API health status",
        method="GET",
        path="/ping",
    ),
)
