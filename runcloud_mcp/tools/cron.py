"""Cron job tools."""

from __future__ import annotations

from runcloud_mcp.tools.base import PAGE, SERVER_ID, EndpointTool, body, path_id, search


CRON_ID = path_id("cronId", "The ID of the cron job")

TOOLS = (
    EndpointTool(
        name="list_cron_jobs",
        description="List all cron jobs on a server",
        method="GET",
        path="/servers/{serverId}/cronjobs",
        params=(SERVER_ID, search("Search cron jobs"), PAGE),
    ),
    EndpointTool(
        name="get_cron_job",
        description="Get a cron job",
        method="GET",
        path="/servers/{serverId}/cronjobs/{cronId}",
        params=(SERVER_ID, CRON_ID),
    ),
    EndpointTool(
        name="create_cron_job",
        description="Create a new cron job",
        method="POST",
        path="/servers/{serverId}/cronjobs",
        params=(
            SERVER_ID,
            body("label", "string", "Label for the cron job", required=True),
            body("username", "string", "System user to run the cron job", required=True),
            body("command", "string", "Command to execute", required=True),
            body("minute", "string", "Minute (0-59, *, */n)", required=True),
            body("hour", "string", "Hour (0-23, *, */n)", required=True),
            body("dayOfMonth", "string", "Day of month (1-31, *, */n)", required=True),
            body("month", "string", "Month (1-12, *, */n)", required=True),
            body("dayOfWeek", "string", "Day of week (0-7, *, */n)", required=True),
        ),
    ),
    EndpointTool(
        name="delete_cron_job",
        description="Delete a cron job",
        method="DELETE",
        path="/servers/{serverId}/cronjobs/{cronId}",
        params=(SERVER_ID, CRON_ID),
    ),
    EndpointTool(
        name="rebuild_cron_jobs",
        description="Rebuild all cron jobs on a server",
        method="PATCH",
        path="/servers/{serverId}/cronjobs/rebuild",
        params=(SERVER_ID,),
    ),
)
