"""
描述: Supervisor 守护进程工具集
主要功能:
    - 任务增删查与启停控制
    - 可用二进制列表与配置重建
"""

from __future__ import annotations

from runcloud_mcp.tools.base import PAGE, SERVER_ID, EndpointTool, body, path_id, search


JOB_ID = path_id("jobId", "The ID of the supervisor job")

TOOLS = (
    EndpointTool(
        name="list_supervisor_jobs",
        description="List all supervisor jobs on a server",
        method="GET",
        path="/servers/{serverId}/supervisorjobs",
        params=(SERVER_ID, search("Search supervisor jobs"), PAGE),
    ),
    EndpointTool(
        name="get_supervisor_job",
        description="Get a supervisor job",
        method="GET",
        path="/servers/{serverId}/supervisorjobs/{jobId}",
        params=(SERVER_ID, JOB_ID),
    ),
    EndpointTool(
        name="create_supervisor_job",
        description="Create a new supervisor job",
        method="POST",
        path="/servers/{serverId}/supervisorjobs",
        params=(
            SERVER_ID,
            body("name", "string", "Name of the supervisor job", required=True),
            body("username", "string", "System user to run the job", required=True),
            body("directory", "string", "Working directory", required=True),
            body("command", "string", "Command to execute", required=True),
            body("processNum", "number", "Number of processes"),
            body("autoStart", "boolean", "Auto start on boot"),
            body("autoRestart", "boolean", "Auto restart on failure"),
            body("startSecs", "number", "Start seconds"),
            body("environment", "string", "Environment variables"),
        ),
    ),
    EndpointTool(
        name="delete_supervisor_job",
        description="Delete a supervisor job",
        method="DELETE",
        path="/servers/{serverId}/supervisorjobs/{jobId}",
        params=(SERVER_ID, JOB_ID),
    ),
    EndpointTool(
        name="control_supervisor_job",
        description="Control a supervisor job (start/stop/restart)",
        method="PATCH",
        path="/servers/{serverId}/supervisorjobs/{jobId}",
        params=(
            SERVER_ID,
            JOB_ID,
            body("action", "string", "Action to perform", required=True, enum=("start", "stop", "restart")),
        ),
    ),
    EndpointTool(
        name="list_supervisor_binaries",
        description="List binaries available to supervisor jobs",
        method="GET",
        path="/servers/{serverId}/supervisorjobs/binaries",
        params=(SERVER_ID,),
    ),
    EndpointTool(
        name="rebuild_supervisor_jobs",
        description="Rebuild supervisor configuration on a server",
        method="PATCH",
        path="/servers/{serverId}/supervisorjobs/rebuild",
        params=(SERVER_ID,),
    ),
)
