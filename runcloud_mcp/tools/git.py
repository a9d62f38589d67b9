"""Git deployment tools for web applications."""

from __future__ import annotations

from runcloud_mcp.tools.base import SERVER_ID, WEBAPP_ID, EndpointTool, body, path_id


GIT_ID = path_id("gitId", "The ID of the git configuration")

TOOLS = (
    EndpointTool(
        name="clone_git_repository",
        description="Clone a git repository for a web application",
        method="POST",
        path="/servers/{serverId}/webapps/{webappId}/git",
        params=(
            SERVER_ID,
            WEBAPP_ID,
            body(
                "provider",
                "string",
                "Git provider",
                required=True,
                enum=("github", "gitlab", "bitbucket", "custom"),
            ),
            body("repository", "string", "Repository URL or path", required=True),
            body("branch", "string", "Branch to clone"),
            body("autoDeploy", "boolean", "Enable auto deployment"),
        ),
    ),
    EndpointTool(
        name="get_git_info",
        description="Get git repository information for a web application",
        method="GET",
        path="/servers/{serverId}/webapps/{webappId}/git",
        params=(SERVER_ID, WEBAPP_ID),
    ),
    EndpointTool(
        name="change_git_branch",
        description="Change git branch for a web application",
        method="PATCH",
        path="/servers/{serverId}/webapps/{webappId}/git/{gitId}/branch",
        params=(
            SERVER_ID,
            WEBAPP_ID,
            GIT_ID,
            body("branch", "string", "New branch name", required=True),
        ),
    ),
    EndpointTool(
        name="deploy_git",
        description="Deploy code from git repository",
        method="PUT",
        path="/servers/{serverId}/webapps/{webappId}/git/{gitId}/script",
        params=(SERVER_ID, WEBAPP_ID, GIT_ID),
    ),
    EndpointTool(
        name="update_git_deployment_script",
        description="Update the deployment script and auto deploy flag of a git configuration",
        method="PATCH",
        path="/servers/{serverId}/webapps/{webappId}/git/{gitId}/script",
        params=(
            SERVER_ID,
            WEBAPP_ID,
            GIT_ID,
            body("autoDeploy", "boolean", "Enable auto deployment"),
            body("deployScript", "string", "Shell script executed on every deployment"),
        ),
    ),
    EndpointTool(
        name="remove_git_repository",
        description="Remove the git repository from a web application",
        method="DELETE",
        path="/servers/{serverId}/webapps/{webappId}/git/{gitId}",
        params=(SERVER_ID, WEBAPP_ID, GIT_ID),
    ),
    EndpointTool(
        name="get_deployment_key",
        description="Get the git deployment public key of a system user",
        method="GET",
        path="/servers/{serverId}/users/{userId}/deploymentkey",
        params=(SERVER_ID, path_id("userId", "The ID of the system user")),
    ),
)
