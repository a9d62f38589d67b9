"""System user and SSH key tools."""

from __future__ import annotations

from runcloud_mcp.tools.base import PAGE, SERVER_ID, EndpointTool, body, path_id, search


USER_ID = path_id("userId", "The ID of the system user")
KEY_ID = path_id("keyId", "The ID of the SSH key")

SYSTEM_USER_TOOLS = (
    EndpointTool(
        name="list_system_users",
        description="List all system users on a server",
        method="GET",
        path="/servers/{serverId}/users",
        params=(SERVER_ID, search("Search users by username"), PAGE),
    ),
    EndpointTool(
        name="get_system_user",
        description="Get a system user",
        method="GET",
        path="/servers/{serverId}/users/{userId}",
        params=(SERVER_ID, USER_ID),
    ),
    EndpointTool(
        name="create_system_user",
        description="Create a new system user",
        method="POST",
        path="/servers/{serverId}/users",
        params=(
            SERVER_ID,
            body("username", "string", "Username", required=True),
            body("password", "string", "Password", required=True),
        ),
    ),
    EndpointTool(
        name="update_system_user_password",
        description="Update system user password",
        method="PATCH",
        path="/servers/{serverId}/users/{userId}",
        params=(SERVER_ID, USER_ID, body("password", "string", "New password", required=True)),
    ),
    EndpointTool(
        name="delete_system_user",
        description="Delete a system user",
        method="DELETE",
        path="/servers/{serverId}/users/{userId}",
        params=(SERVER_ID, USER_ID),
    ),
)

SSH_KEY_TOOLS = (
    EndpointTool(
        name="list_ssh_keys",
        description="List all SSH keys for a system user",
        method="GET",
        path="/servers/{serverId}/users/{userId}/sshkeys",
        params=(SERVER_ID, USER_ID),
    ),
    EndpointTool(
        name="get_ssh_key",
        description="Get an SSH key of a system user",
        method="GET",
        path="/servers/{serverId}/users/{userId}/sshkeys/{keyId}",
        params=(SERVER_ID, USER_ID, KEY_ID),
    ),
    EndpointTool(
        name="add_ssh_key",
        description="Add SSH key for a system user",
        method="POST",
        path="/servers/{serverId}/users/{userId}/sshkeys",
        params=(
            SERVER_ID,
            USER_ID,
            body("name", "string", "Name of the SSH key", required=True),
            body("publicKey", "string", "Public SSH key", required=True),
        ),
    ),
    EndpointTool(
        name="delete_ssh_key",
        description="Delete SSH key",
        method="DELETE",
        path="/servers/{serverId}/users/{userId}/sshkeys/{keyId}",
        params=(SERVER_ID, USER_ID, KEY_ID),
    ),
)

TOOLS = SYSTEM_USER_TOOLS + SSH_KEY_TOOLS
