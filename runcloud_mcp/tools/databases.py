"""
描述: 数据库与数据库用户工具集
主要功能:
    - 数据库增删查与排序规则列表
    - 数据库用户管理与授权
"""

from __future__ import annotations

from runcloud_mcp.tools.base import PAGE, SERVER_ID, EndpointTool, body, path_id, search


DEFAULT_COLLATION = "utf8mb4_general_ci"

DATABASE_ID = path_id("databaseId", "The ID of the database")
DATABASE_USER_ID = path_id("userId", "The ID of the database user")

DATABASE_TOOLS = (
    EndpointTool(
        name="list_databases",
        description="List all databases on a server",
        method="GET",
        path="/servers/{serverId}/databases",
        params=(SERVER_ID, search("Search databases by name"), PAGE),
    ),
    EndpointTool(
        name="get_database",
        description="Get a database",
        method="GET",
        path="/servers/{serverId}/databases/{databaseId}",
        params=(SERVER_ID, DATABASE_ID),
    ),
    EndpointTool(
        name="create_database",
        description="Create a new database on a server",
        method="POST",
        path="/servers/{serverId}/databases",
        params=(
            SERVER_ID,
            body("name", "string", "Name of the database", required=True),
            body("collation", "string", "Database collation", default=DEFAULT_COLLATION),
        ),
    ),
    EndpointTool(
        name="delete_database",
        description="Delete a database",
        method="DELETE",
        path="/servers/{serverId}/databases/{databaseId}",
        params=(SERVER_ID, DATABASE_ID),
    ),
    EndpointTool(
        name="list_database_collations",
        description="List database collations available on a server",
        method="GET",
        path="/servers/{serverId}/databases/collations",
        params=(SERVER_ID,),
    ),
    EndpointTool(
        name="list_database_grants",
        description="List database users granted access to a database",
        method="GET",
        path="/servers/{serverId}/databases/{databaseId}/grant",
        params=(SERVER_ID, DATABASE_ID),
    ),
    EndpointTool(
        name="grant_database_access",
        description="Grant database access to a user",
        method="POST",
        path="/servers/{serverId}/databases/{databaseId}/grant",
        params=(
            SERVER_ID,
            DATABASE_ID,
            body("userId", "number", "The ID of the database user", required=True),
        ),
    ),
    EndpointTool(
        name="revoke_database_access",
        description="Revoke database access from a user",
        method="DELETE",
        path="/servers/{serverId}/databases/{databaseId}/grant/{userId}",
        params=(SERVER_ID, DATABASE_ID, DATABASE_USER_ID),
    ),
)

DATABASE_USER_TOOLS = (
    EndpointTool(
        name="list_database_users",
        description="List all database users on a server",
        method="GET",
        path="/servers/{serverId}/databaseusers",
        params=(SERVER_ID, search("Search users by username"), PAGE),
    ),
    EndpointTool(
        name="get_database_user",
        description="Get a database user",
        method="GET",
        path="/servers/{serverId}/databaseusers/{userId}",
        params=(SERVER_ID, DATABASE_USER_ID),
    ),
    EndpointTool(
        name="create_database_user",
        description="Create a new database user on a server",
        method="POST",
        path="/servers/{serverId}/databaseusers",
        params=(
            SERVER_ID,
            body("username", "string", "Username for the database user", required=True),
            body("password", "string", "Password for the database user", required=True),
        ),
    ),
    EndpointTool(
        name="update_database_user_password",
        description="Update database user password",
        method="PATCH",
        path="/servers/{serverId}/databaseusers/{userId}",
        params=(
            SERVER_ID,
            DATABASE_USER_ID,
            body("password", "string", "New password", required=True),
        ),
    ),
    EndpointTool(
        name="delete_database_user",
        description="Delete a database user",
        method="DELETE",
        path="/servers/{serverId}/databaseusers/{userId}",
        params=(SERVER_ID, DATABASE_USER_ID),
    ),
)

TOOLS = DATABASE_TOOLS + DATABASE_USER_TOOLS
