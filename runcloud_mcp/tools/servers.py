"""
Server management tools.
"""

from __future__ import annotations

from runcloud_mcp.tools.base import PAGE, SERVER_ID, EndpointTool, body, search


TOOLS = (
    EndpointTool(
        name="list_servers",
        description="List all servers in your RunCloud account",
        method="GET",
        path="/servers",
        params=(search("Search servers by name"), PAGE),
    ),
    EndpointTool(
        name="list_shared_servers",
        description="List servers shared with your RunCloud account",
        method="GET",
        path="/servers/shared",
        params=(search("Search servers by name"), PAGE),
    ),
    EndpointTool(
        name="get_server",
        description="Get detailed information about a specific server",
        method="GET",
        path="/servers/{serverId}",
        params=(SERVER_ID,),
    ),
    EndpointTool(
        name="create_server",
        description="Create a new server",
        method="POST",
        path="/servers",
        params=(
            body("name", "string", "Server name", required=True),
            body("ipAddress", "string", "Server IP address", required=True),
            body("provider", "string", "Server provider"),
        ),
    ),
    EndpointTool(
        name="update_server_meta",
        description="Update the name and provider of a server",
        method="PATCH",
        path="/servers/{serverId}/settings/meta",
        params=(
            SERVER_ID,
            body("name", "string", "Server name", required=True),
            body("provider", "string", "Server provider"),
        ),
    ),
    EndpointTool(
        name="delete_server",
        description="Delete a server",
        method="DELETE",
        path="/servers/{serverId}",
        params=(SERVER_ID,),
    ),
    EndpointTool(
        name="get_server_stats",
        description="Get statistics for a specific server",
        method="GET",
        path="/servers/{serverId}/stats",
        params=(SERVER_ID,),
    ),
    EndpointTool(
        name="get_server_hardware_info",
        description="Get hardware information for a server",
        method="GET",
        path="/servers/{serverId}/hardwareinfo",
        params=(SERVER_ID,),
    ),
    EndpointTool(
        name="get_installation_script",
        description="Get installation script for a server",
        method="GET",
        path="/servers/{serverId}/installationscript",
        params=(SERVER_ID,),
    ),
    EndpointTool(
        name="get_ssh_settings",
        description="Get SSH configuration of a server",
        method="GET",
        path="/servers/{serverId}/settings/ssh",
        params=(SERVER_ID,),
    ),
    EndpointTool(
        name="update_ssh_settings",
        description="Update SSH configuration of a server",
        method="PATCH",
        path="/servers/{serverId}/settings/ssh",
        params=(
            SERVER_ID,
            body("passwordlessLogin", "boolean", "Allow only key based SSH login"),
            body("useDns", "boolean", "Enable UseDNS lookups for SSH connections"),
            body("preventRootLogin", "boolean", "Prevent root login over SSH"),
        ),
    ),
    EndpointTool(
        name="get_autoupdate_settings",
        description="Get automatic update settings of a server",
        method="GET",
        path="/servers/{serverId}/settings/autoupdate",
        params=(SERVER_ID,),
    ),
    EndpointTool(
        name="update_autoupdate_settings",
        description="Update automatic update settings of a server",
        method="PATCH",
        path="/servers/{serverId}/settings/autoupdate",
        params=(
            SERVER_ID,
            body("softwareUpdate", "boolean", "Enable automatic software updates"),
            body("securityUpdate", "boolean", "Enable automatic security updates"),
        ),
    ),
    EndpointTool(
        name="list_php_versions",
        description="List PHP versions installed on a server",
        method="GET",
        path="/servers/{serverId}/php/version",
        params=(SERVER_ID,),
    ),
    EndpointTool(
        name="change_php_cli_version",
        description="Change the PHP CLI version of a server",
        method="PATCH",
        path="/servers/{serverId}/php/cli",
        params=(
            SERVER_ID,
            body("phpVersion", "string", 'PHP version (e.g., "php81rc")', required=True),
        ),
    ),
)
