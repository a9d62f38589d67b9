"""Script installer tools (WordPress, Joomla, ...)."""

from __future__ import annotations

from runcloud_mcp.tools.base import SERVER_ID, WEBAPP_ID, EndpointTool, body, path_id


SCRIPTS = ("wordpress", "joomla", "drupal", "phpmyadmin", "prestashop", "magento")
INSTALLER_ID = path_id("installerId", "The ID of the script installer")

TOOLS = (
    EndpointTool(
        name="install_script",
        description="Install a script (WordPress, Joomla, etc.) on a web application",
        method="POST",
        path="/servers/{serverId}/webapps/{webappId}/installer",
        params=(
            SERVER_ID,
            WEBAPP_ID,
            body("name", "string", "Script to install", required=True, enum=SCRIPTS),
            body("username", "string", "Admin username", required=True),
            body("email", "string", "Admin email", required=True),
            body("password", "string", "Admin password", required=True),
            body("title", "string", "Site title"),
            body("locale", "string", "Locale (e.g., en_US)"),
        ),
    ),
    EndpointTool(
        name="get_script_installer",
        description="Get a script installer of a web application",
        method="GET",
        path="/servers/{serverId}/webapps/{webappId}/installer/{installerId}",
        params=(SERVER_ID, WEBAPP_ID, INSTALLER_ID),
    ),
    EndpointTool(
        name="remove_script_installer",
        description="Remove a script installer from a web application",
        method="DELETE",
        path="/servers/{serverId}/webapps/{webappId}/installer/{installerId}",
        params=(SERVER_ID, WEBAPP_ID, INSTALLER_ID),
    ),
)
