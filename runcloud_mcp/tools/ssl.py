"""
SSL certificate tools.

Certificate material is only sent for the custom provider.
"""

from __future__ import annotations

from runcloud_mcp.tools.base import SERVER_ID, WEBAPP_ID, EndpointTool, body, path_id


SSL_ID = path_id("sslId", "The ID of the SSL certificate")
CUSTOM = ("provider", "custom")

TOOLS = (
    EndpointTool(
        name="install_ssl",
        description="Install SSL certificate for a web application",
        method="POST",
        path="/servers/{serverId}/webapps/{webappId}/ssl/basic",
        params=(
            SERVER_ID,
            WEBAPP_ID,
            body("provider", "string", "SSL provider", required=True, enum=("letsencrypt", "custom")),
            body("enableHttp", "boolean", "Enable HTTP", default=False),
            body("enableHsts", "boolean", "Enable HSTS", default=False),
            body("sslCert", "string", "SSL certificate (for custom provider)", when=CUSTOM),
            body("sslKey", "string", "SSL key (for custom provider)", when=CUSTOM),
            body("sslCa", "string", "SSL CA certificate (for custom provider)", when=CUSTOM),
        ),
    ),
    EndpointTool(
        name="get_ssl_info",
        description="Get SSL certificate information",
        method="GET",
        path="/servers/{serverId}/webapps/{webappId}/ssl",
        params=(SERVER_ID, WEBAPP_ID),
    ),
    EndpointTool(
        name="update_ssl",
        description="Update HTTP and HSTS options of an installed SSL certificate",
        method="PATCH",
        path="/servers/{serverId}/webapps/{webappId}/ssl/{sslId}",
        params=(
            SERVER_ID,
            WEBAPP_ID,
            SSL_ID,
            body("enableHttp", "boolean", "Enable HTTP"),
            body("enableHsts", "boolean", "Enable HSTS"),
        ),
    ),
    EndpointTool(
        name="redeploy_ssl",
        description="Redeploy an SSL certificate",
        method="POST",
        path="/servers/{serverId}/webapps/{webappId}/ssl/{sslId}/redeploy",
        params=(SERVER_ID, WEBAPP_ID, SSL_ID),
    ),
    EndpointTool(
        name="uninstall_ssl",
        description="Uninstall an SSL certificate",
        method="DELETE",
        path="/servers/{serverId}/webapps/{webappId}/ssl/{sslId}",
        params=(SERVER_ID, WEBAPP_ID, SSL_ID),
    ),
    EndpointTool(
        name="get_advanced_ssl",
        description="Get advanced SSL status of a web application",
        method="GET",
        path="/servers/{serverId}/webapps/{webappId}/ssl/advanced",
        params=(SERVER_ID, WEBAPP_ID),
    ),
    EndpointTool(
        name="update_advanced_ssl",
        description="Switch advanced SSL mode of a web application",
        method="PATCH",
        path="/servers/{serverId}/webapps/{webappId}/ssl/advanced",
        params=(
            SERVER_ID,
            WEBAPP_ID,
            body("advancedSSL", "boolean", "Enable advanced SSL (per domain certificates)", required=True),
            body("autoSSL", "boolean", "Automatically issue certificates for new domains"),
        ),
    ),
)
