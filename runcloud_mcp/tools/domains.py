"""Domain name tools for web applications."""

from __future__ import annotations

from runcloud_mcp.tools.base import SERVER_ID, WEBAPP_ID, EndpointTool, body, path_id


DOMAIN_ID = path_id("domainId", "The ID of the domain")

TOOLS = (
    EndpointTool(
        name="list_domains",
        description="List all domains for a web application",
        method="GET",
        path="/servers/{serverId}/webapps/{webappId}/domains",
        params=(SERVER_ID, WEBAPP_ID),
    ),
    EndpointTool(
        name="get_domain",
        description="Get a domain of a web application",
        method="GET",
        path="/servers/{serverId}/webapps/{webappId}/domains/{domainId}",
        params=(SERVER_ID, WEBAPP_ID, DOMAIN_ID),
    ),
    EndpointTool(
        name="add_domain",
        description="Add a domain to a web application",
        method="POST",
        path="/servers/{serverId}/webapps/{webappId}/domains",
        params=(
            SERVER_ID,
            WEBAPP_ID,
            body("name", "string", "Domain name", required=True),
            body("type", "string", "Domain type", enum=("primary", "alias", "redirect")),
            body("enableWww", "boolean", "Enable www subdomain"),
            body("wwwRedirect", "string", "WWW redirect type", enum=("none", "www", "non-www")),
        ),
    ),
    EndpointTool(
        name="delete_domain",
        description="Delete a domain from a web application",
        method="DELETE",
        path="/servers/{serverId}/webapps/{webappId}/domains/{domainId}",
        params=(SERVER_ID, WEBAPP_ID, DOMAIN_ID),
    ),
)
