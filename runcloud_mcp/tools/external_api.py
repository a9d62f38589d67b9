"""
描述: 第三方服务 API Key 工具集
主要功能:
    - 管理 DNS / 云服务商等外部 API 凭证
"""

from __future__ import annotations

from runcloud_mcp.tools.base import PAGE, EndpointTool, body, path_id, search


SERVICES = ("cloudflare", "linode", "digitalocean", "vultr", "aws", "upcloud")
API_KEY_ID = path_id("apiKeyId", "The ID of the external API key")

TOOLS = (
    EndpointTool(
        name="list_external_api_keys",
        description="List external API keys",
        method="GET",
        path="/settings/externalapi",
        params=(search("Search API keys by name"), PAGE),
    ),
    EndpointTool(
        name="get_external_api_key",
        description="Get an external API key",
        method="GET",
        path="/settings/externalapi/{apiKeyId}",
        params=(API_KEY_ID,),
    ),
    EndpointTool(
        name="create_external_api_key",
        description="Create an external API key",
        method="POST",
        path="/settings/externalapi",
        params=(
            body("name", "string", "Label for the API key", required=True),
            body("service", "string", "Third-party service", required=True, enum=SERVICES),
            body("username", "string", "Account username or email", required=True),
            body("secret", "string", "API secret or token", required=True),
        ),
    ),
    EndpointTool(
        name="update_external_api_key",
        description="Update an external API key",
        method="PATCH",
        path="/settings/externalapi/{apiKeyId}",
        params=(
            API_KEY_ID,
            body("name", "string", "Label for the API key"),
            body("username", "string", "Account username or email"),
            body("secret", "string", "API secret or token"),
        ),
    ),
    EndpointTool(
        name="delete_external_api_key",
        description="Delete an external API key",
        method="DELETE",
        path="/settings/externalapi/{apiKeyId}",
        params=(API_KEY_ID,),
    ),
)
