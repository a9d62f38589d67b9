"""
描述: 服务器安全工具集
主要功能:
    - 防火墙规则增删查与部署
    - fail2ban 封禁 IP 查询与解封
"""

from __future__ import annotations

from runcloud_mcp.tools.base import PAGE, SERVER_ID, EndpointTool, body, path_id


RULE_ID = path_id("ruleId", "The ID of the firewall rule")

FIREWALL_TOOLS = (
    EndpointTool(
        name="get_firewall_rules",
        description="Get firewall rules for a server",
        method="GET",
        path="/servers/{serverId}/firewall",
        params=(SERVER_ID,),
    ),
    EndpointTool(
        name="get_firewall_rule",
        description="Get a firewall rule",
        method="GET",
        path="/servers/{serverId}/firewall/{ruleId}",
        params=(SERVER_ID, RULE_ID),
    ),
    EndpointTool(
        name="add_firewall_rule",
        description="Add a firewall rule",
        method="POST",
        path="/servers/{serverId}/firewall",
        params=(
            SERVER_ID,
            body("name", "string", "Name of the rule", required=True),
            body("type", "string", "Rule type", required=True, enum=("allow", "deny")),
            body("protocol", "string", "Protocol", required=True, enum=("tcp", "udp")),
            body("port", "string", "Port or port range", required=True),
            body("source", "string", "Source IP or CIDR"),
        ),
    ),
    EndpointTool(
        name="delete_firewall_rule",
        description="Delete a firewall rule",
        method="DELETE",
        path="/servers/{serverId}/firewall/{ruleId}",
        params=(SERVER_ID, RULE_ID),
    ),
    EndpointTool(
        name="deploy_firewall_rules",
        description="Deploy pending firewall rules to a server",
        method="PUT",
        path="/servers/{serverId}/firewall",
        params=(SERVER_ID,),
    ),
)

FAIL2BAN_TOOLS = (
    EndpointTool(
        name="list_blocked_ips",
        description="List IP addresses blocked by fail2ban",
        method="GET",
        path="/servers/{serverId}/security/fail2ban/blockedip",
        params=(SERVER_ID, PAGE),
    ),
    EndpointTool(
        name="unblock_ip",
        description="Remove an IP address from the fail2ban block list",
        method="DELETE",
        path="/servers/{serverId}/security/fail2ban/blockedip",
        params=(SERVER_ID, body("ip", "string", "IP address to unblock", required=True)),
    ),
)

TOOLS = FIREWALL_TOOLS + FAIL2BAN_TOOLS
