"""
描述: Web 应用工具集
主要功能:
    - Web 应用增删查、默认站点与重建
    - 创建时的 PHP-FPM / NGINX 默认值
    - 进程管理器为 dynamic 时才映射的调优字段
"""

from __future__ import annotations

from runcloud_mcp.tools.base import PAGE, SERVER_ID, WEBAPP_ID, EndpointTool, body, search


DEFAULT_PHP_VERSION = "php81rc"
PROCESS_MANAGERS = ("static", "ondemand", "dynamic")
DYNAMIC = ("processManager", "dynamic")


def _fpm_params(with_defaults: bool) -> tuple:
    """PHP-FPM 与 php.ini 调优字段; 部分更新接口不带默认值"""

    def param(name: str, type: str, description: str, default: object, **kwargs):
        if with_defaults:
            kwargs["default"] = default
        return body(name, type, description, **kwargs)

    return (
        param("processManager", "string", "PHP-FPM process manager", "ondemand", enum=PROCESS_MANAGERS),
        param("processManagerMaxChildren", "number", "Maximum number of child processes", 50),
        param("processManagerMaxRequests", "number", "Requests each child process serves before respawning", 500),
        param("processManagerStartServers", "number", "Child processes created on startup", 20, when=DYNAMIC),
        param("processManagerMinSpareServers", "number", "Minimum number of idle child processes", 10, when=DYNAMIC),
        param("processManagerMaxSpareServers", "number", "Maximum number of idle child processes", 30, when=DYNAMIC),
        param("timezone", "string", "PHP timezone", "UTC"),
        body("openBasedir", "string", "open_basedir restriction"),
        body("disableFunctions", "string", "Comma separated list of disabled PHP functions"),
        param("maxExecutionTime", "number", "max_execution_time in seconds", 30),
        param("maxInputTime", "number", "max_input_time in seconds", 60),
        param("maxInputVars", "number", "max_input_vars", 1000),
        param("memoryLimit", "number", "memory_limit in MB", 256),
        param("postMaxSize", "number", "post_max_size in MB", 256),
        param("uploadMaxFilesize", "number", "upload_max_filesize in MB", 256),
        param("sessionGcMaxlifetime", "number", "session.gc_maxlifetime in seconds", 1440),
        param("allowUrlFopen", "boolean", "allow_url_fopen", True),
    )


TOOLS = (
    EndpointTool(
        name="list_webapps",
        description="List all web applications on a server",
        method="GET",
        path="/servers/{serverId}/webapps",
        params=(SERVER_ID, search("Search web apps by name"), PAGE),
    ),
    EndpointTool(
        name="get_webapp",
        description="Get detailed information about a specific web application",
        method="GET",
        path="/servers/{serverId}/webapps/{webappId}",
        params=(SERVER_ID, WEBAPP_ID),
    ),
    EndpointTool(
        name="create_webapp",
        description="Create a new web application on a server",
        method="POST",
        path="/servers/{serverId}/webapps/custom",
        params=(
            SERVER_ID,
            body("name", "string", "Name of the web application", required=True),
            body("domainName", "string", "Domain name for the web application", required=True),
            body("user", "string", "System user for the web application", required=True),
            body("publicPath", "string", "Public path relative to the web application root"),
            body("phpVersion", "string", 'PHP version (e.g., "php80rc", "php81rc")', default=DEFAULT_PHP_VERSION),
            body("stack", "string", "Web server stack", enum=("hybrid", "nativenginx"), default="hybrid"),
            body("stackMode", "string", "Stack mode", enum=("production", "development"), default="production"),
            body("clickjackingProtection", "boolean", "Send X-Frame-Options header", default=True),
            body("xssProtection", "boolean", "Send X-XSS-Protection header", default=True),
            body("mimeSniffingProtection", "boolean", "Send X-Content-Type-Options header", default=True),
            *_fpm_params(with_defaults=True),
        ),
    ),
    EndpointTool(
        name="delete_webapp",
        description="Delete a web application",
        method="DELETE",
        path="/servers/{serverId}/webapps/{webappId}",
        params=(SERVER_ID, WEBAPP_ID),
    ),
    EndpointTool(
        name="set_webapp_default",
        description="Set a web application as default",
        method="POST",
        path="/servers/{serverId}/webapps/{webappId}/default",
        params=(SERVER_ID, WEBAPP_ID),
    ),
    EndpointTool(
        name="remove_webapp_default",
        description="Remove the default flag from a web application",
        method="DELETE",
        path="/servers/{serverId}/webapps/{webappId}/default",
        params=(SERVER_ID, WEBAPP_ID),
    ),
    EndpointTool(
        name="rebuild_webapp",
        description="Rebuild a web application",
        method="PATCH",
        path="/servers/{serverId}/webapps/{webappId}/rebuild",
        params=(SERVER_ID, WEBAPP_ID),
    ),
    EndpointTool(
        name="get_webapp_settings",
        description="Get PHP-FPM and NGINX settings of a web application",
        method="GET",
        path="/servers/{serverId}/webapps/{webappId}/settings",
        params=(SERVER_ID, WEBAPP_ID),
    ),
    EndpointTool(
        name="update_webapp_fpm_settings",
        description="Update PHP-FPM and NGINX settings of a web application (only supplied fields change)",
        method="PATCH",
        path="/servers/{serverId}/webapps/{webappId}/settings/fpmnginx",
        params=(
            SERVER_ID,
            WEBAPP_ID,
            body("stackMode", "string", "Stack mode", enum=("production", "development")),
            body("clickjackingProtection", "boolean", "Send X-Frame-Options header"),
            body("xssProtection", "boolean", "Send X-XSS-Protection header"),
            body("mimeSniffingProtection", "boolean", "Send X-Content-Type-Options header"),
            *_fpm_params(with_defaults=False),
        ),
    ),
    EndpointTool(
        name="change_webapp_php_version",
        description="Change the PHP version of a web application",
        method="PATCH",
        path="/servers/{serverId}/webapps/{webappId}/settings/php",
        params=(
            SERVER_ID,
            WEBAPP_ID,
            body("phpVersion", "string", 'PHP version (e.g., "php81rc")', required=True),
        ),
    ),
)
