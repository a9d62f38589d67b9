"""
描述: MCP Server 全局配置加载器
主要功能:
    - 统一管理 MCP Server 配置
    - 支持 YAML 文件加载与环境变量覆盖
    - 构建 RunCloud 凭证 (缺失时快速失败)
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field

from runcloud_mcp.errors import ConfigError


_ENV_PATTERN = re.compile(r"\$\{([^}]+)\}")

DEFAULT_BASE_URL = "https://manage.runcloud.io/api/v2"


# region 基础配置模型
class ServerSettings(BaseModel):
    """服务监听配置"""
    host: str = "0.0.0.0"
    port: int = 8081
    transport: Literal["stdio", "http"] = "stdio"


class RequestSettings(BaseModel):
    timeout: float = 30.0


class RunCloudSettings(BaseModel):
    """RunCloud API 配置"""
    api_key: str = ""
    api_secret: str = ""
    base_url: str = DEFAULT_BASE_URL
    request: RequestSettings = Field(default_factory=RequestSettings)


class ToolsSettings(BaseModel):
    enabled: list[str] = Field(default_factory=list)


class LoggingSettings(BaseModel):
    """日志系统配置"""
    level: str = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseModel):
    """MCP Server 配置聚合根"""
    server: ServerSettings = Field(default_factory=ServerSettings)
    runcloud: RunCloudSettings = Field(default_factory=RunCloudSettings)
    tools: ToolsSettings = Field(default_factory=ToolsSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@dataclass(frozen=True)
class RunCloudCredential:
    """进程级 RunCloud 凭证, 启动后不可变"""
    key: str
    secret: str
    base_url: str = DEFAULT_BASE_URL

    def __repr__(self) -> str:
        return f"RunCloudCredential(key='***', secret='***', base_url={self.base_url!r})"
# endregion


# region 配置加载逻辑
def _expand_env(value: Any) -> Any:
    if isinstance(value, str):
        def replace(match: re.Match[str]) -> str:
            expr = match.group(1)
            if ":-" in expr:
                key, default = expr.split(":-", 1)
                return os.getenv(key, default)
            return os.getenv(expr, "")

        return _ENV_PATTERN.sub(replace, value)
    if isinstance(value, list):
        return [_expand_env(item) for item in value]
    if isinstance(value, dict):
        return {key: _expand_env(val) for key, val in value.items()}
    return value


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return _expand_env(data)


def _set_nested(data: dict[str, Any], keys: list[str], value: Any) -> None:
    current = data
    for key in keys[:-1]:
        current = current.setdefault(key, {})
    current[keys[-1]] = value


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    mapping = {
        "RUNCLOUD_API_KEY": ["runcloud", "api_key"],
        "RUNCLOUD_API_SECRET": ["runcloud", "api_secret"],
        "RUNCLOUD_BASE_URL": ["runcloud", "base_url"],
        "RUNCLOUD_REQUEST_TIMEOUT": ["runcloud", "request", "timeout"],
        "MCP_TRANSPORT": ["server", "transport"],
        "MCP_HOST": ["server", "host"],
        "MCP_PORT": ["server", "port"],
        "LOG_LEVEL": ["logging", "level"],
        "LOG_FORMAT": ["logging", "format"],
    }
    for env_key, path in mapping.items():
        env_value = os.getenv(env_key)
        if env_value is not None and env_value != "":
            _set_nested(data, path, env_value)
    return data


def load_settings(config_path: str | None = None) -> Settings:
    path = Path(config_path or os.getenv("CONFIG_PATH", "config.yaml"))
    data = _load_yaml(path)
    data = _apply_env_overrides(data)
    return Settings.model_validate(data)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """获取单例配置对象"""
    return load_settings()


def resolve_credential(settings: Settings) -> RunCloudCredential:
    """
    从配置构建 RunCloud 凭证

    参数:
        settings: 全局配置对象

    返回:
        不可变凭证对象

    抛出:
        ConfigError: API Key 或 Secret 缺失
    """
    runcloud = settings.runcloud
    missing = []
    if not runcloud.api_key:
        missing.append("RUNCLOUD_API_KEY")
    if not runcloud.api_secret:
        missing.append("RUNCLOUD_API_SECRET")
    if missing:
        raise ConfigError(
            f"{' and '.join(missing)} {'is' if len(missing) == 1 else 'are'} required. "
            "Set them in the MCP client env configuration, a .env file, "
            "or the runcloud section of the config file."
        )
    return RunCloudCredential(
        key=runcloud.api_key,
        secret=runcloud.api_secret,
        base_url=(runcloud.base_url or DEFAULT_BASE_URL).rstrip("/"),
    )
# endregion
