from runcloud_mcp.runcloud.client import RunCloudClient

__all__ = ["RunCloudClient"]
