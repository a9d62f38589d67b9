"""RunCloud MCP server: exposes the RunCloud API v2 as MCP tools."""

__version__ = "1.0.0"
