"""MCP-style tool discovery for the five_whys tool."""

from five_whys.api.mcp.handlers import router
from five_whys.api.mcp.server import MCPToolServer

__all__ = ["MCPToolServer", "router"]
