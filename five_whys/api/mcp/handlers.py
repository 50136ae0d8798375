"""Tool discovery route handlers."""

from typing import Any

from fastapi import APIRouter, HTTPException, Path

from five_whys.api.mcp.server import MCPToolServer
from five_whys.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/mcp/tools")


@router.get("")
async def list_tools() -> list[dict[str, Any]]:
    """List the tools this service exposes."""
    tools = MCPToolServer().list_tools()
    logger.debug("mcp_tools_listed", tool_count=len(tools))
    return tools


@router.get("/{name}")
async def get_tool(name: str = Path(..., description="Tool name")) -> dict[str, Any]:
    """Describe a single tool."""
    try:
        return MCPToolServer().get_tool(name)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown tool: {name}") from None
