"""MCP tool reporting occupancy of the shared config cache."""

from __future__ import annotations

from typing import Any, Dict

from mcp.server.fastmcp import FastMCP

from core.cache import BoundedGroupCache


def register(mcp: FastMCP, *, cache: BoundedGroupCache) -> None:
    @mcp.tool(name="cache_info")
    async def cache_info() -> Dict[str, Any]:
        """Return {"size", "maxsize"} for the cache."""
        return cache.info().to_dict()
