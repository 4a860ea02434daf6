"""Server bootstrap for the config cache MCP service.

Creates the FastMCP instance, builds the single shared cache, wires the
cache tools to it, and starts the MCP server (stdio transport).
"""

from mcp.server.fastmcp import FastMCP

from config import CACHE_MAXSIZE, LOG_LEVEL, SERVER_NAME
from core.cache import BoundedGroupCache
from core.log import configure_logging

from tools.cache_get import register as register_cache_get
from tools.cache_info import register as register_cache_info
from tools.cache_set import register as register_cache_set

configure_logging(LOG_LEVEL)

mcp = FastMCP(SERVER_NAME)


def register_tools() -> BoundedGroupCache:
    # One cache per process; FastMCP serves tools on a single event loop
    cache = BoundedGroupCache(CACHE_MAXSIZE)

    register_cache_set(mcp, cache=cache)
    register_cache_get(mcp, cache=cache)
    register_cache_info(mcp, cache=cache)
    return cache


cache = register_tools()


def main() -> None:
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
