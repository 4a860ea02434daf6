"""MCP tools that read values from the shared config cache.

Registers 'cache_get' and 'cache_get_time_aware'. A miss (absent key,
group mismatch, or outside the validity window) is reported as
found=False rather than an error.
"""

from __future__ import annotations

import time
from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP

from core.cache import BoundedGroupCache
from core.inputs import normalize_key, normalize_timestamp
from core.models import GroupId

# Distinguishes a miss from a cached None
_MISSING = object()


def _result(key: str, value: Any) -> Dict[str, Any]:
    if value is _MISSING:
        return {"key": key, "found": False, "value": None}
    return {"key": key, "found": True, "value": value}


def register(mcp: FastMCP, *, cache: BoundedGroupCache) -> None:
    @mcp.tool(name="cache_get")
    async def cache_get(key: str, group_id: GroupId = 0) -> Dict[str, Any]:
        """Read a value written with the same group id.

        Returns:
          {"key", "found", "value"}; value is None when found is False.

        Raises:
          ValidationError if key is empty.
        """
        k = normalize_key(key)
        return _result(k, cache.get(k, group_id, _MISSING))

    @mcp.tool(name="cache_get_time_aware")
    async def cache_get_time_aware(
        key: str,
        now: Optional[float] = None,
        group_id: GroupId = 0,
    ) -> Dict[str, Any]:
        """Read a time-aware value as of `now` (default: current wall clock).

        Returns:
          {"key", "found", "value"}; value is None when found is False.

        Raises:
          ValidationError for an empty key or a non-numeric now.
        """
        k = normalize_key(key)
        ts = time.time() if now is None else normalize_timestamp(now, "now")
        return _result(k, cache.get_time_aware(k, ts, group_id, _MISSING))
