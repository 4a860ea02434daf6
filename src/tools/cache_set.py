"""MCP tools that write values into the shared config cache.

Registers 'cache_set' (non-expiring) and 'cache_set_time_aware'
(valid from now until an absolute expiry) on a FastMCP instance.
"""

from __future__ import annotations

import time
from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP

from core.cache import BoundedGroupCache
from core.inputs import normalize_key, normalize_timestamp, resolve_expires_at
from core.models import GroupId


def register(mcp: FastMCP, *, cache: BoundedGroupCache) -> None:
    @mcp.tool(name="cache_set")
    async def cache_set(key: str, value: Any, group_id: GroupId = 0) -> Dict[str, Any]:
        """Store a value that never expires.

        Params:
          - key: cache key (required, non-empty).
          - value: any JSON value; stored as-is.
          - group_id: entries are only readable with the same group id.

        Returns:
          {"key", "size", "maxsize"} after the write.

        Raises:
          ValidationError if key is empty.
        """
        k = normalize_key(key)
        cache.set(k, value, group_id)
        return {"key": k, **cache.info().to_dict()}

    @mcp.tool(name="cache_set_time_aware")
    async def cache_set_time_aware(
        key: str,
        value: Any,
        expires_at: Optional[float] = None,
        ttl_seconds: Optional[float] = None,
        now: Optional[float] = None,
        group_id: GroupId = 0,
    ) -> Dict[str, Any]:
        """Store a value readable in the window [now, expires_at).

        Params:
          - key: cache key (required, non-empty).
          - value: any JSON value; stored as-is.
          - expires_at: absolute expiry timestamp (seconds).
          - ttl_seconds: alternative to expires_at, relative to now.
          - now: write timestamp; defaults to the current wall clock.
          - group_id: entries are only readable with the same group id.

        Returns:
          {"key", "size", "maxsize"} after the write.

        Raises:
          ValidationError for an empty key, non-numeric timestamps, or when
          not exactly one of expires_at/ttl_seconds is given.
        """
        k = normalize_key(key)
        ts = time.time() if now is None else normalize_timestamp(now, "now")
        expiry = resolve_expires_at(ts, expires_at, ttl_seconds)

        cache.set_time_aware(k, value, ts, expiry, group_id)
        return {"key": k, **cache.info().to_dict()}
