"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (e.g.
CACHE_MAXSIZE, LOG_LEVEL, SERVER_NAME).
"""

from __future__ import annotations

import os


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


# Cache capacity; negative values are left for the cache to reject and report
CACHE_MAXSIZE = _env_int("CACHE_MAXSIZE", 100)

# Logging
LOG_LEVEL = _env_str("LOG_LEVEL", "INFO").upper()

# MCP server identity
SERVER_NAME = _env_str("SERVER_NAME", "config-cache-mcp")
