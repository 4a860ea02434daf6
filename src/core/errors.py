from __future__ import annotations


class ConfigCacheError(Exception):
    """Base error for the config cache server."""


class ValidationError(ConfigCacheError):
    """Raised when tool input is invalid."""
