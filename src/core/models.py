"""Immutable dataclasses shared by the cache and the MCP tools.

CacheInfo is a point-in-time snapshot of cache occupancy; it carries no
references to entries.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Union


GroupId = Union[int, str]


@dataclass(frozen=True)
class CacheInfo:
    """Occupancy snapshot of a BoundedGroupCache.

    Fields:
    - size: number of live entries
    - maxsize: fixed capacity (0 means caching is disabled)
    """

    size: int
    maxsize: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
