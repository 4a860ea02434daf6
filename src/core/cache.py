"""Bounded in-memory cache with LRU eviction and group invalidation.

Entries live in a fixed arena of slots linked into a recency list by
index. Reads may be scoped by a group id and, for time-aware entries, by
a [set_at, expires_at) validity window. Stale or mismatched entries are
never purged on read; the next write for that key overwrites them.

Not thread-safe: callers must serialize access.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Hashable, List, Optional, TypeVar

from core.log import get_logger
from core.models import CacheInfo

T = TypeVar("T")

DEFAULT_MAXSIZE = 100
NIL = -1

logger = get_logger("cache")


@dataclass(slots=True)
class CacheEntry(Generic[T]):
    # next points toward the oldest end, prev toward the youngest
    key: Hashable
    value: T
    set_at: float
    expires_at: float
    group_id: Any
    next: int = NIL
    prev: int = NIL


class BoundedGroupCache(Generic[T]):
    """Fixed-capacity LRU cache keyed by hashable keys.

    Notes:
        - maxsize must be a non-negative int; anything else falls back to
          DEFAULT_MAXSIZE and reports a warning through on_warning.
        - maxsize == 0 disables caching (all gets miss, all sets no-op).
        - Values are stored by reference, never copied.
    """

    def __init__(
        self,
        maxsize: Any = None,
        *,
        on_warning: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._warn = on_warning or logger.warning

        # bool is an int subclass but never a valid capacity
        if isinstance(maxsize, bool) or not isinstance(maxsize, int) or maxsize < 0:
            options = {"maxsize": maxsize}
            self._warn(f"no valid cache capacity given, defaulting to {DEFAULT_MAXSIZE}. {options!r}")
            maxsize = DEFAULT_MAXSIZE

        self._maxsize: int = maxsize
        self._entries: List[CacheEntry[T]] = []
        self._map: Dict[Hashable, int] = {}
        self._youngest = NIL
        self._oldest = NIL

    @property
    def maxsize(self) -> int:
        return self._maxsize

    @property
    def size(self) -> int:
        return len(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def info(self) -> CacheInfo:
        return CacheInfo(size=self.size, maxsize=self._maxsize)

    def set(self, key: Hashable, value: T, group_id: Any) -> None:
        self.set_time_aware(key, value, 0, 0, group_id)

    def set_time_aware(
        self,
        key: Hashable,
        value: T,
        now: float,
        expires_at: float,
        group_id: Any,
    ) -> None:
        if self._maxsize == 0:
            return

        idx = self._map.get(key)
        if idx is not None:
            entry = self._entries[idx]
        elif len(self._map) == self._maxsize:
            # Recycle the oldest slot under the new key
            idx = self._oldest
            entry = self._entries[idx]
            del self._map[entry.key]
            entry.key = key
            self._map[key] = idx
        else:
            idx = len(self._entries)
            self._entries.append(
                CacheEntry(key=key, value=value, set_at=now, expires_at=expires_at, group_id=group_id)
            )
            self._map[key] = idx
            self._push_youngest(idx)
            return

        entry.value = value
        entry.set_at = now
        entry.expires_at = expires_at
        entry.group_id = group_id
        self._make_youngest(idx)

    def get(self, key: Hashable, group_id: Any, default: Optional[T] = None) -> Optional[T]:
        idx = self._map.get(key)
        if idx is None:
            return default

        entry = self._entries[idx]
        if entry.group_id != group_id:
            return default

        self._make_youngest(idx)
        return entry.value

    def get_time_aware(
        self,
        key: Hashable,
        now: float,
        group_id: Any,
        default: Optional[T] = None,
    ) -> Optional[T]:
        idx = self._map.get(key)
        if idx is None:
            return default

        entry = self._entries[idx]
        # Valid window is [set_at, expires_at)
        if entry.group_id != group_id or now < entry.set_at or now >= entry.expires_at:
            return default

        self._make_youngest(idx)
        return entry.value

    def _push_youngest(self, idx: int) -> None:
        entry = self._entries[idx]
        entry.prev = NIL
        entry.next = self._youngest
        if self._youngest == NIL:
            self._oldest = idx
        else:
            self._entries[self._youngest].prev = idx
        self._youngest = idx

    def _make_youngest(self, idx: int) -> None:
        if idx == self._youngest:
            return

        entry = self._entries[idx]
        prev = entry.prev
        if idx == self._oldest:
            self._entries[prev].next = NIL
            self._oldest = prev
        else:
            self._entries[prev].next = entry.next
            self._entries[entry.next].prev = prev

        self._push_youngest(idx)
