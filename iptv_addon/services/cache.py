"""
In-memory caching layer for derived catalog data.
Provides TTL-based invalidation; nothing is persisted across restarts.
"""
import logging
import time
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class CacheService:
    """Key/value cache whose entries expire after a fixed TTL.

    Each key maps to a ``(value, expires_at)`` pair. ``set`` replaces the
    whole pair in one assignment, so a reader sees either the previous value
    or the new one, never a partially built value.
    """

    def __init__(self, ttl_seconds: float, clock: Optional[Callable[[], float]] = None):
        self.ttl_seconds = ttl_seconds
        self._clock = clock or time.monotonic
        self._entries: dict[str, tuple[Any, float]] = {}

    def get(self, key: str) -> Optional[Any]:
        """Get cached value if not expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() >= expires_at:
            # Only evict the entry we looked at; a concurrent set may have replaced it
            if self._entries.get(key) is entry:
                del self._entries[key]
            return None
        return value

    def set(self, key: str, value: Any, ttl_seconds: Optional[float] = None):
        """Set cached value with TTL."""
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        self._entries[key] = (value, self._clock() + ttl)

    def clear_expired(self) -> int:
        """Remove expired cache entries. Returns how many were dropped."""
        now = self._clock()
        expired = [key for key, (_, expires_at) in self._entries.items() if now >= expires_at]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug(f"Dropped {len(expired)} expired cache entries")
        return len(expired)

    def __len__(self) -> int:
        now = self._clock()
        return sum(1 for _, expires_at in self._entries.values() if now < expires_at)
