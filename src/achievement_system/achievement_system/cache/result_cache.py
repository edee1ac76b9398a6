from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Hashable, Optional

from ..core.constants import DEFAULT_CACHE_TTL_SECONDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    written_at: float


class ResultCache:
    """Time-to-live cache in front of target resolution and achievement queries.

    One instance per process, passed by reference. Entries are valid while
    ``now - written_at < ttl`` and are simply overwritten after that; there is
    no other eviction. No locking: two concurrent misses on one key may both
    compute, and the last write wins.
    """

    def __init__(self, ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS, *, clock: Optional[Callable[[], float]] = None):
        self.ttl_seconds = float(ttl_seconds)
        self._clock = clock or time.monotonic
        self._entries: Dict[Hashable, CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def _fresh(self, key: Hashable) -> Optional[CacheEntry]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.written_at < self.ttl_seconds:
            return entry
        return None

    def get(self, key: Hashable, default: Any = None) -> Any:
        entry = self._fresh(key)
        return entry.value if entry is not None else default

    def put(self, key: Hashable, value: Any) -> None:
        self._entries[key] = CacheEntry(value=value, written_at=self._clock())

    async def get_or_compute(self, key: Hashable, compute: Callable[[], Awaitable[Any]]) -> Any:
        entry = self._fresh(key)
        if entry is not None:
            logger.debug("cache hit %s", key)
            return entry.value

        logger.debug("cache miss %s", key)
        value = await compute()
        self.put(key, value)
        return value
