"""In-memory implementation of the ObjectCache interface."""

import time
from collections.abc import Callable
from typing import Any

from wputils.interfaces.object_cache import MISS, ObjectCache


class InMemoryObjectCache(ObjectCache):
    """Dictionary-backed cache with per-entry expiry.

    Expired entries are dropped lazily when read.

    Args:
        clock: Returns the current time in seconds; defaults to
            `time.monotonic`. Inject a fake clock to test expiry.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[tuple[str, str], tuple[Any, float | None]] = {}

    def get(self, key: str, group: str = "") -> Any:
        entry = self._entries.get((group, key))
        if entry is None:
            return MISS
        value, expires_at = entry
        if expires_at is not None and self._clock() >= expires_at:
            del self._entries[(group, key)]
            return MISS
        return value

    def set(self, key: str, value: Any, group: str = "", ttl: float = 0) -> None:
        expires_at = self._clock() + ttl if ttl > 0 else None
        self._entries[(group, key)] = (value, expires_at)

    def delete(self, key: str, group: str = "") -> bool:
        live = self.get(key, group) is not MISS
        self._entries.pop((group, key), None)
        return live
