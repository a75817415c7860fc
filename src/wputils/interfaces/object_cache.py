"""Interface for a grouped key-value object cache.

``get`` returns the `MISS` sentinel instead of None on a miss, so that
None, False and other falsy values can be cached.
"""

import abc
from dataclasses import dataclass
from typing import Any


def _get_miss() -> "_MissType":
    # Factory used by pickle to retrieve the one true instance.
    return MISS


@dataclass(frozen=True)
class _MissType:
    """Sentinel returned by `ObjectCache.get` for absent or expired entries."""

    def __bool__(self) -> bool:  # falsy to simplify conditionals
        return False

    def __repr__(self) -> str:
        return "MISS"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_miss, ())


# Singleton instance
MISS = _MissType()


class ObjectCache(abc.ABC):
    """Contract for a cache of arbitrary values, namespaced by group."""

    @abc.abstractmethod
    def get(self, key: str, group: str = "") -> Any:
        """Fetch a cached value.

        Args:
            key (str): Cache key.
            group (str): Namespace of the key.

        Returns:
            The cached value, or `MISS` if absent or expired.
        """

    @abc.abstractmethod
    def set(self, key: str, value: Any, group: str = "", ttl: float = 0) -> None:
        """Store a value, replacing any existing entry.

        Args:
            key (str): Cache key.
            value: Value to store.
            group (str): Namespace of the key.
            ttl (float): Lifetime in seconds; ``0`` or less never expires.
        """

    @abc.abstractmethod
    def delete(self, key: str, group: str = "") -> bool:
        """Remove an entry.

        Returns:
            bool: True if a live entry was removed.
        """
