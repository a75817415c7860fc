"""In-memory implementation of the HookRegistry interface."""

import itertools
import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any

from wputils.interfaces.hooks import DEFAULT_PRIORITY, HookRegistry

logger = logging.getLogger(__name__)


class InMemoryHookRegistry(HookRegistry):
    """Keeps callbacks per hook, ordered by (priority, registration order)."""

    def __init__(self) -> None:
        self._callbacks: defaultdict[str, list[tuple[int, int, Callable[..., Any]]]] = (
            defaultdict(list)
        )
        self._sequence = itertools.count()

    def _add(self, hook: str, callback: Callable[..., Any], priority: int) -> None:
        self._callbacks[hook].append((priority, next(self._sequence), callback))
        self._callbacks[hook].sort(key=lambda entry: entry[:2])

    def _ordered(self, hook: str) -> list[Callable[..., Any]]:
        return [callback for _, _, callback in self._callbacks.get(hook, [])]

    def add_action(
        self, hook: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY
    ) -> None:
        self._add(hook, callback, priority)

    def add_filter(
        self, hook: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY
    ) -> None:
        self._add(hook, callback, priority)

    def has_action(self, hook: str) -> bool:
        return bool(self._callbacks.get(hook))

    def has_filter(self, hook: str) -> bool:
        return bool(self._callbacks.get(hook))

    def do_action(self, hook: str, *args: Any) -> None:
        logger.debug("do_action %s", hook)
        for callback in self._ordered(hook):
            callback(*args)

    def apply_filters(self, hook: str, value: Any, *args: Any) -> Any:
        for callback in self._ordered(hook):
            value = callback(value, *args)
        return value
