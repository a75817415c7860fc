"""Interface for an action/filter hook registry."""

import abc
from collections.abc import Callable
from typing import Any

DEFAULT_PRIORITY = 10


class HookRegistry(abc.ABC):
    """Contract for named hooks with prioritized callbacks.

    Actions and filters share one namespace. Callbacks run in ascending
    priority; callbacks with equal priority run in registration order.
    """

    @abc.abstractmethod
    def add_action(
        self, hook: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY
    ) -> None:
        """Register *callback* to run when *hook* fires."""

    @abc.abstractmethod
    def add_filter(
        self, hook: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY
    ) -> None:
        """Register *callback* to transform values passed through *hook*."""

    @abc.abstractmethod
    def has_action(self, hook: str) -> bool:
        """Return True if any callback is registered for *hook*."""

    @abc.abstractmethod
    def has_filter(self, hook: str) -> bool:
        """Return True if any callback is registered for *hook*."""

    @abc.abstractmethod
    def do_action(self, hook: str, *args: Any) -> None:
        """Call every callback of *hook* with *args*."""

    @abc.abstractmethod
    def apply_filters(self, hook: str, value: Any, *args: Any) -> Any:
        """Pass *value* through every callback of *hook*.

        Each callback receives the current value followed by *args* and
        returns the new value.

        Returns:
            The filtered value; *value* itself if nothing is registered.
        """
