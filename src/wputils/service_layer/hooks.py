"""Hook sequencing and AJAX callback registration."""

from collections.abc import Callable, Iterable
from typing import Any

from wputils.interfaces.hooks import HookRegistry

AJAX_ACTION_PREFIX = "wp_ajax_"
AJAX_NOPRIV_ACTION_PREFIX = "wp_ajax_nopriv_"


def apply_filters_sequence(
    hook_names: Iterable[str], *args: Any, hooks: HookRegistry
) -> Any:
    """Pass a value through several filter hooks in turn.

    Short for ``apply_filters("b", apply_filters("a", value, *extra), *extra)``.
    Hooks without callbacks are skipped.

    Args:
        hook_names: Filter hooks, in order.
        *args: Extra arguments for every filter, followed by the value to
            filter as the last positional argument.
        hooks: The hook registry.

    Returns:
        The filtered value, or None when no value was given.
    """
    *extra, value = args or (None,)
    for hook in hook_names:
        if hooks.has_filter(hook):
            value = hooks.apply_filters(hook, value, *extra)
    return value


def do_actions_sequence(
    hook_names: Iterable[str], *args: Any, hooks: HookRegistry
) -> None:
    """Fire several action hooks in turn with the same arguments."""
    for hook in hook_names:
        if hooks.has_action(hook):
            hooks.do_action(hook, *args)


def register_ajax_callback(
    action: str,
    generic_callback: Callable[..., Any],
    logged_in_callback: Callable[..., Any] | None = None,
    *,
    hooks: HookRegistry,
) -> bool:
    """Register AJAX handlers for anonymous and logged-in requests.

    Args:
        action: AJAX action name.
        generic_callback: Handler for anonymous requests, and for logged-in
            requests unless *logged_in_callback* is given.
        logged_in_callback: Handler for logged-in requests.
        hooks: The hook registry.

    Returns:
        bool: False, registering nothing, if *action* is empty or
        *generic_callback* is not callable.
    """
    if not action or not callable(generic_callback):
        return False
    if not callable(logged_in_callback):
        logged_in_callback = generic_callback
    hooks.add_action(f"{AJAX_NOPRIV_ACTION_PREFIX}{action}", generic_callback)
    hooks.add_action(f"{AJAX_ACTION_PREFIX}{action}", logged_in_callback)
    return True
