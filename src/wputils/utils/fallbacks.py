"""Fallback resolution and small control-flow helpers.

The ``fallback*`` family picks the first acceptable value from a series of
candidates, where "acceptable" is either non-emptiness (see
`wputils.utils.values.is_empty_value`) or a caller-supplied predicate. Every
variadic helper also accepts a single list of candidates (see
`wputils.utils.arrays.resolve_arglist`).

Mutable state is always owned by the caller: `Ref` stands in for a variable
passed by reference, and `Flag` is an explicit re-entrancy guard.
"""

import contextlib
import functools
import io
import logging
import pprint
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, NamedTuple, TypeVar

from wputils.domain.errors import InvalidArgumentError

from .arrays import resolve_arglist
from .values import not_empty

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _require_callable(candidate: Any, role: str) -> None:
    if not callable(candidate):
        raise InvalidArgumentError(f"{role} must be callable, got {candidate!r}")


def fallback(*values: Any) -> Any:
    """Return the first non-empty value, or the last value.

    Examples:
        ``fallback(0, "", None, "x", "y") == "x"``
        ``fallback(0, "", None) is None``
        ``fallback(["", "b"]) == "b"``

    Returns:
        The first non-empty candidate; the last candidate if all are empty;
        None if there are no candidates.
    """
    return fallback_until(not_empty, *values)


def fallback_until(validation_callback: Callable[[Any], Any], *values: Any) -> Any:
    """Return the first value that passes *validation_callback*, or the last value.

    Args:
        validation_callback: Predicate applied to each candidate in order.
        *values: Candidates, or a single list of candidates.

    Returns:
        The first passing candidate; the last candidate if none pass; None if
        there are no candidates.

    Raises:
        InvalidArgumentError: If *validation_callback* is not callable.
    """
    _require_callable(validation_callback, "Validation callback")
    result = None
    for result in resolve_arglist(values):
        if validation_callback(result):
            return result
    return result


@dataclass
class Ref(Generic[T]):
    """A mutable cell, used where a helper assigns to the caller's variable."""

    value: T


def fallback_assign(
    subject: Ref[Any], validation_callback: Callable[[Any], Any], *values: Any
) -> Any:
    """Validate ``subject.value``, replacing it with the first passing fallback.

    ``subject.value`` itself is tried first, then each fallback. The first
    passing value is committed; if none pass, the last fallback is committed.

    Args:
        subject: Cell holding the value to test and override.
        validation_callback: Predicate deciding whether a value is acceptable.
        *values: Fallbacks, or a single list of fallbacks.

    Returns:
        The value committed to ``subject.value``.

    Raises:
        InvalidArgumentError: If *validation_callback* is not callable.
    """
    _require_callable(validation_callback, "Validation callback")
    for value in [subject.value, *resolve_arglist(values)]:
        subject.value = value
        if validation_callback(value):
            break
    return subject.value


def fallback_progression(
    validation_callback: Callable[[Any], Any], *progressive_callbacks: Any
) -> Any:
    """Run callbacks in order until one returns a value that passes validation.

    Callbacks are evaluated lazily: once a result passes, no later callback
    runs. Non-callable entries are skipped.

    Args:
        validation_callback: Predicate applied to each result.
        *progressive_callbacks: Zero-argument callables, or a single list of them.

    Returns:
        The first passing result, the last computed result, or None if no
        callback ran.

    Raises:
        InvalidArgumentError: If *validation_callback* is not callable.
    """
    _require_callable(validation_callback, "Validation callback")
    result = None
    for callback in resolve_arglist(progressive_callbacks):
        if not callable(callback):
            continue
        result = callback()
        if validation_callback(result):
            return result
    return result


def prefill(func: Callable[..., T], *args: Any, **kwargs: Any) -> Callable[..., T]:
    """Return a copy of *func* with leading arguments prefilled.

    Raises:
        InvalidArgumentError: If *func* is not callable.
    """
    _require_callable(func, "Prefilled function")
    return functools.partial(func, *args, **kwargs)


# --- Flag guards ---


@dataclass
class Flag:
    """An explicit, caller-owned boolean guard.

    Shared between the wrappers produced by `flag_block` / `flag_pass` to
    prevent re-entrant hook callbacks.
    """

    raised: bool = False


def _blocked_result(args: tuple[Any, ...], is_filter: bool) -> Any:
    return args[0] if is_filter and args else None


def flag_block(
    flag: Flag, func: Callable[..., Any], is_filter: bool = False
) -> Callable[..., Any]:
    """Wrap *func* so it only runs while *flag* is lowered.

    The flag is raised for the duration of the call, so recursive calls
    through the wrapper are blocked, and restored afterwards (also when
    *func* raises).

    Args:
        flag: Guard shared by cooperating wrappers.
        func: Function to guard.
        is_filter: When blocked, return the first positional argument instead
            of None (filter callbacks must hand their value back).

    Returns:
        The guarded wrapper.
    """
    _require_callable(func, "Guarded function")

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if flag.raised:
            return _blocked_result(args, is_filter)
        flag.raised = True
        try:
            return func(*args, **kwargs)
        finally:
            flag.raised = False

    return wrapper


def flag_pass(
    flag: Flag, func: Callable[..., Any], is_filter: bool = False
) -> Callable[..., Any]:
    """Wrap *func* so it only runs while *flag* is raised.

    Args:
        flag: Guard that enables the wrapper.
        func: Function to guard.
        is_filter: When blocked, return the first positional argument instead of None.

    Returns:
        The guarded wrapper. The flag is left untouched.
    """
    _require_callable(func, "Guarded function")

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if not flag.raised:
            return _blocked_result(args, is_filter)
        return func(*args, **kwargs)

    return wrapper


# --- Debugging aids ---


def log_val(*values: Any) -> None:
    """Write a pretty-printed dump of *values* to the debug log."""
    logger.debug("log_val:\n%s", pprint.pformat(values))


class CapturedOutput(NamedTuple):
    """Printed output and return value of a captured call."""

    output: str
    returned: Any


def capture_output(
    output_fn: Callable[..., Any], *args: Any, output_only: bool = True
) -> str | CapturedOutput:
    """Call *output_fn* while capturing everything it prints to stdout.

    Args:
        output_fn: Function to call.
        *args: Arguments for *output_fn*.
        output_only: Return only the captured text.

    Returns:
        The captured text, or a `CapturedOutput` with the return value too.

    Raises:
        InvalidArgumentError: If *output_fn* is not callable.
    """
    _require_callable(output_fn, "Output function")
    buffer = io.StringIO()
    with contextlib.redirect_stdout(buffer):
        returned = output_fn(*args)
    if output_only:
        return buffer.getvalue()
    return CapturedOutput(output=buffer.getvalue(), returned=returned)
