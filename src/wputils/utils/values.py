"""Scalar value helpers: emptiness, clamping, numeric parsing, comparison.

``is_empty_value`` is the single emptiness rule used throughout wputils
(``fallback``, ``array_clear_empty``, ``html_attrs`` and friends), so it is
pinned down explicitly instead of relying on Python truthiness, which custom
objects may override.
"""

import locale
import re
from collections.abc import Callable, Mapping, Sized
from typing import Any

_LEADING_INT = re.compile(r"^\s*[+-]?\d+")
_LEADING_FLOAT = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_NUMERIC_STR = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*$")


def is_empty_value(value: Any) -> bool:
    """Return True if *value* counts as empty.

    Empty values are ``None``, ``False``, numeric zero, empty strings/bytes,
    and sized collections with no items. Every other object is non-empty,
    regardless of any ``__bool__`` it defines.

    Args:
        value: Any value.

    Returns:
        bool: Whether the value is empty.
    """
    if value is None:
        return True
    if isinstance(value, (bool, int, float, complex)):
        return value == 0
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def not_empty(value: Any) -> bool:
    """Negation of `is_empty_value`, usable as a predicate."""
    return not is_empty_value(value)


def pass_through(value: Any) -> Any:
    """Return *value* unchanged."""
    return value


def is_not_null(value: Any) -> bool:
    """Return True if *value* is not None."""
    return value is not None


def is_numeric(value: Any) -> bool:
    """Return True for real numbers and strings that spell one.

    Booleans are not numeric. Strings may carry leading whitespace, a sign,
    a fraction and an exponent (``" -1.5e3"``).
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if isinstance(value, str):
        return _NUMERIC_STR.match(value) is not None
    return False


def min_max(num: float, minimum: float, maximum: float) -> float:
    """Clamp *num* to the closed range [minimum, maximum].

    Args:
        num: Value to clamp.
        minimum: Lower bound.
        maximum: Upper bound.

    Returns:
        The clamped value. If ``minimum > maximum`` the lower bound wins.
    """
    return max(min(num, maximum), minimum)


def numval(numeric_str: str) -> int | float:
    """Parse the leading number of a string.

    The result is a float when the locale's decimal point occurs anywhere in
    the string, otherwise an int. Unparsable input yields ``0`` (or ``0.0``).

    Args:
        numeric_str: Text starting with a number, e.g. ``"12px"`` or ``"1.5em"``.

    Returns:
        int | float: The parsed number.
    """
    decimal_point = locale.localeconv()["decimal_point"] or "."
    if decimal_point in numeric_str:
        normalized = numeric_str.replace(decimal_point, ".")
        if match := _LEADING_FLOAT.match(normalized):
            return float(match.group())
        return 0.0
    if match := _LEADING_INT.match(numeric_str):
        return int(match.group())
    return 0


def compare_exact(a: Any, b: Any) -> int:
    """Three-way comparison that only reports equality for same-typed values.

    Returns:
        int: ``0`` if *a* and *b* are equal and of the same type, otherwise
        ``-1`` when ``a < b`` and ``1`` in every other case.
    """
    if type(a) is type(b) and a == b:
        return 0
    return -1 if a < b else 1


def generate_compare_by_key(
    key: int | str, callback: Callable[[Any, Any], int] | None = None
) -> Callable[[Any, Any], int]:
    """Build a comparator over mappings (or objects) by the value of *key*.

    The comparator is suitable for `functools.cmp_to_key`.

    Args:
        key: Mapping key or attribute name to compare by.
        callback: Optional comparator for the extracted values.

    Returns:
        A function ``(a, b) -> int``.
    """

    def _value(item: Any) -> Any:
        if isinstance(item, Mapping):
            return item[key]
        return getattr(item, str(key))

    def compare(a: Any, b: Any) -> int:
        a_val, b_val = _value(a), _value(b)
        if callback is not None:
            return callback(a_val, b_val)
        if a_val == b_val:
            return 0
        return -1 if a_val < b_val else 1

    return compare
