"""Helpers over loosely shaped "arrays": lists, tuples, and ordered mappings.

Every helper accepts either a sequence (viewed as ``dict(enumerate(seq))``)
or a mapping, so callers can pass "list or dict" values without normalizing
them first. Strings and bytes are never treated as containers.

Results follow the shape of the operation rather than the input: key
filtering returns a ``dict`` keyed like the input, flattening returns a
``list``.
"""

from collections.abc import Callable, Iterable, Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any, TypeAlias
from urllib.parse import parse_qsl

from wputils.domain.errors import InvalidArgumentError

from .values import is_empty_value, is_numeric, min_max

Array = list[Any] | tuple[Any, ...] | Mapping[Any, Any]

MAX_CALLBACK_ARGS = 3  # value, key, array


# --- Internal shape helpers ---


def is_container(value: Any) -> bool:
    """Return True if *value* is a list, tuple or mapping."""
    return isinstance(value, (list, tuple, Mapping))


def array_items(array: Array) -> list[tuple[Any, Any]]:
    """Return ``(key, value)`` pairs, using positions as keys for sequences."""
    if isinstance(array, Mapping):
        return list(array.items())
    return list(enumerate(array))


def array_values(array: Array) -> list[Any]:
    """Return the values of *array* as a list, discarding keys."""
    if isinstance(array, Mapping):
        return list(array.values())
    return list(array)


# --- Argument resolution ---


def resolve_arglist(arglist: Iterable[Any]) -> list[Any]:
    """Resolve a variadic argument list that may hold a single collection.

    Lets variadic helpers be called as ``f(a, b, c)`` or ``f([a, b, c])``.

    Args:
        arglist: The positional values a variadic function received.

    Returns:
        list: The values of the sole argument when exactly one non-empty
        container was supplied; otherwise the original values.
    """
    arglist = list(arglist)
    if len(arglist) == 1 and is_container(arglist[0]) and len(arglist[0]) > 0:
        return array_values(arglist[0])
    return arglist


def unwrap(value: Any, limit: int = -1) -> Any:
    """Unwrap single-element containers.

    Repeats until left with a non-container value, or a container with 0 or
    2+ elements, or until *limit* layers have been removed. A single-entry
    mapping unwraps to its sole value.

    Args:
        value: Value to potentially unwrap.
        limit: Max number of layers to unwrap. Any negative value means no limit.

    Returns:
        The unwrapped value.
    """
    limit = max(limit, -1)
    count = 0
    while count != limit and is_container(value) and len(value) == 1:
        value = array_values(value)[0]
        count += 1
    return value


# --- Key filtering and shaping ---


def array_flatten(array: Array) -> list[Any]:
    """Flatten nested containers depth-first into a list of leaf values.

    Keys are discarded at every level.
    """
    output: list[Any] = []
    for value in array_values(array):
        if is_container(value):
            output.extend(array_flatten(value))
        else:
            output.append(value)
    return output


def array_include_keys(array: Array, *included_keys: Any) -> dict[Any, Any]:
    """Return only the entries whose keys are listed.

    Args:
        array: Source list or mapping.
        *included_keys: Keys, or (nested) lists of keys, to keep.

    Returns:
        dict: The kept entries in their original order.
    """
    keys = array_flatten(resolve_arglist(included_keys))
    return {key: value for key, value in array_items(array) if key in keys}


def array_exclude_keys(array: Array, *excluded_keys: Any) -> dict[Any, Any]:
    """Return only the entries whose keys are not listed.

    Args:
        array: Source list or mapping.
        *excluded_keys: Keys, or (nested) lists of keys, to drop.

    Returns:
        dict: The remaining entries in their original order.
    """
    keys = array_flatten(resolve_arglist(excluded_keys))
    return {key: value for key, value in array_items(array) if key not in keys}


def array_nth(array: Array, n: int) -> Any:
    """Get the value at position *n*.

    Negative positions count back from the end. Out-of-range positions are
    clamped to the first or last element instead of raising.

    Returns:
        The value, or None when *array* is empty.
    """
    values = array_values(array)
    if not values:
        return None
    n = min_max(n, -len(values), len(values) - 1)
    return values[n]


def _callback_args(
    value: Any, key: Any, array: Array, callback_args_count: int
) -> tuple[Any, ...]:
    count = min_max(callback_args_count, 0, MAX_CALLBACK_ARGS)
    return (value, key, array)[:count]


def array_some(
    array: Array, callback: Callable[..., Any], callback_args_count: int = 3
) -> bool:
    """Check if any entry satisfies *callback*.

    Args:
        array: List or mapping to search.
        callback: Predicate passed the first *callback_args_count* of
            ``(value, key, array)``.
        callback_args_count: Number of arguments passed, between 1 and 3.

    Returns:
        bool: True on the first satisfying entry; remaining entries are not visited.
    """
    for key, value in array_items(array):
        if callback(*_callback_args(value, key, array, callback_args_count)):
            return True
    return False


@dataclass(frozen=True)
class Found:
    """A successful `array_find` result."""

    key: Any
    value: Any


def _get_not_found() -> "_NotFoundType":
    # Factory used by pickle to retrieve the one true instance.
    return NOT_FOUND


@dataclass(frozen=True)
class _NotFoundType:
    """Sentinel returned by `array_find` when nothing matches.

    Distinct from a `Found` whose value happens to be falsy.
    """

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_not_found, ())


NOT_FOUND = _NotFoundType()

FindResult: TypeAlias = Found | _NotFoundType


def array_find(
    array: Array, callback: Callable[..., Any], callback_args_count: int = 3
) -> FindResult:
    """Get the first entry that satisfies *callback*.

    Args:
        array: List or mapping to search.
        callback: Predicate passed the first *callback_args_count* of
            ``(value, key, array)``.
        callback_args_count: Number of arguments passed, between 1 and 3.

    Returns:
        Found | NOT_FOUND: The matching key/value pair, or the falsy
        ``NOT_FOUND`` sentinel.
    """
    for key, value in array_items(array):
        if callback(*_callback_args(value, key, array, callback_args_count)):
            return Found(key=key, value=value)
    return NOT_FOUND


def array_force_assoc(array: Array) -> dict[Any, Any]:
    """Replace numeric keys with the value stored under them.

    ``[10, "x"]`` becomes ``{10: 10, "x": "x"}`` and ``{0: "a", "b": 1}``
    becomes ``{"a": "a", "b": 1}``. Useful to normalize "list or mapping"
    option inputs.
    """
    return {
        (value if is_numeric(key) else key): value
        for key, value in array_items(array)
    }


def array_map_keys(
    new_key_cb: Callable[..., Any] | str,
    array: Array,
    key_first: bool = True,
    value_scoped_cb: bool = False,
) -> dict[Any, Any]:
    """Re-key an array with a callback that returns the new key for each entry.

    Args:
        new_key_cb: Callback, or the name of a method on each value when
            *value_scoped_cb* is set.
        array: Source list or mapping.
        key_first: Pass ``(key, value, array)`` rather than ``(value, key, array)``.
        value_scoped_cb: Treat *new_key_cb* as a method name looked up on each value.

    Returns:
        dict: Values under their new keys. Later entries win on key collisions.

    Raises:
        InvalidArgumentError: If the callback cannot be called.
    """
    output: dict[Any, Any] = {}
    for key, value in array_items(array):
        callback = (
            getattr(value, str(new_key_cb), None) if value_scoped_cb else new_key_cb
        )
        if not callable(callback):
            raise InvalidArgumentError(f"Key callback {new_key_cb!r} is not callable")
        args = (key, value, array) if key_first else (value, key, array)
        output[callback(*args)] = value
    return output


def array_clear_empty(array: Array, null_only: bool = False) -> list[Any]:
    """Remove empty values, returning the remaining values as a list.

    Args:
        array: Source list or mapping.
        null_only: Only remove ``None`` values.
    """
    return [
        value
        for value in array_values(array)
        if (null_only and value is not None) or not is_empty_value(value)
    ]


def assert_array(value: Any, wrap_null: bool = False) -> list[Any] | dict[Any, Any]:
    """Coerce a value to a list or dict.

    Lists and dicts pass through, other sequences and mappings are copied,
    ``None`` becomes ``[]`` (or ``[None]`` with *wrap_null*), and any other
    value is wrapped in a one-element list.
    """
    if isinstance(value, (list, dict)):
        return value
    if isinstance(value, tuple):
        return list(value)
    if isinstance(value, Mapping):
        return dict(value)
    if value is not None or wrap_null:
        return [value]
    return []


def array_pluck(array: MutableMapping[Any, Any] | list[Any], key: Any) -> Any:
    """Remove an entry from *array* in place and return its value.

    Returns:
        The removed value, or None if the key (or position) does not exist.
    """
    if isinstance(array, MutableMapping):
        return array.pop(key, None)
    if isinstance(key, int) and 0 <= key < len(array):
        return array.pop(key)
    return None


def _as_dict(value: Any) -> dict[Any, Any]:
    if is_container(value):
        return dict(array_items(value))
    return {0: value}


def _is_index(key: Any) -> bool:
    return isinstance(key, int) and not isinstance(key, bool)


def _merge_recursive(target: dict[Any, Any], source: dict[Any, Any]) -> None:
    for key, value in source.items():
        if _is_index(key):
            indices = [k for k in target if _is_index(k)]
            target[max(indices) + 1 if indices else 0] = value
        elif key in target:
            merged = _as_dict(target[key])
            _merge_recursive(merged, _as_dict(value))
            target[key] = _listify(merged)
        else:
            target[key] = value


def _listify(merged: dict[Any, Any]) -> list[Any] | dict[Any, Any]:
    if list(merged) == list(range(len(merged))):
        return list(merged.values())
    return merged


def array_concat(array: Any, *additions: Any) -> list[Any] | dict[Any, Any]:
    """Recursively merge arrays.

    Positional entries are appended and renumbered. Colliding string keys are
    merged recursively, or gathered into a list when either side is a scalar.
    Scalars are treated as one-element arrays.

    Returns:
        A list when the merged keys are exactly ``0..n-1``, otherwise a dict.
    """
    merged: dict[Any, Any] = {}
    for addition in (array, *additions):
        _merge_recursive(merged, _as_dict(addition))
    return _listify(merged)


def array_parallel(array: Array) -> dict[Any, Any]:
    """Create a mapping where each value is also its own key."""
    return {value: value for value in array_values(array)}


def array_key_adjacent(array: Array, key: Any, adjacence: int) -> Any:
    """Get the key at a position relative to *key*.

    Args:
        array: Source list or mapping.
        key: Key to look adjacent to.
        adjacence: Offset from the position of *key* (negative looks back).

    Returns:
        The adjacent key, or None if *key* is missing or the offset leaves the array.
    """
    keys = [k for k, _ in array_items(array)]
    if key not in keys:
        return None
    target = keys.index(key) + adjacence
    if 0 <= target < len(keys):
        return keys[target]
    return None


def _has_prop(obj: Any, prop: str) -> bool:
    if isinstance(obj, Mapping):
        return prop in obj
    return hasattr(obj, prop)


def _get_prop(obj: Any, prop: str) -> Any:
    if isinstance(obj, Mapping):
        return obj[prop]
    return getattr(obj, prop)


def array_object_vars(
    objects: Array, props: str | list[str] | tuple[str, ...], key_var: str = ""
) -> dict[Any, Any]:
    """Map objects (or mappings) to just the required properties.

    Args:
        objects: List or mapping of objects.
        props: A property name, or a list of names. Single-item lists are
            unwrapped to a single name.
        key_var: Optional property used as the key in the result.

    Returns:
        dict: Per object, either a dict of the listed properties that exist or
        the single property's value (None if missing).
    """
    props = unwrap(props)
    output: dict[Any, Any] = {}
    for key, obj in array_items(objects):
        if key_var and _has_prop(obj, key_var):
            key = _get_prop(obj, key_var)
        if is_container(props):
            output[key] = {
                prop: _get_prop(obj, prop)
                for prop in array_values(props)
                if _has_prop(obj, prop)
            }
        else:
            output[key] = _get_prop(obj, props) if _has_prop(obj, props) else None
    return output


def array_divergence(first: Array, second: Array) -> list[Any]:
    """Return the values found in only one of the two arrays.

    Values from *first* come before values from *second*; order is kept.
    """
    first_values, second_values = array_values(first), array_values(second)
    return [v for v in first_values if v not in second_values] + [
        v for v in second_values if v not in first_values
    ]


# --- Argument parsing ---


def parse_query_args(
    args: str | Mapping[str, Any] | object,
    defaults: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Merge user arguments into defaults.

    Args:
        args: A query string (``"a=1&b=2"``), a mapping, or an object whose
            public attributes are used.
        defaults: Values used for keys missing from *args*.

    Returns:
        dict: Defaults overridden by the parsed arguments.
    """
    if isinstance(args, str):
        parsed: dict[str, Any] = dict(
            parse_qsl(args.lstrip("?"), keep_blank_values=True)
        )
    elif isinstance(args, Mapping):
        parsed = dict(args)
    elif args is None:
        parsed = {}
    else:
        parsed = {k: v for k, v in vars(args).items() if not k.startswith("_")}
    return {**(defaults or {}), **parsed}


def parse_args(
    args: str | Mapping[str, Any] | object,
    defaults_and_allowed_keys: Array = (),
) -> dict[str, Any]:
    """Parse arguments and limit the result to a set of allowed keys.

    Args:
        args: Arguments to parse (see `parse_query_args`).
        defaults_and_allowed_keys: String keys give a default value and are
            allowed; string values stored under integer keys are allowed
            without a default. ``{"a": 1, 0: "b"}`` allows ``a`` (default 1)
            and ``b``.

    Returns:
        dict: Parsed arguments restricted to the allowed keys.
    """
    entries = array_items(defaults_and_allowed_keys)
    defaults = {key: value for key, value in entries if isinstance(key, str)}
    allowed_keys = []
    for key, value in entries:
        if key and isinstance(key, str):
            allowed_keys.append(key)
        elif value and isinstance(value, str):
            allowed_keys.append(value)
    parsed = parse_query_args(args, defaults)
    return array_include_keys(parsed, allowed_keys)
