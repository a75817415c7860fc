"""Unit tests for wputils.utils.arrays module."""

import pickle
from types import SimpleNamespace

import pytest

from wputils.domain.errors import InvalidArgumentError
from wputils.utils.arrays import (
    NOT_FOUND,
    Found,
    array_clear_empty,
    array_concat,
    array_divergence,
    array_exclude_keys,
    array_find,
    array_flatten,
    array_force_assoc,
    array_include_keys,
    array_key_adjacent,
    array_map_keys,
    array_nth,
    array_object_vars,
    array_parallel,
    array_pluck,
    array_some,
    assert_array,
    parse_args,
    parse_query_args,
    resolve_arglist,
    unwrap,
)

# pylint: disable=magic-value-comparison

# --- resolve_arglist / unwrap ---


@pytest.mark.parametrize(
    "arglist, expected",
    [
        ((1, 2, 3), [1, 2, 3]),
        (([1, 2, 3],), [1, 2, 3]),
        (({"a": 1, "b": 2},), [1, 2]),
        (([],), [[]]),
        (("abc",), ["abc"]),
        ((), []),
        (([1], [2]), [[1], [2]]),
    ],
)
def test_resolve_arglist(arglist, expected):
    """A sole non-empty container is expanded; anything else is kept as is."""
    assert resolve_arglist(arglist) == expected


@pytest.mark.parametrize(
    "value, limit, expected",
    [
        ([[["x"]]], -1, "x"),
        ([[["x"]]], 1, [["x"]]),
        ([[["x"]]], 0, [[["x"]]]),
        ({"only": {"inner": 5}}, -1, 5),
        ([1, 2], -1, [1, 2]),
        ([[1, 2]], -1, [1, 2]),
        ([], -1, []),
        ("text", -1, "text"),
    ],
)
def test_unwrap(value, limit, expected):
    """unwrap strips single-element layers up to the limit."""
    assert unwrap(value, limit) == expected


# --- Key filtering ---


def test_array_flatten_discards_keys():
    """Nested lists and mappings flatten depth-first into their leaf values."""
    assert array_flatten([1, [2, {"a": 3, "b": [4]}], (5,)]) == [1, 2, 3, 4, 5]


def test_array_include_and_exclude_keys():
    """Keys may be passed variadically or as nested lists."""
    data = {"a": 1, "b": 2, "c": 3}
    assert array_include_keys(data, "a", "c") == {"a": 1, "c": 3}
    assert array_include_keys(data, ["b", ["c"]]) == {"b": 2, "c": 3}
    assert array_exclude_keys(data, "a") == {"b": 2, "c": 3}
    assert array_exclude_keys(["x", "y", "z"], 1) == {0: "x", 2: "z"}


@pytest.mark.parametrize(
    "n, expected", [(0, "a"), (2, "c"), (-1, "c"), (-3, "a"), (10, "c"), (-10, "a")]
)
def test_array_nth_clamps(n, expected):
    """Out-of-range positions clamp to the ends."""
    assert array_nth(["a", "b", "c"], n) == expected


def test_array_nth_empty():
    """An empty array has no nth element."""
    assert array_nth([], 0) is None


# --- Searching ---


def test_array_some_stops_at_first_match():
    """array_some short-circuits after the first satisfying entry."""
    seen = []

    def check(value):
        seen.append(value)
        return value > 1

    assert array_some([1, 2, 3], check, 1)
    assert seen == [1, 2]
    assert not array_some([], check)


def test_array_some_passes_key_and_array():
    """With three callback arguments, keys and the array are available."""
    data = {"a": 1, "b": 2}
    assert array_some(data, lambda value, key, arr: key == "b" and arr is data)


def test_array_find_returns_key_and_value():
    """A match is reported with both its key and value."""
    result = array_find({"x": 0, "y": 5}, lambda value: value > 1, 1)
    assert result == Found(key="y", value=5)


def test_array_find_distinguishes_falsy_match_from_miss():
    """A falsy matching value is still a Found, unlike NOT_FOUND."""
    result = array_find([None, 0], lambda value, key: key == 1, 2)
    assert isinstance(result, Found)
    assert result.value == 0
    assert array_find([1, 2], lambda value: value > 5, 1) is NOT_FOUND


def test_not_found_sentinel():
    """NOT_FOUND is falsy, has a stable repr, and survives pickling."""
    assert not NOT_FOUND
    assert repr(NOT_FOUND) == "NOT_FOUND"
    assert pickle.loads(pickle.dumps(NOT_FOUND)) is NOT_FOUND


# --- Shaping ---


def test_array_force_assoc():
    """Values under numeric keys become their own keys."""
    assert array_force_assoc(["a", "b"]) == {"a": "a", "b": "b"}
    assert array_force_assoc({0: "a", "b": 1}) == {"a": "a", "b": 1}


def test_array_map_keys_key_first():
    """The callback receives (key, value, array) by default."""
    result = array_map_keys(lambda key, value, arr: f"{key}-{value}", ["x", "y"])
    assert result == {"0-x": "x", "1-y": "y"}


def test_array_map_keys_value_first():
    """key_first=False passes (value, key, array)."""
    result = array_map_keys(lambda value, key, arr: value.upper(), ["x"], False)
    assert result == {"X": "x"}


def test_array_map_keys_value_scoped():
    """A method name is looked up on each value."""
    posts = [SimpleNamespace(slug=lambda *args: "first")]
    assert array_map_keys("slug", posts, value_scoped_cb=True) == {"first": posts[0]}


def test_array_map_keys_rejects_non_callable():
    """A callback that cannot be called raises InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError):
        array_map_keys("missing", [1], value_scoped_cb=True)
    with pytest.raises(TypeError):
        array_map_keys(42, [1])


def test_array_clear_empty():
    """Empty values are dropped; null_only drops just None."""
    values = [0, None, "", "a", [], 3]
    assert array_clear_empty(values) == ["a", 3]
    assert array_clear_empty(values, null_only=True) == [0, "", "a", [], 3]


@pytest.mark.parametrize(
    "value, wrap_null, expected",
    [
        ([1], False, [1]),
        ((1, 2), False, [1, 2]),
        ({"a": 1}, False, {"a": 1}),
        ("x", False, ["x"]),
        (None, False, []),
        (None, True, [None]),
    ],
)
def test_assert_array(value, wrap_null, expected):
    """assert_array coerces anything to a list or dict."""
    assert assert_array(value, wrap_null) == expected


def test_array_pluck_removes_in_place():
    """array_pluck pops from mappings and lists, returning None when missing."""
    data = {"a": 1, "b": 2}
    assert array_pluck(data, "a") == 1
    assert data == {"b": 2}
    assert array_pluck(data, "zzz") is None

    items = ["x", "y"]
    assert array_pluck(items, 0) == "x"
    assert items == ["y"]
    assert array_pluck(items, 5) is None


def test_array_concat_appends_positional_entries():
    """Lists are concatenated and scalars appended."""
    assert array_concat([1, 2], [3], 4) == [1, 2, 3, 4]


def test_array_concat_merges_string_keys_recursively():
    """Colliding string keys merge; scalar collisions gather into a list."""
    result = array_concat(
        {"a": 1, "nested": {"x": 1}, "list": [1]},
        {"a": 2, "nested": {"y": 2}, "list": [2]},
    )
    assert result == {"a": [1, 2], "nested": {"x": 1, "y": 2}, "list": [1, 2]}


def test_array_parallel_and_divergence():
    """array_parallel keys values by themselves; divergence is symmetric."""
    assert array_parallel(["a", "b"]) == {"a": "a", "b": "b"}
    assert array_divergence([1, 2, 3], [2, 3, 4]) == [1, 4]


@pytest.mark.parametrize(
    "key, offset, expected",
    [("b", 1, "c"), ("b", -1, "a"), ("c", 1, None), ("zzz", 1, None), ("a", 0, "a")],
)
def test_array_key_adjacent(key, offset, expected):
    """Adjacent keys are looked up by position."""
    assert array_key_adjacent({"a": 1, "b": 2, "c": 3}, key, offset) == expected


def test_array_object_vars():
    """Objects and mappings are reduced to the requested properties."""
    people = [
        {"id": 7, "name": "Ada", "age": 36},
        SimpleNamespace(id=8, name="Grace"),
    ]
    assert array_object_vars(people, "name") == {0: "Ada", 1: "Grace"}
    assert array_object_vars(people, ["name"], "id") == {7: "Ada", 8: "Grace"}
    assert array_object_vars(people, ["name", "age"], "id") == {
        7: {"name": "Ada", "age": 36},
        8: {"name": "Grace"},
    }
    assert array_object_vars(people, "age") == {0: 36, 1: None}


# --- Argument parsing ---


def test_parse_query_args_sources():
    """Query strings, mappings, objects and None are all accepted."""
    defaults = {"a": "0", "z": "default"}
    assert parse_query_args("?a=1&b=", defaults) == {"a": "1", "z": "default", "b": ""}
    assert parse_query_args({"a": 2}, defaults) == {"a": 2, "z": "default"}
    assert parse_query_args(SimpleNamespace(a=3, _hidden=1)) == {"a": 3}
    assert parse_query_args(None, defaults) == defaults


def test_parse_args_limits_to_allowed_keys():
    """Only keys with a default or listed by value are kept."""
    allowed = {"size": "m", 0: "color"}
    assert parse_args("size=l&color=red&evil=1", allowed) == {
        "size": "l",
        "color": "red",
    }
    assert parse_args({}, allowed) == {"size": "m"}
