"""Hypothesis property tests for the array and color helpers.

- **Unwrap termination**: `unwrap` stops at a value that is not a
  single-element container, or after exactly *limit* layers.
- **Clamped indexing**: `array_nth` agrees with direct indexing inside
  ``[-len, len - 1]`` and returns the boundary element outside it.
- **RGBA normalization round trip**: normalizing to a dict and back to a
  sequence gives the same channels as normalizing to a sequence directly,
  for both input shapes.
"""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from wputils.utils.arrays import array_nth, array_values, is_container, unwrap
from wputils.utils.colors import (
    CHANNEL_ALIASES,
    CHANNELS,
    rgba_array_to_assoc,
    rgba_array_to_sequence,
)

pytestmark = [pytest.mark.property]

# ============================================================================
#                               Helpers
# ============================================================================


def is_single(value: Any) -> bool:
    """Return True for a container holding exactly one element."""
    return is_container(value) and len(value) == 1


def single_chain(value: Any) -> list[Any]:
    """Return *value* followed by each value reached by removing one layer.

    The last entry is the first value that is not a single-element container.
    """
    chain = [value]
    while is_single(chain[-1]):
        chain.append(array_values(chain[-1])[0])
    return chain


# ============================================================================
#                               Strategies
# ============================================================================

leaves = st.none() | st.booleans() | st.integers() | st.text(max_size=5)

nested = st.recursive(
    leaves,
    lambda children: (
        st.lists(children, max_size=3)
        | st.lists(children, max_size=3).map(tuple)
        | st.dictionaries(st.text(max_size=3), children, max_size=3)
    ),
    max_leaves=12,
)

color_channel = st.integers(min_value=0, max_value=255)
alpha_channel = st.floats(min_value=0, max_value=1, allow_nan=False)


@st.composite
def rgba_sequences(draw) -> list[int | float]:
    """A prefix of ``[red, green, blue, alpha]``."""
    channels = [draw(color_channel) for _ in range(3)] + [draw(alpha_channel)]
    return channels[: draw(st.integers(min_value=0, max_value=4))]


@st.composite
def rgba_mappings(draw) -> dict[str, int | float]:
    """Any subset of the channels, each under its long or short name."""
    rgba: dict[str, int | float] = {}
    for name in CHANNELS:
        if not draw(st.booleans()):
            continue
        key = draw(st.sampled_from([name, CHANNEL_ALIASES[name]]))
        rgba[key] = draw(alpha_channel if name == "alpha" else color_channel)
    return rgba


# ============================================================================
#                               Tests
# ============================================================================


# Keep small for CI (~100), can be larger locally.
_PROPSET = settings(max_examples=100, deadline=None)


# 1) unwrap stops at the first value that is not a single-element container
@_PROPSET
@given(value=nested, limit=st.integers(min_value=-3, max_value=6))
def test_unwrap_terminates_at_non_single_or_limit(value: Any, limit: int):
    """The result is past every single layer, or exactly *limit* layers deep."""
    chain = single_chain(value)
    result = unwrap(value, limit)

    if limit < 0 or limit >= len(chain) - 1:
        assert result is chain[-1]
        assert not is_single(result)
    else:
        assert result is chain[limit]


# 2) array_nth matches indexing in range and clamps outside it
@_PROPSET
@given(
    values=st.lists(st.integers(), min_size=1, max_size=10),
    n=st.integers(min_value=-30, max_value=30),
)
def test_array_nth_matches_clamped_indexing(values: list[int], n: int):
    """In-range positions index directly; others saturate to an end."""
    if -len(values) <= n < len(values):
        expected = values[n]
    elif n >= len(values):
        expected = values[-1]
    else:
        expected = values[0]
    assert array_nth(values, n) == expected


@given(n=st.integers())
def test_array_nth_of_empty_is_none(n: int):
    """Empty input has no element at any position."""
    assert array_nth([], n) is None


# 3) sequence <- assoc <- x equals sequence <- x
@_PROPSET
@given(rgba=rgba_sequences() | rgba_mappings())
def test_rgba_normalization_round_trip(rgba: list | dict):
    """Going through the dict shape does not change the normalized channels."""
    direct = rgba_array_to_sequence(rgba)
    assert rgba_array_to_sequence(rgba_array_to_assoc(rgba)) == direct
    assert len(direct) == 4
