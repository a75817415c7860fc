"""Unit tests for wputils.utils.fallbacks module."""

import logging

import pytest

from wputils.domain.errors import InvalidArgumentError
from wputils.utils.fallbacks import (
    CapturedOutput,
    Flag,
    Ref,
    capture_output,
    fallback,
    fallback_assign,
    fallback_progression,
    fallback_until,
    flag_block,
    flag_pass,
    log_val,
    prefill,
)

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    "values, expected",
    [
        ((0, "", None, "x", "y"), "x"),
        ((0, "", None), None),
        ((["", "b"],), "b"),
        (("", 0), 0),
        ((), None),
    ],
)
def test_fallback(values, expected):
    """fallback returns the first non-empty value, else the last."""
    assert fallback(*values) == expected


def test_fallback_until_uses_predicate():
    """The predicate decides what is acceptable."""
    assert fallback_until(lambda v: v > 2, 1, 2, 3, 4) == 3
    assert fallback_until(lambda v: v > 10, [1, 2, 3]) == 3
    assert fallback_until(lambda v: True) is None


def test_fallback_until_rejects_non_callable():
    """A non-callable predicate is an argument error."""
    with pytest.raises(InvalidArgumentError, match="must be callable"):
        fallback_until("nope", 1)


def test_fallback_assign_keeps_valid_subject():
    """A valid subject is left untouched."""
    subject = Ref("ok")
    assert fallback_assign(subject, bool, "other") == "ok"
    assert subject.value == "ok"


def test_fallback_assign_commits_first_passing_fallback():
    """The first passing fallback is written to the reference."""
    subject = Ref(None)
    assert fallback_assign(subject, bool, "", "second", "third") == "second"
    assert subject.value == "second"


def test_fallback_assign_commits_last_when_none_pass():
    """When nothing passes, the last fallback is committed."""
    subject = Ref(None)
    assert fallback_assign(subject, bool, 0, "") == ""
    assert subject.value == ""


def test_fallback_progression_is_lazy():
    """Callbacks after the first passing result never run."""
    calls = []

    def make(value):
        def callback():
            calls.append(value)
            return value

        return callback

    result = fallback_progression(bool, make(0), "skipped", make("hit"), make("late"))
    assert result == "hit"
    assert calls == [0, "hit"]


def test_fallback_progression_without_callbacks():
    """Nothing to run yields None."""
    assert fallback_progression(bool) is None
    assert fallback_progression(bool, [lambda: 0]) == 0


def test_prefill():
    """Prefilled arguments come first."""
    greet = prefill(lambda greeting, name: f"{greeting}, {name}", "Hello")
    assert greet("Ada") == "Hello, Ada"
    with pytest.raises(InvalidArgumentError):
        prefill(None)


# --- Flag guards ---


def test_flag_block_prevents_recursion():
    """A guarded function cannot re-enter itself."""
    flag = Flag()
    calls = []

    def handler(value):
        calls.append(value)
        return guarded(value + 1)

    guarded = flag_block(flag, handler)
    assert guarded(1) is None
    assert calls == [1]
    assert not flag.raised


def test_flag_block_filter_returns_value_when_blocked():
    """Blocked filters hand their first argument back."""
    flag = Flag(raised=True)
    guarded = flag_block(flag, lambda value: value * 2, is_filter=True)
    assert guarded(21) == 21
    assert flag.raised


def test_flag_block_restores_flag_on_error():
    """The flag is lowered again even when the function raises."""
    flag = Flag()

    def boom():
        raise RuntimeError("boom")

    guarded = flag_block(flag, boom)
    with pytest.raises(RuntimeError):
        guarded()
    assert not flag.raised


def test_flag_pass_only_runs_while_raised():
    """flag_pass runs the function only while the flag is raised."""
    flag = Flag()
    guarded = flag_pass(flag, lambda value: value * 2, is_filter=True)
    assert guarded(5) == 5
    flag.raised = True
    assert guarded(5) == 10
    assert flag.raised


def test_flag_block_and_pass_cooperate():
    """A pass-guarded callback runs only inside a block-guarded one."""
    flag = Flag()
    inner = flag_pass(flag, lambda: "inner ran")
    outer = flag_block(flag, inner)
    assert inner() is None
    assert outer() == "inner ran"


# --- Debugging aids ---


def test_log_val_logs_at_debug(caplog):
    """log_val pretty-prints its arguments to the debug log."""
    with caplog.at_level(logging.DEBUG, logger="wputils.utils.fallbacks"):
        log_val({"a": 1}, [2])
    assert "log_val:" in caplog.text
    assert "{'a': 1}" in caplog.text


def test_capture_output():
    """Printed output is captured, optionally with the return value."""

    def shout(word):
        print(word.upper(), end="")
        return len(word)

    assert capture_output(shout, "hey") == "HEY"
    assert capture_output(shout, "hey", output_only=False) == CapturedOutput(
        output="HEY", returned=3
    )
    with pytest.raises(InvalidArgumentError):
        capture_output("print")
