"""Fixtures for the end-to-end CLI tests.

`log-demo` is a command that only exists while a test asks for
`registered_log_demo`; it logs one line per level so the tests can see which
levels reached the console and the flight recorder.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from wputils.entrypoints.cli.main import wputils

# pylint: disable=redefined-outer-name


DEMO_MESSAGE = "Demo message at %s from %s."
DEMO_LEVELS = ("debug", "info", "warning", "error", "critical")


@click.command()
def log_demo():
    """Log every level on ``wputils.demo``, and up to WARNING on ``some.thirdparty``.

    A last DEBUG line follows the final WARNING, so it is only written to the
    flight recorder file when the buffer is flushed on close.
    """
    own = logging.getLogger("wputils.demo")
    third_party = logging.getLogger("some.thirdparty")
    for level in DEMO_LEVELS:
        own.log(logging.getLevelName(level.upper()), DEMO_MESSAGE, level, "wputils")
    for level in DEMO_LEVELS[:3]:
        third_party.log(
            logging.getLevelName(level.upper()), DEMO_MESSAGE, level, "a library"
        )
    own.debug(DEMO_MESSAGE, "final debug", "wputils")


def _remove_command_everywhere(group, name: str) -> None:
    """Drop *name* from *group* and from the help sections click-extra keeps."""
    holders = [group, getattr(group, "_default_section", None)]
    holders += getattr(group, "_sections", [])
    for holder in holders:
        getattr(holder, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Make ``wputils log-demo`` available for one test."""
    wputils.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(wputils, "log-demo")


@pytest.fixture
def runner():
    """A CliRunner with separate stdout and stderr."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run in a temporary directory so the log file does not leak."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def invoke(runner, fs):
    """Run ``wputils`` with the flight recorder writing to ./wputils.log."""

    def _invoke(args, **kwargs):
        return runner.invoke(wputils, ["--log-path", "wputils.log", *args], **kwargs)

    return _invoke
