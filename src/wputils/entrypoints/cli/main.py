"""wputils CLI entry point.

The ``wputils`` group turns its global options into `LoggingSettings`, sets
up logging, and dispatches to one of the helper commands:

- ``wputils markdown`` renders mini markdown to HTML.
- ``wputils color`` prints CSS, hex and luminance of a color, optionally
  tinted, toned or shaded.
- ``wputils case`` converts text between letter cases.

Examples
    $ echo "**bold**" | wputils markdown
    $ wputils -v color "#3366ff" --tint 0.5
    $ WPUTILS_STYLESHEET_DIR=./theme wputils --debug case snake "Some Title"
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from wputils import __version__
from wputils.logging import (
    FLIGHT_RECORDER_CAPACITY,
    LoggingSettings,
    log_startup,
    setup_logging,
    verbosity_level,
)

from .case import case
from .color import color
from .helpers import parse_log_level
from .markdown import markdown

logger = logging.getLogger(__name__)


HELP = """Theme development helpers on the command line.

    Render mini markdown, inspect and mix colors, and convert text between
    letter cases. Theme settings are read from the WPUTILS_* environment
    variables and reported in the log with -vv.
    """


def default_log_path() -> Path:
    """``latest.log`` in the per-user log directory, created on demand."""
    return Path(user_log_dir("wputils", appauthor=False, ensure_exists=True)) / (
        "latest.log"
    )


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "-v",
    "--verbose",
    "verbose",
    count=True,
    help="Show more on the console: INFO with -v, DEBUG with -vv.",
)
@click.option(
    "-q",
    "--quiet",
    "quiet",
    count=True,
    help="Show less on the console: ERROR with -q, CRITICAL only with -qq.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything to the console with timestamps and source locations.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=default_log_path,
    envvar="WPUTILS_LOG_PATH",
    show_envvar=True,
    help="File the flight recorder writes to [default: latest.log in the user "
    "log directory].",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    envvar="WPUTILS_FLIGHT_RECORDER",
    show_envvar=True,
    help=(
        "Keep recent log records at DEBUG in memory, whatever -v/-q say, and "
        "write them to --log-path when a WARNING or ERROR is logged."
    ),
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=FLIGHT_RECORDER_CAPACITY,
    hidden=True,
    envvar="WPUTILS_FLIGHT_RECORDER_CAPACITY",
    help="Number of records the flight recorder keeps.",
)
@click.option(
    "--force-flush/--no-force-flush",
    default=False,
    envvar="WPUTILS_FORCE_FLUSH_FLIGHT_RECORDER",
    show_envvar=True,
    help="Also write the flight recorder on a clean exit.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=("click_extra=WARNING",),
    envvar="WPUTILS_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
    help=(
        "Minimum LEVEL for the logger NAME (NAME=LEVEL), for console and "
        "flight recorder alike, e.g. -L wputils.service_layer=INFO. Repeatable."
    ),
)
@clickx.pass_context
def wputils(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose: int,
    quiet: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    flight_recorder_capacity: int,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """Theme development helpers on the command line."""
    settings = LoggingSettings(
        level=verbosity_level(verbose, quiet),
        debug=debug,
        color=ctx.color is not False,
        log_path=log_path if flight_recorder else None,
        recorder_capacity=flight_recorder_capacity,
        flush_on_close=force_flush,
        logger_levels=logger_levels,
    )
    handlers = setup_logging(settings)
    log_startup(logger, settings, handlers, __version__)
    ctx.call_on_close(logging.shutdown)


for command in (markdown, color, case):
    wputils.add_command(command)
