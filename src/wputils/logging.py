"""Logging setup for the wputils command line.

Library modules only create loggers with ``logging.getLogger(__name__)``;
nothing is attached until `setup_logging` runs. It installs two handlers on
the root logger:

* a Rich console handler on stderr, at the verbosity chosen with ``-v``/``-q``,
  which tags records from other packages with ``[package]``;
* optionally, a "flight recorder": a `MemoryHandler` that keeps recent records
  at DEBUG and writes them to a log file once a WARNING arrives (or on exit
  when asked to).

`log_startup` then records how the run is configured, including the theme
settings the template and asset helpers will read from the environment.
"""

from __future__ import annotations

import logging
import platform
import sys
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from wputils import config
from wputils.utils.values import min_max

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PACKAGE = "wputils"

BASE_LEVEL = logging.WARNING
LEVEL_STEP = 10
FLIGHT_RECORDER_CAPACITY = 2000

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = "[%(asctime)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"

# Matches click-extra's --color / --no-color
ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


def verbosity_level(verbose: int = 0, quiet: int = 0) -> int:
    """Move the WARNING default one level down per *verbose*, up per *quiet*.

    The result is clamped to ``DEBUG``..``CRITICAL``.
    """
    level = BASE_LEVEL - LEVEL_STEP * verbose + LEVEL_STEP * quiet
    return min_max(level, logging.DEBUG, logging.CRITICAL)


@dataclass(frozen=True)
class LoggingSettings:
    """How one command-line run logs.

    Attributes:
        level: Console threshold; ignored in debug mode.
        debug: Log everything to the console with timestamps and source paths.
        color: Allow colored console output.
        log_path: Flight recorder file; None disables the recorder.
        recorder_capacity: Records the flight recorder keeps in memory.
        flush_on_close: Write the recorder buffer on exit even without a
            WARNING.
        logger_levels: Minimum levels for individual loggers.
    """

    level: int = BASE_LEVEL
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    recorder_capacity: int = FLIGHT_RECORDER_CAPACITY
    flush_on_close: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)

    @property
    def flight_recorder(self) -> bool:
        """Whether records are also kept for the log file."""
        return self.log_path is not None


class PackagePrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``[package]`` for records from other packages.

    Records from wputils loggers get an empty prefix. Nothing is filtered out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.partition(".")[0]
        record.prefix = "" if package == PROJECT_PACKAGE else f"[{package}]"
        return True


def console_handler(settings: LoggingSettings) -> RichHandler:
    """Build the stderr console handler for *settings*."""
    color_system: ColorSystem | None = "auto" if settings.color else None
    handler = RichHandler(
        level=logging.DEBUG if settings.debug else settings.level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=settings.debug,
        enable_link_path=settings.debug,
    )
    if settings.debug:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(PackagePrefixFilter())
    return handler


def flight_recorder(
    path: Path,
    capacity: int = FLIGHT_RECORDER_CAPACITY,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Buffer up to *capacity* records and write them to *path* on WARNING.

    The file is truncated when the recorder is created, so it only ever holds
    the records of the latest run.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=flush_on_close,
    )


def setup_logging(settings: LoggingSettings) -> list[logging.Handler]:
    """Replace the root logger's handlers according to *settings*.

    The root logger passes everything through and the handlers apply their
    own thresholds; *settings.logger_levels* then raise or lower individual
    loggers for every handler at once.

    Returns:
        list[logging.Handler]: The installed handlers, console first.
    """
    handlers: list[logging.Handler] = [console_handler(settings)]
    if settings.log_path is not None:
        handlers.append(
            flight_recorder(
                settings.log_path,
                settings.recorder_capacity,
                settings.flush_on_close,
            )
        )
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def log_startup(
    logger: Logger,
    settings: LoggingSettings,
    handlers: list[logging.Handler],
    app_version: str,
) -> None:
    """Log a one-line INFO summary of the run, then DEBUG details.

    The details name the interpreter, each theme setting from the environment
    (``<not set>`` when missing), the template cache lifetime, the handlers,
    the flight recorder and any per-logger levels.
    """
    logger.info(
        "wputils %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(settings.level),
        "ON" if settings.flight_recorder else "OFF",
    )
    logger.debug(
        "Python %s on %s %s",
        sys.version.split()[0],
        platform.system(),
        platform.release(),
    )
    for name, value in config.describe_settings().items():
        logger.debug("%s=%s", name, value)
    logger.debug("Template cache TTL: %ss", config.TEMPLATE_CACHE_TTL)
    logger.debug("Handlers: %s", [type(handler).__name__ for handler in handlers])
    if settings.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            settings.log_path,
            settings.recorder_capacity,
            settings.flush_on_close,
        )
    overrides = {
        name: logging.getLevelName(level)
        for name, level in settings.logger_levels.items()
    }
    logger.debug("Per-logger overrides: %s", overrides or "<none>")
