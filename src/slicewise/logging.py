"""Logging setup for the slicewise CLI.

`LogSettings` collects everything the global CLI options say about logging.
`configure_logging` turns it into handlers on the root logger:

* a Rich console handler on stderr whose level follows ``-v``/``-q``;
* an optional flight recorder, a `MemoryHandler` that keeps DEBUG records
  in memory and writes them to the log file once a rejected operation is
  logged at WARNING (or on exit with ``--force-flush``).

Records from loggers outside ``slicewise`` get a ``[name]`` tag on the
console so library chatter is easy to tell apart.
"""

from __future__ import annotations

import logging
import platform
import sys
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "slicewise"
DEFAULT_LEVEL = logging.WARNING
LEVEL_STEP = 10

type ColorSystem = Literal["auto", "standard", "256", "truecolor", "windows"]


def console_level(verbosity: int) -> int:
    """Map a net ``-v`` minus ``-q`` count to a level between DEBUG and CRITICAL."""
    level = DEFAULT_LEVEL - LEVEL_STEP * verbosity
    return max(logging.DEBUG, min(logging.CRITICAL, level))


@dataclass(frozen=True)
class LogSettings:
    """Logging configuration chosen on the command line."""

    verbosity: int = 0
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    flight_capacity: int = 2000
    flush_on_close: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)

    @property
    def level(self) -> int:
        """Effective console level."""
        return logging.DEBUG if self.debug else console_level(self.verbosity)

    @property
    def flight_recorder(self) -> bool:
        """Whether records are buffered for the log file."""
        return self.log_path is not None


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``[top-level-name]`` for non-slicewise loggers."""

    def filter(self, record: logging.LogRecord) -> bool:
        top = record.name.partition(".")[0]
        record.prefix = "" if top == PROJECT_PREFIX else f"[{top}]"
        return True


def make_console_handler(settings: LogSettings) -> RichHandler:
    """Build the stderr handler.

    Debug mode adds timestamps, logger names and clickable source paths;
    otherwise only the level column and the message are shown.
    """
    color_system: ColorSystem | None = "auto" if settings.color else None
    handler = RichHandler(
        level=settings.level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=settings.debug,
        enable_link_path=settings.debug,
    )
    if settings.debug:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def make_flight_recorder(settings: LogSettings) -> MemoryHandler:
    """Build the memory buffer that flushes to ``settings.log_path``.

    The file is truncated when the handler is created, so it only ever holds
    records from the latest run.
    """
    if settings.log_path is None:
        raise ValueError("the flight recorder needs a log path")
    target = logging.FileHandler(settings.log_path, mode="w", encoding="utf-8")
    target.setFormatter(
        logging.Formatter(
            "[%(asctime)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )
    return MemoryHandler(
        capacity=settings.flight_capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=settings.flush_on_close,
    )


def configure_logging(settings: LogSettings) -> list[logging.Handler]:
    """Install the console handler and, if enabled, the flight recorder.

    The root logger passes everything through; each handler applies its own
    level, and per-logger overrides cap individual loggers for both.

    Returns:
        The installed handlers, console first.
    """
    handlers: list[logging.Handler] = [make_console_handler(settings)]
    if settings.flight_recorder:
        handlers.append(make_flight_recorder(settings))
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def _dist_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:  # pragma: no cover
        return "<not installed>"


def log_startup(
    logger: logging.Logger,
    settings: LogSettings,
    handlers: list[logging.Handler],
    app_version: str,
) -> None:
    """Log one INFO summary line, then DEBUG details for bug reports."""
    logger.info(
        "SLICEWISE %s, console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(settings.level),
        "ON" if settings.flight_recorder else "OFF",
    )
    logger.debug(
        "Python: %s on %s %s",
        platform.python_version(),
        platform.system(),
        platform.release(),
    )
    logger.debug("Executable: %s", sys.executable)
    for dist in ("click", "click-extra", "rich"):
        logger.debug("%s: %s", dist, _dist_version(dist))
    logger.debug("Handlers: %s", ", ".join(type(h).__name__ for h in handlers))
    if settings.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%d, flush_on_close=%s",
            settings.log_path,
            settings.flight_capacity,
            settings.flush_on_close,
        )
    logger.debug(
        "Logger levels: %s",
        {name: logging.getLevelName(lvl) for name, lvl in settings.logger_levels.items()}
        or "<none>",
    )
