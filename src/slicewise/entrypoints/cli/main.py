"""SLICEWISE CLI entry point.

Defines the top-level ``slicewise`` group (via Click-Extra). Its options only
control logging; they are collected into a `LogSettings` before any
subcommand runs. The slicing subcommands live in `.commands`.

Every option can also be set from a ``SLICEWISE_*`` environment variable,
shown in ``--help``.

Examples
    $ slicewise --version
    $ slicewise -v slice "const slice" ..5
    $ slicewise --log-path split.log split "✨💖" 2
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
import click_extra as clickx
from platformdirs import user_log_dir

from slicewise import __version__
from slicewise.logging import LogSettings, configure_logging, log_startup

from .commands import COMMANDS
from .helpers.log_level_parser import parse_log_level

logger = logging.getLogger(__name__)

ENV_PREFIX = "SLICEWISE"
DEFAULT_LOG_PATH = Path(user_log_dir("slicewise", appauthor=False)) / "latest.log"

HELP = """SLICEWISE command-line interface.

    Inspect safe slices of text and byte strings from the shell. Ranges that
    are inverted, run past the end, or would cut a UTF-8 character in half
    are rejected with a reason instead of being silently clamped.
    """

LOGGING_OPTIONS = (
    click.option(
        "-v",
        "--verbose",
        "verbose_count",
        count=True,
        help="Show one more level of log detail per repetition (-v INFO, -vv DEBUG).",
    ),
    click.option(
        "-q",
        "--quiet",
        "quiet_count",
        count=True,
        help="Show one less level of log detail per repetition (-q ERROR).",
    ),
    click.option(
        "--debug/--no-debug",
        default=False,
        help="Log everything with timestamps, logger names and source lines.",
    ),
    click.option(
        "--log-path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=DEFAULT_LOG_PATH,
        envvar=f"{ENV_PREFIX}_LOG_PATH",
        show_default=True,
        show_envvar=True,
        help="File the flight recorder writes to.",
    ),
    click.option(
        "--flight-recorder/--no-flight-recorder",
        "flight_recorder",
        default=True,
        envvar=f"{ENV_PREFIX}_FLIGHT_RECORDER",
        show_envvar=True,
        help=(
            "Keep recent DEBUG records in memory and write them to --log-path "
            "when an operation is rejected."
        ),
    ),
    click.option(
        "--flight-recorder-capacity",
        type=click.IntRange(min=1),
        default=2000,
        hidden=True,
        envvar=f"{ENV_PREFIX}_FLIGHT_RECORDER_CAPACITY",
        help="Number of records the flight recorder keeps.",
    ),
    click.option(
        "--force-flush/--no-force-flush",
        "force_flush",
        default=False,
        envvar=f"{ENV_PREFIX}_FORCE_FLUSH",
        show_envvar=True,
        help="Also write the flight recorder to --log-path on a clean exit.",
    ),
    click.option(
        "-L",
        "--logger-level",
        "logger_levels",
        multiple=True,
        callback=parse_log_level,
        default=("click_extra=WARNING",),
        envvar=f"{ENV_PREFIX}_LOGGER_LEVELS",
        show_default=True,
        show_envvar=True,
        help="Cap a logger at a level, as NAME=LEVEL. Repeatable.",
    ),
)


def logging_options[F: Callable[..., Any]](func: F) -> F:
    """Attach `LOGGING_OPTIONS` to ``func`` in declaration order."""
    for option in reversed(LOGGING_OPTIONS):
        func = option(func)
    return func


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@logging_options
@clickx.pass_context
def slicewise(  # pylint: disable=too-many-arguments
    ctx: click.Context,
    *,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    flight_recorder_capacity: int,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """SLICEWISE command-line interface."""
    if flight_recorder:
        log_path.parent.mkdir(parents=True, exist_ok=True)
    settings = LogSettings(
        verbosity=verbose_count - quiet_count,
        debug=debug,
        color=ctx.color is not False,
        log_path=log_path if flight_recorder else None,
        flight_capacity=flight_recorder_capacity,
        flush_on_close=force_flush,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    log_startup(logger, settings, handlers, __version__)
    ctx.call_on_close(logging.shutdown)


for command in COMMANDS:
    slicewise.add_command(command)
