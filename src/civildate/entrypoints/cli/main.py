"""civildate CLI entry point.

Defines the top-level ``civildate`` command (via Click-Extra) and registers
the subcommands exposed by the project.

Notes
- The CLI version is sourced from `civildate.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Console logging goes to stderr through Rich; results go to stdout.

Examples
    $ civildate today --tz Australia/Sydney
    $ civildate shift 1999-05-31 --months 1
    $ civildate diff 2001-02-01 2002-03-01
"""

import logging
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from civildate import __version__
from civildate.config import LOGGER_LEVELS_ENV_VAR
from civildate.logging import config_console_handler, log_startup

from .commands import diff_command, info, shift, today, tomorrow, yesterday
from .helpers import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """civildate command-line interface.

    Work with civil calendar dates (no time of day, no timezone): read the
    current date in any zone, shift dates by years, months and days, and
    compute civil differences.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (shows logger names and source paths).",
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar=LOGGER_LEVELS_ENV_VAR,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L sqlalchemy=INFO -L civildate=DEBUG) or via "
        f"{LOGGER_LEVELS_ENV_VAR} (comma/space list)."
    ),
    default=("sqlalchemy=WARNING",),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def civildate(
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
) -> None:
    """civildate command-line interface."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) configure console handler
    use_color = ctx.color is not False
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    ]

    # 2) configure root logger; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 3) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


civildate.add_command(today)
civildate.add_command(yesterday)
civildate.add_command(tomorrow)
civildate.add_command(shift)
civildate.add_command(diff_command)
civildate.add_command(info)
