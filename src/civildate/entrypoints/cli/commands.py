"""civildate subcommands.

Every command writes its result to **stdout** and nothing else, so output can
be piped. Problems go to **stderr**: malformed DATE arguments are usage
errors (exit code 2), unknown timezones exit with code 1.

Commands
- ``today`` / ``yesterday`` / ``tomorrow`` -- the current date in a zone.
- ``shift`` -- move a date by years, months and days.
- ``diff`` -- civil difference between two dates.
- ``info`` -- calendar facts about a date.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import tzinfo
from typing import Any

import click

from civildate import config
from civildate.adapters import json_codec
from civildate.domain.calendar import Clock, resolve_zone, utcnow
from civildate.domain.date import Date, diff
from civildate.domain.errors import DateError, DateParseError

from .helpers import error, warn

logger = logging.getLogger(__name__)


class DateParamType(click.ParamType):
    """Click parameter type accepting strict ``YYYY-MM-DD`` text."""

    name = "date"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> Date:
        if isinstance(value, Date):
            return value
        try:
            return Date.from_string(value)
        except DateParseError as e:
            self.fail(str(e), param, ctx)


DATE = DateParamType()


@contextmanager
def reporting_date_errors() -> Iterator[None]:
    """Turn domain errors into an error line on stderr and exit code 1."""
    try:
        yield
    except DateError as e:
        logger.debug("Command failed", exc_info=True)
        error(str(e))
        raise click.exceptions.Exit(1) from e


def _clock(ctx: click.Context) -> Clock:
    """Return the clock stored on the context object, if any (tests inject one)."""
    obj = ctx.find_root().obj
    return obj.get("clock", utcnow) if isinstance(obj, dict) else utcnow


def _zone(tz: str | None) -> tzinfo:
    return resolve_zone(tz) if tz else config.get_default_zone()


tz_option = click.option(
    "--tz",
    "tz",
    metavar="ZONE",
    default=None,
    help=(
        "IANA timezone used to read the current date "
        f"(defaults to ${config.TZ_ENV_VAR}, then UTC)."
    ),
)


def _now_command(
    name: str, build: Callable[[Date], Date], summary: str
) -> click.Command:
    @click.command(name=name, help=summary)
    @tz_option
    @click.pass_context
    def command(ctx: click.Context, tz: str | None) -> None:
        with reporting_date_errors():
            zone = _zone(tz)
            current = Date.today_in(zone, clock=_clock(ctx))
            logger.debug("Current date in %s is %s", zone, current)
            click.echo(build(current))

    return command


today = _now_command("today", lambda d: d, "Print the current date.")
yesterday = _now_command(
    "yesterday", lambda d: d.add_days(-1), "Print the day before today."
)
tomorrow = _now_command(
    "tomorrow", lambda d: d.add_days(1), "Print the day after today."
)


@click.command()
@click.argument("date", type=DATE)
@click.option("--years", "-y", type=int, default=0, help="Years to add.")
@click.option("--months", "-m", type=int, default=0, help="Months to add.")
@click.option("--days", "-d", type=int, default=0, help="Days to add.")
def shift(date: Date, years: int, months: int, days: int) -> None:
    """Move DATE by years, then months, then days.

    Months that are too short overflow into the next month, so
    2001-01-31 shifted by one month is 2001-03-01.
    """
    if not (years or months or days):
        warn("No offset given; date is unchanged.")
    with reporting_date_errors():
        click.echo(date.add_years(years).add_months(months).add_days(days))


@click.command(name="diff")
@click.argument("first", type=DATE)
@click.argument("second", type=DATE)
@click.option("--json", "as_json", is_flag=True, help="Print a JSON object.")
def diff_command(first: Date, second: Date, as_json: bool) -> None:
    """Print the difference between FIRST and SECOND.

    Months are cumulative (a year and a month is 13 months) and days count
    every elapsed day. The order of the arguments does not matter.
    """
    result = diff(first, second)
    if as_json:
        click.echo(json_codec.dumps(result._asdict()))
    else:
        click.echo(f"{result.years} years, {result.months} months, {result.days} days")


@click.command()
@click.argument("date", type=DATE)
@click.option("--json", "as_json", is_flag=True, help="Print a JSON object.")
def info(date: Date, as_json: bool) -> None:
    """Print calendar facts about DATE."""
    with reporting_date_errors():
        facts: dict[str, object] = {
            "date": date,
            "weekday": str(date.weekday),
            "month": str(date.month),
            "year_day": date.year_day,
            "quarter": date.quarter,
            "days_in_month": date.days_in_month,
            "days_in_year": date.days_in_year,
            "start_of_month": date.start_of_month(),
            "end_of_month": date.end_of_month(),
            "start_of_quarter": date.start_of_quarter(),
            "end_of_quarter": date.end_of_quarter(),
        }
    if as_json:
        click.echo(json_codec.dumps(facts))
        return
    width = max(len(key) for key in facts)
    for key, value in facts.items():
        click.echo(f"{key:<{width}}  {value}")
