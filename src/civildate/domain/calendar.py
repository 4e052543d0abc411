"""Calendar rules and time collaborators used by the date value types.

Everything here follows the proleptic Gregorian calendar. The module also
holds the small seams through which dates meet the outside world: the
``Clock`` used by "now" constructors and the timezone lookup by name.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo
from enum import IntEnum
from typing import Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from civildate.domain.errors import TimezoneNotFoundError

logger = logging.getLogger(__name__)

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class Month(IntEnum):
    """Months of the year, numbered from 1."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    def __str__(self) -> str:
        return self.name.capitalize()


class Weekday(IntEnum):
    """Days of the week, numbered like ``datetime.date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    def __str__(self) -> str:
        return self.name.capitalize()


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` has 366 days.

    Divisible by 4, except centuries, except centuries divisible by 400.
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    """Return 365 or 366."""
    return 366 if is_leap_year(year) else 365


def days_in_month(year: int, month: int) -> int:
    """Return the length of ``month`` (1..12) in ``year``."""
    if month == Month.FEBRUARY and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


class Clock(Protocol):
    """Source of the current instant."""

    def __call__(self) -> datetime: ...


def utcnow() -> datetime:
    """Default clock: the current aware UTC instant."""
    return datetime.now(timezone.utc)


def resolve_zone(zone: tzinfo | str) -> tzinfo:
    """Return a ``tzinfo`` for ``zone``, looking names up in the IANA database.

    Args:
        zone: A ``tzinfo`` (returned unchanged) or an IANA name such as
            ``"Australia/Sydney"``.

    Returns:
        The resolved timezone.

    Raises:
        TimezoneNotFoundError: If ``zone`` is a name the database does not know.
    """
    if isinstance(zone, tzinfo):
        return zone
    if zone.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        logger.debug("Timezone lookup failed for %r: %s", zone, e)
        raise TimezoneNotFoundError(zone) from e


def now_in(zone: tzinfo | str, clock: Clock = utcnow) -> datetime:
    """Read ``clock`` and express the instant in ``zone``.

    Naive instants returned by the clock are treated as UTC.
    """
    instant = clock()
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(resolve_zone(zone))


__all__ = [
    "Clock",
    "Month",
    "Weekday",
    "days_in_month",
    "days_in_year",
    "is_leap_year",
    "now_in",
    "resolve_zone",
    "utcnow",
]
