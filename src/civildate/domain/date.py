"""The ``Date`` value type: one civil calendar day.

A ``Date`` is a (year, month, day) triple with no time of day and no
timezone. Values are immutable, hashable and totally ordered by the triple.

Construction normalizes rather than rejects: ``Date(1999, 6, 31)`` is
1999-07-01, the same way ``Date(1999, 13, 1)`` is 2000-01-01. Parsing is the
exception and is strict, so ``Date.from_string("1999-06-31")`` fails.

Month arithmetic overflows forward. When the target month is shorter than
the original day of month the result is the first day of the month after
it, never the last day of the target month::

    >>> Date(1999, 5, 31).add_months(1)
    Date('1999-07-01')
    >>> Date(2016, 2, 29).add_years(1)
    Date('2017-03-01')
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from datetime import date as _date
from datetime import datetime, timedelta, timezone, tzinfo
from typing import NamedTuple, Self

from civildate.domain.calendar import (
    Clock,
    Month,
    Weekday,
    days_in_month,
    days_in_year,
    is_leap_year,
    now_in,
    resolve_zone,
    utcnow,
)
from civildate.domain.errors import (
    DateParseError,
    DateRangeError,
    InvalidDateLiteralError,
    ScanError,
)
from civildate.interfaces.sql import SCAN_SOURCE_TYPES, Scannable, Valuable

logger = logging.getLogger(__name__)

_ISO_DATE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)


def _normalize(year: int, month: int, day: int) -> _date:
    """Carry out-of-range months into years, then out-of-range days into months."""
    carry, month_index = divmod(month - 1, 12)
    try:
        return _date(year + carry, month_index + 1, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError) as e:
        raise DateRangeError(year, month, day) from e


@dataclass(frozen=True, order=True, repr=False)
class Date(Scannable, Valuable):
    """A civil calendar day.

    Attributes:
        year: Year, 1..9999.
        month: Month of the year as a ``Month``.
        day: Day of the month, 1..31.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        normalized = _normalize(self.year, self.month, self.day)
        object.__setattr__(self, "year", normalized.year)
        object.__setattr__(self, "month", Month(normalized.month))
        object.__setattr__(self, "day", normalized.day)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_string(cls, text: str) -> Self:
        """Parse strict ``YYYY-MM-DD`` text.

        Args:
            text: Four-digit year, two-digit month and two-digit day.

        Returns:
            The parsed date.

        Raises:
            DateParseError: If ``text`` is not in the canonical form or names
                a day that does not exist (e.g. ``"2001-02-29"``).
        """
        if not isinstance(text, str):
            raise DateParseError(text, "expected a string")
        if (match := _ISO_DATE.fullmatch(text)) is None:
            logger.debug("Rejected date text %r: not YYYY-MM-DD", text)
            raise DateParseError(text, "expected YYYY-MM-DD")
        year, month, day = (int(part) for part in match.groups())
        if year < 1:
            raise DateParseError(text, "year out of range")
        if not 1 <= month <= 12:
            raise DateParseError(text, "month out of range")
        if not 1 <= day <= days_in_month(year, month):
            raise DateParseError(text, "day out of range")
        return cls(year, month, day)

    @classmethod
    def must_from_string(cls, text: str) -> Self:
        """Parse a date literal known to be valid.

        Meant for constants and tests; a bad literal is a programming error.

        Raises:
            InvalidDateLiteralError: If ``text`` does not parse.
        """
        try:
            return cls.from_string(text)
        except DateParseError as e:
            raise InvalidDateLiteralError(text) from e

    @classmethod
    def from_instant(cls, instant: datetime | _date) -> Self:
        """Truncate an instant to its calendar day in the instant's own zone."""
        if isinstance(instant, datetime):
            instant = instant.date()
        return cls(instant.year, instant.month, instant.day)

    @classmethod
    def today_in(cls, zone: tzinfo | str, *, clock: Clock = utcnow) -> Self:
        """Return the current date in ``zone``."""
        return cls.from_instant(now_in(zone, clock))

    @classmethod
    def yesterday_in(cls, zone: tzinfo | str, *, clock: Clock = utcnow) -> Self:
        """Return the day before the current date in ``zone``."""
        return cls.today_in(zone, clock=clock).add_days(-1)

    @classmethod
    def tomorrow_in(cls, zone: tzinfo | str, *, clock: Clock = utcnow) -> Self:
        """Return the day after the current date in ``zone``."""
        return cls.today_in(zone, clock=clock).add_days(1)

    @classmethod
    def today(cls, *, clock: Clock = utcnow) -> Self:
        """Return the current date in UTC."""
        return cls.today_in(timezone.utc, clock=clock)

    @classmethod
    def yesterday(cls, *, clock: Clock = utcnow) -> Self:
        """Return yesterday's date in UTC."""
        return cls.yesterday_in(timezone.utc, clock=clock)

    @classmethod
    def tomorrow(cls, *, clock: Clock = utcnow) -> Self:
        """Return tomorrow's date in UTC."""
        return cls.tomorrow_in(timezone.utc, clock=clock)

    # ------------------------------------------------------------------
    # Conversion and accessors
    # ------------------------------------------------------------------

    def to_pydate(self) -> _date:
        """Return the equivalent ``datetime.date``."""
        return _date(self.year, self.month, self.day)

    def time(self) -> datetime:
        """Return midnight UTC at the start of this date."""
        return datetime(self.year, self.month, self.day, tzinfo=timezone.utc)

    def time_in(self, zone: tzinfo | str) -> datetime:
        """Return local midnight of this date in ``zone``."""
        return datetime(self.year, self.month, self.day, tzinfo=resolve_zone(zone))

    @property
    def weekday(self) -> Weekday:
        """Day of the week."""
        return Weekday(self.to_pydate().weekday())

    @property
    def year_day(self) -> int:
        """Day of the year, 1..366."""
        return self.to_pydate().timetuple().tm_yday

    @property
    def quarter(self) -> int:
        """Calendar quarter, 1..4."""
        return (self.month - 1) // 3 + 1

    @property
    def days_in_month(self) -> int:
        """Length of this date's month."""
        return days_in_month(self.year, self.month)

    @property
    def days_in_year(self) -> int:
        """365, or 366 in leap years."""
        return days_in_year(self.year)

    @property
    def is_leap_year(self) -> bool:
        """Whether this date's year has 366 days."""
        return is_leap_year(self.year)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add_days(self, days: int) -> Self:
        """Move ``days`` calendar days forward (or back when negative)."""
        return type(self)(self.year, self.month, self.day + days)

    def add_months(self, months: int) -> Self:
        """Move ``months`` months, overflowing short months forward."""
        carry, month_index = divmod(self.month - 1 + months, 12)
        year, month = self.year + carry, month_index + 1
        if self.day > days_in_month(year, month):
            return type(self)(year, month + 1, 1)
        return type(self)(year, month, self.day)

    def add_years(self, years: int) -> Self:
        """Move ``years`` years; Feb 29 lands on Mar 1 in common years."""
        return self.add_months(12 * years)

    def start_of_month(self) -> Self:
        """First day of this date's month."""
        return type(self)(self.year, self.month, 1)

    def end_of_month(self) -> Self:
        """Last day of this date's month."""
        return type(self)(self.year, self.month, self.days_in_month)

    def start_of_quarter(self) -> Self:
        """First day of this date's calendar quarter."""
        return type(self)(self.year, 3 * (self.quarter - 1) + 1, 1)

    def start_of_next_quarter(self) -> Self:
        """First day of the following quarter (Q4 rolls into next January)."""
        return type(self)(self.year, 3 * self.quarter + 1, 1)

    def end_of_quarter(self) -> Self:
        """Last day of this date's calendar quarter."""
        last_month = 3 * self.quarter
        return type(self)(self.year, last_month, days_in_month(self.year, last_month))

    # ------------------------------------------------------------------
    # Text, JSON and database hooks
    # ------------------------------------------------------------------

    def isoformat(self) -> str:
        """Return the canonical ``YYYY-MM-DD`` form."""
        return f"{self.year:04d}-{int(self.month):02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.isoformat()!r})"

    def to_json_value(self) -> str:
        """Return the JSON-compatible value (the canonical text)."""
        return self.isoformat()

    @classmethod
    def from_json_value(cls, obj: object) -> Self:
        """Build a date from a decoded JSON value, which must be a string."""
        if not isinstance(obj, str):
            raise DateParseError(obj, "expected a JSON string")
        return cls.from_string(obj)

    def marshal_json(self) -> str:
        """Encode as a JSON string literal, e.g. ``'"2015-05-21"'``."""
        return json.dumps(self.to_json_value())

    @classmethod
    def unmarshal_json(cls, data: str | bytes) -> Self:
        """Decode a JSON string literal.

        Raises:
            DateParseError: If ``data`` is not JSON, not a string, or not a date.
        """
        try:
            obj = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DateParseError(data, "not valid JSON") from e
        return cls.from_json_value(obj)

    @classmethod
    def scan(cls, src: object) -> Self:
        """Build a date from a driver value (``datetime`` or ``date``).

        Raises:
            ScanError: For ``None`` and any other source type.
        """
        if isinstance(src, SCAN_SOURCE_TYPES):
            return cls.from_instant(src)  # type: ignore[arg-type]
        logger.debug("Rejected scan source of type %s", type(src).__name__)
        raise ScanError(cls.__name__, type(src))

    def value(self) -> str:
        """Return the canonical text bound to the database."""
        return self.isoformat()


# ============================================================================
#                       Comparison and difference
# ============================================================================


def min_date(a: Date, b: Date) -> Date:
    """Return the earlier of two dates."""
    return b if b < a else a


def max_date(a: Date, b: Date) -> Date:
    """Return the later of two dates."""
    return b if b > a else a


class DateDiff(NamedTuple):
    """Civil difference between two dates.

    ``months`` is cumulative (it includes ``years * 12``) and ``days`` is the
    total number of elapsed days, so each field stands on its own.
    """

    years: int
    months: int
    days: int


def diff(d1: Date, d2: Date) -> DateDiff:
    """Return the non-negative difference between two dates.

    Argument order does not matter. Whole years and months are found by
    subtracting fields with borrow: a smaller day of month on the later date
    borrows one month, and a negative month count borrows one year.

    Example:
        >>> diff(Date(2001, 2, 1), Date(2002, 3, 1))
        DateDiff(years=1, months=13, days=393)
    """
    if d1 > d2:
        d1, d2 = d2, d1
    days = (d2.to_pydate() - d1.to_pydate()).days
    years = d2.year - d1.year
    months = d2.month - d1.month
    if d2.day < d1.day:
        months -= 1
    if months < 0:
        months += 12
        years -= 1
    return DateDiff(years=years, months=years * 12 + months, days=days)


__all__ = ["Date", "DateDiff", "diff", "max_date", "min_date"]
