"""civildate

A calendar-date value type: one civil day with no time of day and no
timezone. Provides strict parsing, calendar arithmetic with overflow-forward
normalization, civil differences, and bindings for JSON and SQL databases.
"""

from civildate.domain.calendar import (
    Month,
    Weekday,
    days_in_month,
    days_in_year,
    is_leap_year,
)
from civildate.domain.date import Date, DateDiff, diff, max_date, min_date
from civildate.domain.errors import (
    DateError,
    DateParseError,
    DateRangeError,
    InvalidDateLiteralError,
    ScanError,
    TimezoneNotFoundError,
)
from civildate.domain.nullable import NullableDate

__all__ = [
    "Date",
    "DateDiff",
    "DateError",
    "DateParseError",
    "DateRangeError",
    "InvalidDateLiteralError",
    "Month",
    "NullableDate",
    "ScanError",
    "TimezoneNotFoundError",
    "Weekday",
    "__version__",
    "days_in_month",
    "days_in_year",
    "diff",
    "is_leap_year",
    "max_date",
    "min_date",
]
__version__ = "0.1.0"
