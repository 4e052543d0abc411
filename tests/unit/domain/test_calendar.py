"""Unit tests for civildate.domain.calendar."""

from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

import pytest

from civildate.domain import calendar
from civildate.domain.calendar import Month, Weekday
from civildate.domain.errors import TimezoneNotFoundError

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    "year,leap",
    [(2024, True), (2000, True), (1600, True), (2100, False), (1900, False), (2023, False)],
)
def test_is_leap_year(year, leap):
    """Divisible by 4, not by 100 unless also by 400."""
    assert calendar.is_leap_year(year) is leap
    assert calendar.days_in_year(year) == (366 if leap else 365)


@pytest.mark.parametrize(
    "year,month,days",
    [
        (2023, 1, 31),
        (2023, 2, 28),
        (2024, 2, 29),
        (1900, 2, 28),
        (2000, 2, 29),
        (2023, 4, 30),
        (2023, 12, 31),
    ],
)
def test_days_in_month(year, month, days):
    """Month lengths, leap-year aware."""
    assert calendar.days_in_month(year, month) == days


def test_enum_names_render_in_english():
    """str() of Month and Weekday is the English name."""
    assert str(Month.MARCH) == "March"
    assert str(Weekday.WEDNESDAY) == "Wednesday"
    assert Month.MARCH == 3
    assert Weekday.MONDAY == datetime(2024, 1, 1).weekday()


class TestResolveZone:
    """Tests for timezone lookup."""

    @staticmethod
    def test_tzinfo_passes_through():
        """A tzinfo is returned unchanged."""
        zone = timezone(timedelta(hours=3))
        assert calendar.resolve_zone(zone) is zone

    @staticmethod
    @pytest.mark.parametrize("name", ["UTC", "utc"])
    def test_utc_by_name(name):
        """'UTC' resolves to datetime.timezone.utc."""
        assert calendar.resolve_zone(name) is timezone.utc

    @staticmethod
    def test_iana_name():
        """IANA names resolve through zoneinfo."""
        zone = calendar.resolve_zone("Australia/Sydney")
        assert isinstance(zone, tzinfo)
        assert zone == ZoneInfo("Australia/Sydney")

    @staticmethod
    @pytest.mark.parametrize(
        "name", ["Mars/Olympus_Mons", "", "../etc/passwd", "Australia", "Etc"]
    )
    def test_unknown_name(name):
        """Unknown or malformed names raise TimezoneNotFoundError."""
        with pytest.raises(TimezoneNotFoundError) as exc_info:
            calendar.resolve_zone(name)
        assert exc_info.value.name == name


def test_now_in_reads_clock_in_zone():
    """now_in converts the clock's instant into the zone."""
    instant = datetime(2024, 3, 1, 15, 30, tzinfo=timezone.utc)
    local = calendar.now_in("Australia/Sydney", lambda: instant)
    assert local == instant
    assert (local.day, local.hour) == (2, 2)


def test_utcnow_is_aware_utc():
    """The default clock returns aware UTC instants."""
    assert calendar.utcnow().utcoffset() == timedelta(0)
