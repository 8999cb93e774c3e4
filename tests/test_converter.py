"""
Tests for the AD <-> BS conversion engine.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone

import pytest

from bs_datetime.core.converter import to_ad, to_bs
from bs_datetime.core.exceptions import (
    ConversionError,
    InvalidArgumentError,
    OutOfRangeError,
)
from bs_datetime.core.year_table import MAX_YEAR, MIN_YEAR, lookup

NPT = timezone(timedelta(hours=5, minutes=45))


class TestToBS:
    """Tests for Gregorian -> BS conversion."""

    @pytest.mark.parametrize(
        "ad,expected",
        [
            (datetime(1943, 4, 14), (2000, 0, 0)),
            (datetime(2024, 4, 13), (2081, 0, 0)),
            (datetime(2024, 4, 12), (2080, 11, 29)),
            (datetime(2024, 1, 1), (2080, 8, 15)),
            (datetime(2025, 4, 14), (2082, 0, 0)),
            (datetime(2043, 4, 13), (2099, 11, 29)),
        ],
    )
    def test_known_dates(self, ad: datetime, expected: tuple[int, int, int]):
        """Should resolve known Gregorian dates."""
        assert to_bs(ad) == expected

    def test_accepts_plain_date(self):
        """Should treat a date as its midnight."""
        assert to_bs(date(2024, 4, 13)) == (2081, 0, 0)

    def test_time_of_day_does_not_move_date(self):
        """Should keep the same BS day from midnight to the last millisecond."""
        start = datetime(2024, 4, 13)
        end = datetime(2024, 4, 13, 23, 59, 59, 999000)
        assert to_bs(start) == to_bs(end) == (2081, 0, 0)

    def test_aware_datetime_uses_wall_clock(self):
        """Should convert the local wall-clock date without shifting zones."""
        assert to_bs(datetime(2024, 4, 13, 0, 30, tzinfo=NPT)) == (2081, 0, 0)

    def test_walks_back_before_new_year(self):
        """Should fall back to the previous BS year before mid-April."""
        year, month, day = to_bs(datetime(2024, 3, 1))
        assert year == 2080

    def test_last_month_boundary_uses_strict_comparison(self):
        """Should place the first day after a month's cumulative total in the next month."""
        mapping = lookup(2081)
        first_of_second_month = datetime(2024, 4, 13) + timedelta(days=mapping.cumulative_months[0])
        assert to_bs(first_of_second_month) == (2081, 1, 0)
        assert to_bs(first_of_second_month - timedelta(milliseconds=1)) == (2081, 0, 30)


class TestToBSRange:
    """Tests for range rejection in Gregorian -> BS conversion."""

    @pytest.mark.parametrize("ad", [datetime(1942, 12, 31), datetime(1900, 1, 1)])
    def test_too_early(self, ad: datetime):
        """Should reject dates whose guessed year is below the table."""
        with pytest.raises(OutOfRangeError) as exc_info:
            to_bs(ad)

        assert exc_info.value.gregorian_year == ad.year
        assert exc_info.value.year == ad.year + 57

    @pytest.mark.parametrize("ad", [datetime(2044, 1, 1), datetime(2100, 6, 1)])
    def test_too_late(self, ad: datetime):
        """Should reject dates whose guessed year is above MAX_YEAR + 1."""
        with pytest.raises(OutOfRangeError):
            to_bs(ad)

    def test_after_last_day_of_table(self):
        """Should reject dates past the final day of MAX_YEAR."""
        with pytest.raises(OutOfRangeError):
            to_bs(datetime(2043, 4, 14))

    def test_before_first_year_start(self):
        """Should raise ConversionError when the walk leaves the table."""
        with pytest.raises(ConversionError):
            to_bs(datetime(1943, 4, 13, 23, 59))


class TestToAD:
    """Tests for BS -> Gregorian conversion."""

    def test_first_day_of_table(self):
        """Should map 2000/01/01 to its start date at midnight."""
        assert to_ad((2000, 0, 0)) == datetime(1943, 4, 14)

    def test_overlays_time_of_day(self):
        """Should copy hours through microseconds from the donor."""
        donor = datetime(1999, 1, 1, 13, 45, 12, 345000)
        assert to_ad((2081, 0, 0), donor) == datetime(2024, 4, 13, 13, 45, 12, 345000)

    def test_accepts_time_donor(self):
        """Should accept a bare time as donor."""
        assert to_ad((2081, 0, 0), time(6, 30)) == datetime(2024, 4, 13, 6, 30)

    def test_keeps_tzinfo(self):
        """Should carry the donor's tzinfo onto the result."""
        result = to_ad((2081, 0, 0), datetime(2024, 1, 1, 8, tzinfo=NPT))
        assert result == datetime(2024, 4, 13, 8, tzinfo=NPT)
        assert result.tzinfo is NPT

    def test_day_overflow_continues_into_next_month(self):
        """Should let day indexes run past the end of the month."""
        assert to_ad((2081, 0, 31)) == to_ad((2081, 1, 0))
        assert to_ad((2081, 1, -1)) == to_ad((2081, 0, 30))

    @pytest.mark.parametrize("year", [MIN_YEAR - 1, MAX_YEAR + 1])
    def test_year_out_of_range(self, year: int):
        """Should raise OutOfRangeError for years outside the table."""
        with pytest.raises(OutOfRangeError) as exc_info:
            to_ad((year, 0, 0))

        assert exc_info.value.year == year

    @pytest.mark.parametrize("month", [-1, 12])
    def test_month_out_of_range(self, month: int):
        """Should raise InvalidArgumentError for month indexes outside 0-11."""
        with pytest.raises(InvalidArgumentError):
            to_ad((2081, month, 0))


class TestRoundTrip:
    """Tests for round trips and monotonicity."""

    @pytest.mark.parametrize("year", range(MIN_YEAR, MAX_YEAR + 1))
    def test_every_bs_day_round_trips(self, year: int):
        """Should recover every day of every month with time preserved."""
        donor = time(13, 45, 7, 891000)
        for month, length in enumerate(lookup(year).months):
            for day in range(length):
                ad = to_ad((year, month, day), donor)
                assert to_bs(ad) == (year, month, day)
                assert ad.time() == donor

    @pytest.mark.parametrize(
        "instant",
        [
            datetime(1943, 4, 14, 0, 0, 0, 1000),
            datetime(1970, 1, 1, 12),
            datetime(2000, 2, 29, 23, 59, 59, 999000),
            datetime(2024, 4, 12, 7, 8, 9, 10000),
            datetime(2043, 4, 13, 18),
        ],
    )
    def test_gregorian_round_trip(self, instant: datetime):
        """Should reproduce the instant exactly, milliseconds included."""
        assert to_ad(to_bs(instant), instant) == instant

    def test_days_are_monotonic(self):
        """Should advance exactly one day per day index."""
        previous = to_ad((2081, 0, 0))
        for day in range(1, lookup(2081).total_days):
            current = to_ad((2081, 0, day))
            assert current - previous == timedelta(days=1)
            previous = current

    @pytest.mark.parametrize("year", [2001, 2050, 2081, 2099])
    def test_year_boundary(self, year: int):
        """Should put the last millisecond before a year start in the prior year."""
        start = to_ad((year, 0, 0))
        previous = lookup(year - 1)

        assert to_bs(start) == (year, 0, 0)
        assert to_bs(start - timedelta(milliseconds=1)) == (
            year - 1,
            11,
            previous.months[11] - 1,
        )
