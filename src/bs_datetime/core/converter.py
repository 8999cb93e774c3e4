"""
AD <-> BS conversion engine.

Both directions work on wall-clock fields only: the date part is moved
between calendars, the time of day (and tzinfo, when present) is carried
over untouched.

Usage:
    from bs_datetime.core.converter import to_ad, to_bs

    to_bs(datetime(2024, 4, 13, 9, 30))      # (2081, 0, 0)
    to_ad((2081, 0, 0), time(9, 30))          # datetime(2024, 4, 13, 9, 30)
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from datetime import date, datetime, time, timedelta

from bs_datetime.core import year_table
from bs_datetime.core.exceptions import (
    ConversionError,
    InvalidArgumentError,
    OutOfRangeError,
)
from bs_datetime.core.year_table import MAX_YEAR, MIN_YEAR, MS_PER_DAY

logger = logging.getLogger(__name__)

# Years between the two eras around the BS new year
ERA_OFFSET = 57

EPOCH = datetime(1970, 1, 1)
ONE_MS = timedelta(milliseconds=1)

BSDate = tuple[int, int, int]

RANGE_MESSAGE = (
    f"The given date does not fall in the supported range "
    f"({MIN_YEAR} BS - {MAX_YEAR} BS)."
)


def wall_clock_ms(instant: datetime) -> int:
    """Milliseconds since 1970-01-01 of the instant's wall-clock fields."""
    return (instant.replace(tzinfo=None) - EPOCH) // ONE_MS


def to_bs(instant: datetime | date) -> BSDate:
    """
    Convert a Gregorian instant to a BS date.

    Args:
        instant: datetime (naive or aware) or date

    Returns:
        (year, month_index, day_index); month and day are 0-indexed

    Raises:
        OutOfRangeError: If the date cannot fall inside the year table
        ConversionError: If no mapping exists for the resolved year
    """
    if not isinstance(instant, datetime):
        instant = datetime.combine(instant, time())

    # Correct from mid-April onwards; earlier dates still belong to the
    # previous BS year and are walked back below.
    year = instant.year + ERA_OFFSET

    if year > MAX_YEAR + 1 or year < MIN_YEAR:
        logger.debug("AD year %d resolves to %d BS, outside the table", instant.year, year)
        raise OutOfRangeError(RANGE_MESSAGE, year=year, gregorian_year=instant.year)

    ms = wall_clock_ms(instant)

    mapping = year_table.get(year)
    while year >= MIN_YEAR and (mapping is None or mapping.start_time > ms):
        year -= 1
        mapping = year_table.get(year)

    if mapping is None:
        raise ConversionError(
            "The given date could not be converted. Does it fall between the range "
            f"of supported years ({MIN_YEAR} BS - {MAX_YEAR} BS)?",
            details={"gregorian_year": instant.year, "year": year},
        )

    days = (ms - mapping.start_time) // MS_PER_DAY

    if days >= mapping.total_days:
        # only reachable past the last day of MAX_YEAR
        raise OutOfRangeError(RANGE_MESSAGE, year=year + 1, gregorian_year=instant.year)

    month = bisect_right(mapping.cumulative_months, days)
    day = days - (mapping.cumulative_months[month - 1] if month else 0)

    return year, month, day


def to_ad(bs_date: BSDate, time_of_day: datetime | time | None = None) -> datetime:
    """
    Convert a BS date to a Gregorian datetime.

    The day index may run past either end of the month; the result simply
    moves by that many days.

    Args:
        bs_date: (year, month_index, day_index), month and day 0-indexed
        time_of_day: datetime or time whose wall-clock time and tzinfo are
            copied onto the result (midnight when omitted)

    Raises:
        OutOfRangeError: If the year is outside the year table
        InvalidArgumentError: If the month index is outside 0-11
    """
    year, month, day = bs_date

    if year > MAX_YEAR or year < MIN_YEAR:
        raise OutOfRangeError(RANGE_MESSAGE, year=year)

    if not 0 <= month <= 11:
        raise InvalidArgumentError("Month index must be between 0 and 11", argument=month)

    mapping = year_table.lookup(year)
    days = (mapping.cumulative_months[month - 1] if month else 0) + day

    ad = EPOCH + timedelta(milliseconds=mapping.start_time + days * MS_PER_DAY)

    if time_of_day is None:
        time_of_day = time()
    elif isinstance(time_of_day, datetime):
        time_of_day = time_of_day.timetz()

    return datetime.combine(ad.date(), time_of_day)
