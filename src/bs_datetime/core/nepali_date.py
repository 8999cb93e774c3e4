"""
NepaliDate - a Gregorian datetime and a BS date kept in lock-step.

Both fields are only ever written through the conversion engine: BS
mutators re-derive the Gregorian value with to_ad, time mutators re-derive
the BS date with to_bs.

Indexing of the public surface:
    full_year   BS year
    month       BS month, 0-indexed (0 = Baisakh)
    date        BS day of month, 1-indexed
    day         Gregorian weekday, 0 = Sunday

Setters take the same indexing: the month argument of set_month and
set_full_year is 0-indexed, and the date argument of set_date, set_month and
set_full_year is 1-indexed.

BS setters do not normalise the stored day: set_date(33) on a 32-day month
keeps `date == 33` while the Gregorian value lands on the 1st of the next
month. end_of_month() relies on this and returns the day after the last one.

Usage:
    today = NepaliDate()
    today.set_month(today.month + 1)
    print(today, today.to_time_string())
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from functools import total_ordering
from typing import Union

from bs_datetime.core import year_table
from bs_datetime.core.converter import EPOCH, ONE_MS, RANGE_MESSAGE, BSDate, to_ad, to_bs
from bs_datetime.core.exceptions import InvalidArgumentError, OutOfRangeError
from bs_datetime.core.formatting import format_date, pad, parse_bs_string
from bs_datetime.core.year_table import MAX_YEAR, MIN_YEAR

EPOCH_UTC = EPOCH.replace(tzinfo=timezone.utc)

DateInput = Union["NepaliDate", datetime, date, int, float, str, None]


def _from_epoch_ms(milliseconds: float, zone: tzinfo | None = None) -> datetime:
    """
    Build the datetime `milliseconds` after the epoch.

    Naive results are UTC wall clock; aware ones are expressed in `zone`.

    Raises:
        OutOfRangeError: If the value is NaN or beyond what datetime can hold
    """
    try:
        if zone is None:
            return EPOCH + timedelta(milliseconds=milliseconds)
        return (EPOCH_UTC + timedelta(milliseconds=milliseconds)).astimezone(zone)
    except (OverflowError, ValueError) as e:
        raise OutOfRangeError(RANGE_MESSAGE, details={"time": milliseconds}) from e


@total_ordering
class NepaliDate:
    """
    Mutable BS date value with a Gregorian-datetime-shaped API.

    Instances compare by instant but are unhashable, since every setter
    moves the instant. Use `time` or to_datetime() as a set member or dict key.

    Args:
        value: None (now), datetime, date (midnight), milliseconds since the
            epoch, another NepaliDate, or a "YYYY/MM/DD" BS string
    """

    MIN_YEAR = MIN_YEAR
    MAX_YEAR = MAX_YEAR

    __slots__ = ("_datetime", "_bs")

    def __init__(self, value: DateInput = None):
        self._datetime: datetime
        self._bs: BSDate

        if isinstance(value, NepaliDate):
            self._bs = value._bs
            self._sync_ad_with_bs(value._datetime)
        elif value is None:
            self.set_english_date(datetime.now().astimezone())
        elif isinstance(value, datetime):
            self.set_english_date(value)
        elif isinstance(value, date):
            self.set_english_date(datetime.combine(value, time()))
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            self.set_english_date(_from_epoch_ms(value))
        elif isinstance(value, str):
            self._bs = parse_bs_string(value)
            self._sync_ad_with_bs(time())
        else:
            raise InvalidArgumentError("Invalid Argument.", argument=value)

    @classmethod
    def now(cls) -> NepaliDate:
        """Current local time, aware of the host's UTC offset."""
        return cls()

    @classmethod
    def from_bs(
        cls,
        year: int,
        month: int,
        date: int = 1,
        time_of_day: datetime | time | None = None,
    ) -> NepaliDate:
        """
        Build a NepaliDate from BS fields.

        Args:
            year: BS year
            month: BS month index (0-11)
            date: BS day of month (1-indexed)
            time_of_day: time to attach (midnight when omitted)
        """
        instance = cls.__new__(cls)
        instance._bs = (year, month, date - 1)
        instance._sync_ad_with_bs(time_of_day)
        return instance

    # ------------------------------------------------------------------
    # synchronisation

    def _sync_ad_with_bs(self, time_of_day: datetime | time | None = None) -> None:
        self._datetime = to_ad(self._bs, time_of_day)

    def _set_bs(self, year: int, month: int, day: int) -> int:
        # absolute month counter so that month 12 / -1 roll into the adjacent year
        months = (year - 2000) * 12 + month
        bs = (2000 + months // 12, months % 12, day)
        self._datetime = to_ad(bs, self._datetime)
        self._bs = bs
        return self.time

    def set_english_date(self, value: datetime) -> int:
        """Replace the Gregorian value and re-derive the BS date."""
        bs = to_bs(value)
        self._datetime = value
        self._bs = bs
        return self.time

    def to_datetime(self) -> datetime:
        """The Gregorian value."""
        return self._datetime

    # ------------------------------------------------------------------
    # accessors

    @property
    def date(self) -> int:
        return self._bs[2] + 1

    @property
    def month(self) -> int:
        return self._bs[1]

    @property
    def full_year(self) -> int:
        return self._bs[0]

    @property
    def day(self) -> int:
        return (self._datetime.weekday() + 1) % 7

    # time of day is identical in both calendars
    @property
    def hours(self) -> int:
        return self._datetime.hour

    @property
    def minutes(self) -> int:
        return self._datetime.minute

    @property
    def seconds(self) -> int:
        return self._datetime.second

    @property
    def milliseconds(self) -> int:
        return self._datetime.microsecond // 1000

    @property
    def time(self) -> int:
        """Milliseconds since 1970-01-01T00:00Z (naive values are read as UTC)."""
        if self._datetime.tzinfo is None:
            return (self._datetime - EPOCH) // ONE_MS
        return (self._datetime - EPOCH_UTC) // ONE_MS

    @property
    def timezone_offset(self) -> int:
        """Minutes to add to local time to get UTC (0 for naive values)."""
        offset = self._datetime.utcoffset()
        if offset is None:
            return 0
        return -int(offset.total_seconds() // 60)

    @property
    def days_in_month(self) -> int:
        year, month, _ = self._bs
        return year_table.lookup(year).months[month]

    # ------------------------------------------------------------------
    # BS mutators

    def set_date(self, date: int) -> int:
        """Set the BS day of month (1-indexed)."""
        year, month, _ = self._bs
        return self._set_bs(year, month, date - 1)

    def set_full_year(self, year: int, month: int | None = None, date: int | None = None) -> int:
        """
        Set the BS year, and optionally the month (0-indexed) and day (1-indexed).
        """
        _, current_month, current_day = self._bs
        return self._set_bs(
            year,
            current_month if month is None else month,
            current_day if date is None else date - 1,
        )

    def set_month(self, month: int, date: int | None = None) -> int:
        """Set the BS month (0-indexed); out-of-range months roll the year."""
        year, _, current_day = self._bs
        return self._set_bs(year, month, current_day if date is None else date - 1)

    # ------------------------------------------------------------------
    # Gregorian mutators

    def _midnight(self) -> datetime:
        return self._datetime.replace(hour=0, minute=0, second=0, microsecond=0)

    def set_hours(
        self,
        hours: int,
        minutes: int | None = None,
        seconds: int | None = None,
        milliseconds: int | None = None,
    ) -> int:
        return self.set_english_date(
            self._midnight()
            + timedelta(
                hours=hours,
                minutes=self.minutes if minutes is None else minutes,
                seconds=self.seconds if seconds is None else seconds,
                milliseconds=self.milliseconds if milliseconds is None else milliseconds,
            )
        )

    def set_minutes(
        self, minutes: int, seconds: int | None = None, milliseconds: int | None = None
    ) -> int:
        return self.set_hours(self.hours, minutes, seconds, milliseconds)

    def set_seconds(self, seconds: int, milliseconds: int | None = None) -> int:
        return self.set_hours(self.hours, self.minutes, seconds, milliseconds)

    def set_milliseconds(self, milliseconds: int) -> int:
        return self.set_hours(self.hours, self.minutes, self.seconds, milliseconds)

    def set_time(self, time: int) -> int:
        """Replace the instant with `time` milliseconds since the epoch."""
        return self.set_english_date(_from_epoch_ms(time, self._datetime.tzinfo))

    # ------------------------------------------------------------------
    # derived values

    def start_of_month(self) -> NepaliDate:
        """First day of the current BS month, same time of day."""
        start = NepaliDate(self)
        start.set_date(1)
        return start

    def end_of_month(self) -> NepaliDate:
        """
        The day after the last day of the current BS month.

        `date` on the result is the month length plus one; subtract one for
        the last real day.
        """
        year, month, _ = self._bs
        end = NepaliDate(self)
        end.set_date(year_table.lookup(year).months[month] + 1)
        return end

    # ------------------------------------------------------------------
    # formatting

    def to_date_string(self, delimiter: str = "/") -> str:
        year, month, day = self._bs
        return f"{year}{delimiter}{pad(month + 1)}{delimiter}{pad(day + 1)}"

    def to_time_string(self) -> str:
        return (
            f"{self.hours:02d}:{self.minutes:02d}:"
            f"{self.seconds:02d}.{self.milliseconds:03d}"
        )

    def format(self, pattern: str) -> str:
        """Render with YYYY/MM/DD/HH/mm/ss/SSS style tokens (see formatting)."""
        return format_date(self, pattern)

    def __str__(self) -> str:
        return self.to_date_string("/")

    def __repr__(self) -> str:
        return (
            f"NepaliDate({self.to_date_string()} {self.to_time_string()}, "
            f"ad={self._datetime.isoformat()})"
        )

    # ------------------------------------------------------------------
    # comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NepaliDate):
            return NotImplemented
        return self.time == other.time

    def __lt__(self, other: NepaliDate) -> bool:
        if not isinstance(other, NepaliDate):
            return NotImplemented
        return self.time < other.time

    # mutable, so unhashable like list
    __hash__ = None
