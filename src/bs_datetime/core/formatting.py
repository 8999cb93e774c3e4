"""
Formatting and parsing helpers for BS dates.

Pattern tokens understood by format_date:
    YYYY  BS year               YY   last two digits of the BS year
    MM    BS month, 01-12       M    BS month, 1-12
    DD    BS day, 01-32         D    BS day, 1-32
    HH    hours, 00-23          H    hours, 0-23
    mm    minutes, 00-59        m    minutes, 0-59
    ss    seconds, 00-59        s    seconds, 0-59
    SSS   milliseconds          d    weekday, 0 (Sunday) - 6

Anything inside square brackets is copied literally: "[Day] D" -> "Day 5".
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from bs_datetime.core import year_table
from bs_datetime.core.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from bs_datetime.core.nepali_date import NepaliDate

# BS months and days never exceed two digits
PAD_MAP: tuple[str, ...] = tuple(f"{value:02d}" for value in range(100))

TOKEN_PATTERN = re.compile(r"\[([^\]]*)\]|YYYY|YY|MM|M|DD|D|HH|H|mm|m|SSS|ss|s|d")

BS_DATE_PATTERN = re.compile(r"^\s*(\d{4})([/-])(\d{1,2})\2(\d{1,2})\s*$")


def pad(value: int) -> str:
    """Two-digit label for a month or day value."""
    if 0 <= value < len(PAD_MAP):
        return PAD_MAP[value]
    return f"{value:02d}"


def format_date(value: NepaliDate, pattern: str) -> str:
    """Render a NepaliDate using the tokens listed in the module docstring."""
    tokens = {
        "YYYY": lambda: str(value.full_year),
        "YY": lambda: pad(value.full_year % 100),
        "MM": lambda: pad(value.month + 1),
        "M": lambda: str(value.month + 1),
        "DD": lambda: pad(value.date),
        "D": lambda: str(value.date),
        "HH": lambda: pad(value.hours),
        "H": lambda: str(value.hours),
        "mm": lambda: pad(value.minutes),
        "m": lambda: str(value.minutes),
        "ss": lambda: pad(value.seconds),
        "s": lambda: str(value.seconds),
        "SSS": lambda: f"{value.milliseconds:03d}",
        "d": lambda: str(value.day),
    }

    def replace(match: re.Match) -> str:
        if match.group(1) is not None:
            return match.group(1)
        return tokens[match.group(0)]()

    return TOKEN_PATTERN.sub(replace, pattern)


def parse_bs_string(text: str) -> tuple[int, int, int]:
    """
    Parse a BS date written as YYYY/MM/DD or YYYY-MM-DD.

    Args:
        text: Date string with 1-indexed month and day

    Returns:
        (year, month_index, day_index), month and day 0-indexed

    Raises:
        InvalidArgumentError: If the string is malformed or names an impossible date
        OutOfRangeError: If the year is outside the year table
    """
    match = BS_DATE_PATTERN.match(text)
    if not match:
        raise InvalidArgumentError("Expected a BS date as YYYY/MM/DD", argument=text)

    year, month, day = int(match.group(1)), int(match.group(3)), int(match.group(4))

    if not 1 <= month <= 12:
        raise InvalidArgumentError(f"Invalid month: {month}", argument=text)

    length = year_table.lookup(year).months[month - 1]
    if not 1 <= day <= length:
        raise InvalidArgumentError(
            f"Invalid day: {day} ({year}/{PAD_MAP[month]} has {length} days)",
            argument=text,
        )

    return year, month - 1, day - 1
