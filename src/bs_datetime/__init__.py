"""
bs-datetime - Bikram Sambat <-> Gregorian date conversion.

Provides the BS year table, a pure conversion engine and NepaliDate, a
mutable date value that keeps both calendars in step.
"""

__version__ = "1.0.0"

from bs_datetime.core.config import Config
from bs_datetime.core.converter import to_ad, to_bs
from bs_datetime.core.exceptions import (
    ConfigurationError,
    ConversionError,
    InvalidArgumentError,
    NepaliDateError,
    OutOfRangeError,
)
from bs_datetime.core.nepali_date import NepaliDate
from bs_datetime.core.year_table import MAX_YEAR, MIN_YEAR, YearMapping, lookup

__all__ = [
    "__version__",
    "Config",
    "NepaliDate",
    "YearMapping",
    "MIN_YEAR",
    "MAX_YEAR",
    "lookup",
    "to_ad",
    "to_bs",
    "NepaliDateError",
    "ConfigurationError",
    "ConversionError",
    "InvalidArgumentError",
    "OutOfRangeError",
]
