"""Core modules for bs-datetime."""

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
