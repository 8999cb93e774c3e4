"""
Custom exceptions for bs-datetime.

Exception hierarchy:
    NepaliDateError (base)
    ├── ConfigurationError
    ├── OutOfRangeError
    ├── ConversionError
    └── InvalidArgumentError
"""

from __future__ import annotations

from typing import Any


class NepaliDateError(Exception):
    """Base exception for all bs-datetime errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            details: Additional error details (optional)
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class ConfigurationError(NepaliDateError):
    """
    Raised when configuration is invalid or missing.

    Examples:
        - Missing explicit config file
        - Invalid YAML syntax
    """

    pass


class OutOfRangeError(NepaliDateError):
    """
    Raised when a BS year (given or derived) falls outside the year table.

    Examples:
        - Converting 1900 AD (resolves to 1957 BS)
        - Building a date for 2100 BS
    """

    def __init__(
        self,
        message: str,
        year: int | None = None,
        gregorian_year: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize out-of-range error.

        Args:
            message: Error message
            year: BS year that could not be resolved
            gregorian_year: AD year the BS year was derived from, if any
            details: Additional error details
        """
        super().__init__(message, details)
        self.year = year
        self.gregorian_year = gregorian_year

    def __str__(self) -> str:
        if self.gregorian_year is not None:
            return (
                f"{self.message} (Given Date: {self.gregorian_year} AD, "
                f"Converted to: {self.year})"
            )
        if self.year is not None:
            return f"{self.message} (Given Year: {self.year} BS)"
        return super().__str__()


class ConversionError(NepaliDateError):
    """
    Raised when a conversion breaks an internal invariant.

    Signals a defect in the year table rather than bad input, and is
    not recoverable by the caller.
    """

    pass


class InvalidArgumentError(NepaliDateError):
    """
    Raised when a value of an unsupported kind or shape is given.

    Examples:
        - NepaliDate([2080, 1, 1])
        - Malformed BS date string
        - Month index outside 0-11
    """

    def __init__(
        self,
        message: str,
        argument: Any = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize invalid argument error.

        Args:
            message: Error message
            argument: The offending value
            details: Additional error details
        """
        super().__init__(message, details)
        self.argument = argument

    def __str__(self) -> str:
        if self.argument is not None:
            return f"{self.message} (got {self.argument!r})"
        return super().__str__()
