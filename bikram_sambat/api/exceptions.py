"""Errors raised by the Bikram Sambat converter and grid helpers."""
from __future__ import annotations

from .epoch_table import MAX_YEAR, MIN_YEAR

__all__ = [
    "BikramSambatError",
    "InvalidDayError",
    "InvalidMonthError",
    "OutOfRangeError",
]


class BikramSambatError(ValueError):
    """Base class for invalid or unsupported Bikram Sambat dates."""


class OutOfRangeError(BikramSambatError):
    """The BS year is not covered by the month length table."""

    def __init__(self, year: int) -> None:
        super().__init__(f"BS year {year} is outside the supported range {MIN_YEAR}-{MAX_YEAR}")
        self.year = year


class InvalidMonthError(BikramSambatError):
    def __init__(self, month: int) -> None:
        super().__init__(f"month must be in 0..11 for Bikram Sambat calendar, got {month}")
        self.month = month


class InvalidDayError(BikramSambatError):
    def __init__(self, year: int, month: int, day: int, max_day: int) -> None:
        super().__init__(f"day must be in 1..{max_day} for month {month} of {year}, got {day}")
        self.year = year
        self.month = month
        self.day = day
        self.max_day = max_day
