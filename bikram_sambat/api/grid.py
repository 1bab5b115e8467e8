"""Month grid arithmetic for a Bikram Sambat calendar view.

Every lookup has two paths. The primary path reads the month length table
through the converter. When the year is not in the table the resolver
returns :class:`OutOfRange` and the public helpers substitute a fixed
approximation, so a calendar can always be drawn for any year.

The approximation tables below are kept as literal constants. They are not
astronomically derived and will not match the real calendar for any
particular year outside the table.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple, Union

from . import epoch_table
from .converter import BSDate, bs_to_gregorian
from .exceptions import InvalidDayError, InvalidMonthError

__all__ = [
    "DayCell",
    "FALLBACK_MONTH_LENGTHS",
    "FALLBACK_MONTH_OFFSETS",
    "MonthGrid",
    "Ok",
    "OutOfRange",
    "approximate_first_weekday",
    "days_in_month",
    "first_weekday_of_month",
    "gregorian_day_of",
    "is_holiday",
    "month_grid",
    "resolve_days_in_month",
    "resolve_first_weekday",
    "weekday_of",
]

logger = logging.getLogger(__name__)

SATURDAY = 6

FALLBACK_MONTH_LENGTHS = (31, 31, 32, 32, 31, 30, 30, 30, 29, 30, 29, 30)
FALLBACK_MONTH_OFFSETS = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)


@dataclass(frozen=True)
class Ok:
    value: int


@dataclass(frozen=True)
class OutOfRange:
    year: int


Resolution = Union[Ok, OutOfRange]


def _check_month(month: int) -> None:
    if not (0 <= month <= 11):
        raise InvalidMonthError(month)


def _sunday_first_weekday(value: date) -> int:
    return (value.weekday() + 1) % 7


def resolve_days_in_month(year: int, month: int) -> Resolution:
    _check_month(month)
    entry = epoch_table.lookup(year)
    if entry is None:
        return OutOfRange(year)
    return Ok(entry.month_lengths[month])


def resolve_first_weekday(year: int, month: int) -> Resolution:
    _check_month(month)
    if not epoch_table.is_supported(year):
        return OutOfRange(year)
    return Ok(_sunday_first_weekday(bs_to_gregorian(BSDate(year, month, 1))))


def approximate_first_weekday(year: int, month: int) -> int:
    """Zeller-like guess at the weekday of day 1, used outside the table."""

    _check_month(month)
    base_day = (year + year // 4 - year // 100 + year // 400) % 7
    return (base_day + FALLBACK_MONTH_OFFSETS[month]) % 7


def days_in_month(year: int, month: int) -> int:
    resolved = resolve_days_in_month(year, month)
    if isinstance(resolved, Ok):
        return resolved.value
    logger.debug("BS year %s not in table, approximating length of month %s", year, month)
    return FALLBACK_MONTH_LENGTHS[month]


def first_weekday_of_month(year: int, month: int) -> int:
    """Weekday of the first day of a BS month, 0 = Sunday."""

    resolved = resolve_first_weekday(year, month)
    if isinstance(resolved, Ok):
        return resolved.value
    logger.debug("BS year %s not in table, approximating first weekday of month %s", year, month)
    return approximate_first_weekday(year, month)


def weekday_of(year: int, month: int, day: int) -> int:
    _check_month(month)
    if epoch_table.is_supported(year):
        return _sunday_first_weekday(bs_to_gregorian(BSDate(year, month, day)))
    max_day = FALLBACK_MONTH_LENGTHS[month]
    if not (1 <= day <= max_day):
        raise InvalidDayError(year, month, day, max_day)
    return (approximate_first_weekday(year, month) + day - 1) % 7


def is_holiday(year: int, month: int, day: int) -> bool:
    """Saturdays are the weekly public holiday."""

    return weekday_of(year, month, day) == SATURDAY


def gregorian_day_of(year: int, month: int, day: int) -> Optional[int]:
    """Gregorian day of month for a grid cell, ``None`` when it cannot be converted."""

    _check_month(month)
    if not epoch_table.is_supported(year):
        return None
    return bs_to_gregorian(BSDate(year, month, day)).day


@dataclass(frozen=True)
class DayCell:
    day: int
    weekday: int
    is_holiday: bool
    is_today: bool
    is_selected: bool
    gregorian_day: Optional[int]


@dataclass(frozen=True)
class MonthGrid:
    year: int
    month: int
    leading_blanks: int
    cells: Tuple[DayCell, ...]
    approximate: bool

    @property
    def days(self) -> int:
        return len(self.cells)

    def weeks(self) -> Tuple[Tuple[Optional[DayCell], ...], ...]:
        """Rows of seven, padded with ``None`` before day 1 and after the last day."""

        slots = [None] * self.leading_blanks + list(self.cells)
        slots += [None] * (-len(slots) % 7)
        return tuple(tuple(slots[i:i + 7]) for i in range(0, len(slots), 7))


def month_grid(
    year: int,
    month: int,
    today: Optional[BSDate] = None,
    selected_day: Optional[int] = None,
) -> MonthGrid:
    length = days_in_month(year, month)
    first = first_weekday_of_month(year, month)
    approximate = not epoch_table.is_supported(year)

    cells = []
    for day in range(1, length + 1):
        weekday = (first + day - 1) % 7
        cells.append(
            DayCell(
                day=day,
                weekday=weekday,
                is_holiday=weekday == SATURDAY,
                is_today=today is not None and (today.year, today.month, today.day) == (year, month, day),
                is_selected=selected_day == day,
                gregorian_day=None if approximate else gregorian_day_of(year, month, day),
            )
        )
    return MonthGrid(year, month, first, tuple(cells), approximate)
