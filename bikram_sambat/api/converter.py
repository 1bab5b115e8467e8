"""Gregorian ↔ Bikram Sambat conversion helpers used by the calendar app."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Iterable, Optional, Tuple, Union

from . import epoch_table
from .exceptions import InvalidDayError, InvalidMonthError, OutOfRangeError
from .formatter import month_name

__all__ = [
    "BSDate",
    "bs_to_gregorian",
    "coerce_bs",
    "coerce_gregorian",
    "gregorian_range",
    "gregorian_to_bs",
    "is_valid_bs_date",
    "month_lengths",
    "today",
]

GregorianLike = Union[str, date, datetime, Iterable[int]]


@dataclass(frozen=True, order=True)
class BSDate:
    """Immutable Bikram Sambat date.

    ``month`` is 0-based (0 = Baisakh, 11 = Chaitra). Values are not checked
    against the month length table here so that out-of-range years can still
    be represented; :func:`bs_to_gregorian` performs the validation.
    """

    year: int
    month: int
    day: int

    def isoformat(self, sep: str = "-") -> str:
        return f"{self.year:04d}{sep}{self.month + 1:02d}{sep}{self.day:02d}"

    def to_gregorian(self) -> date:
        return bs_to_gregorian(self)

    @property
    def month_name(self) -> str:
        return month_name(self.month)


BSLike = Union[str, BSDate, Iterable[int]]


def _split_date_string(value: str, kind: str) -> Tuple[int, int, int]:
    tokens = value.strip().replace("/", "-").split("-")
    if len(tokens) != 3:
        raise ValueError(f"Unsupported {kind} date string: {value!r}")
    return tuple(int(part) for part in tokens)  # type: ignore[return-value]


def coerce_gregorian(value: GregorianLike) -> Tuple[int, int, int]:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        value = value.date()
    if isinstance(value, date):
        return value.year, value.month, value.day
    if isinstance(value, str):
        return _split_date_string(value, "Gregorian")
    try:
        year, month, day = value  # type: ignore[misc]
    except Exception as exc:  # type: ignore
        raise TypeError("Expected a date, string, or iterable of three integers") from exc
    return int(year), int(month), int(day)


def coerce_bs(value: BSLike) -> Tuple[int, int, int]:
    """Return ``(year, month, day)`` with a 0-based month.

    Strings use the ``YYYY-MM-DD`` form with a 1-based month; ``BSDate`` and
    iterables already carry a 0-based month.
    """

    if isinstance(value, BSDate):
        return value.year, value.month, value.day
    if isinstance(value, str):
        year, month, day = _split_date_string(value, "Bikram Sambat")
        return year, month - 1, day
    try:
        year, month, day = value  # type: ignore[misc]
    except Exception as exc:
        raise TypeError("Expected a BSDate, string, or iterable of three integers") from exc
    return int(year), int(month), int(day)


def month_lengths(year: int) -> Tuple[int, ...]:
    entry = epoch_table.lookup(year)
    if entry is None:
        raise OutOfRangeError(year)
    return entry.month_lengths


def _validate(year: int, month: int, day: int) -> None:
    if not (0 <= month <= 11):
        raise InvalidMonthError(month)
    max_day = month_lengths(year)[month]
    if not (1 <= day <= max_day):
        raise InvalidDayError(year, month, day, max_day)


def is_valid_bs_date(value: BSLike) -> bool:
    year, month, day = coerce_bs(value)
    try:
        _validate(year, month, day)
    except (InvalidMonthError, InvalidDayError, OutOfRangeError):
        return False
    return True


def _days_since_table_start(year: int, month: int, day: int) -> int:
    days = sum(sum(month_lengths(y)) for y in range(epoch_table.MIN_YEAR, year))
    days += sum(month_lengths(year)[:month])
    return days + day - 1


def _walk_from_anchor(offset: int) -> BSDate:
    year, month, day = epoch_table.REFERENCE_ANCHOR.bs
    # Days still to consume, counted from the first day of the current month.
    remaining = offset + day - 1

    while remaining < 0:
        month -= 1
        if month < 0:
            year -= 1
            month = 11
        remaining += month_lengths(year)[month]

    while True:
        lengths = month_lengths(year)
        if month == 0 and remaining >= sum(lengths):
            remaining -= sum(lengths)
            year += 1
            continue
        if remaining < lengths[month]:
            break
        remaining -= lengths[month]
        month += 1
        if month > 11:
            month = 0
            year += 1

    return BSDate(year, month, remaining + 1)


def gregorian_to_bs(value: GregorianLike) -> BSDate:
    gy, gm, gd = coerce_gregorian(value)
    target = date(gy, gm, gd)
    offset = (target - epoch_table.REFERENCE_ANCHOR.gregorian).days
    return _walk_from_anchor(offset)


def bs_to_gregorian(value: BSLike) -> date:
    year, month, day = coerce_bs(value)
    _validate(year, month, day)

    offset = _days_since_table_start(year, month, day) - _days_since_table_start(
        *epoch_table.REFERENCE_ANCHOR.bs
    )
    return epoch_table.REFERENCE_ANCHOR.gregorian + timedelta(days=offset)


def gregorian_range() -> Tuple[date, date]:
    """Return the first and last Gregorian dates the table can convert."""

    last_month = month_lengths(epoch_table.MAX_YEAR)[11]
    return (
        bs_to_gregorian((epoch_table.MIN_YEAR, 0, 1)),
        bs_to_gregorian((epoch_table.MAX_YEAR, 11, last_month)),
    )


def today(now: Optional[datetime] = None) -> BSDate:
    """Return the BS date of ``now`` (default: the current instant) in UTC."""

    if now is None:
        now = datetime.now(timezone.utc)
    return gregorian_to_bs(now)
