"""Navigation state of a BS calendar widget.

The widget owns its state; these helpers only compute the next value.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import List, Optional

from .converter import today as bs_today

__all__ = ["CalendarViewState", "year_window"]


@dataclass(frozen=True)
class CalendarViewState:
    year: int
    month: int
    day: Optional[int] = None

    @classmethod
    def today(cls, now: Optional[datetime] = None) -> "CalendarViewState":
        current = bs_today(now)
        return cls(current.year, current.month, current.day)

    def shift_year(self, increment: int) -> "CalendarViewState":
        return replace(self, year=self.year + increment, day=None)

    def previous_month(self) -> "CalendarViewState":
        if self.month == 0:
            return CalendarViewState(self.year - 1, 11)
        return CalendarViewState(self.year, self.month - 1)

    def next_month(self) -> "CalendarViewState":
        if self.month == 11:
            return CalendarViewState(self.year + 1, 0)
        return CalendarViewState(self.year, self.month + 1)

    def select_day(self, day: int) -> "CalendarViewState":
        return replace(self, day=day)

    def select_month(self, month: int) -> "CalendarViewState":
        if not (0 <= month <= 11):
            raise ValueError(f"month must be in 0..11, got {month}")
        return replace(self, month=month, day=None)

    def select_year(self, year: int) -> "CalendarViewState":
        return replace(self, year=year, day=None)


def year_window(year: int, compact: bool = False) -> List[int]:
    """Years offered by the year picker around ``year``."""

    if compact:
        return list(range(year - 4, year + 5))
    return list(range(year - 6, year + 6))
