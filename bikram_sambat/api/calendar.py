"""Whitelisted endpoints feeding the Bikram Sambat calendar widget."""
from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Optional, Union

from . import epoch_table, formatter
from .converter import BSDate, bs_to_gregorian, gregorian_range, gregorian_to_bs
from .converter import today as bs_today
from .formatter import LabelLanguage
from .grid import DayCell, month_grid, weekday_of
from .preferences import resolve_language
from .whitelist import maybe_whitelist

__all__ = [
    "convert_to_bs",
    "convert_to_gregorian",
    "get_month_view",
    "get_supported_range",
    "get_today",
]

logger = logging.getLogger(__name__)

IntLike = Union[int, str, None]


def _as_int(value: IntLike, name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc


def _bs_label(value: BSDate, language: LabelLanguage) -> str:
    return formatter.format_bs_date(
        value.year, value.month, value.day, weekday_of(value.year, value.month, value.day), language
    )


def _serialize(value: BSDate, gregorian: date, language: LabelLanguage) -> Dict[str, object]:
    return {
        "bs": value.isoformat(),
        "year": value.year,
        "month": value.month,
        "day": value.day,
        "weekday": weekday_of(value.year, value.month, value.day),
        "label": _bs_label(value, language),
        "gregorian": gregorian.isoformat(),
        "gregorian_label": formatter.gregorian_date_label(gregorian),
    }


def _serialize_cell(cell: Optional[DayCell], language: LabelLanguage) -> Optional[Dict[str, object]]:
    if cell is None:
        return None
    return {
        "day": cell.day,
        "label": formatter.format_number(cell.day, language),
        "weekday": cell.weekday,
        "is_holiday": cell.is_holiday,
        "is_today": cell.is_today,
        "is_selected": cell.is_selected,
        "gregorian_day": cell.gregorian_day,
    }


def get_today(language: Optional[str] = None, user: Optional[str] = None) -> Dict[str, object]:
    label_language = resolve_language(language, user)
    current = bs_today()
    return _serialize(current, bs_to_gregorian(current), label_language)


def convert_to_bs(value: str, language: Optional[str] = None, user: Optional[str] = None) -> Dict[str, object]:
    """Convert a ``YYYY-MM-DD`` Gregorian date."""

    logger.debug("converting %s to BS", value)
    converted = gregorian_to_bs(value)
    return _serialize(converted, bs_to_gregorian(converted), resolve_language(language, user))


def convert_to_gregorian(value: str, language: Optional[str] = None, user: Optional[str] = None) -> Dict[str, object]:
    """Convert a ``YYYY-MM-DD`` BS date (1-based month)."""

    logger.debug("converting BS %s to Gregorian", value)
    gregorian = bs_to_gregorian(value)
    return _serialize(gregorian_to_bs(gregorian), gregorian, resolve_language(language, user))


def get_month_view(
    year: IntLike = None,
    month: IntLike = None,
    selected_day: IntLike = None,
    compact: Union[bool, str, int] = False,
    language: Optional[str] = None,
    user: Optional[str] = None,
) -> Dict[str, object]:
    """Everything needed to draw one BS month, defaulting to the current month."""

    label_language = resolve_language(language, user)
    current = bs_today()
    view_year = _as_int(year, "year")
    view_month = _as_int(month, "month")
    day = _as_int(selected_day, "selected_day")
    if view_year is None:
        view_year = current.year
    if view_month is None:
        view_month = current.month
    compact = compact not in (False, 0, "0", "false", "False", "")

    logger.debug("building month view for %s-%s", view_year, view_month)
    grid = month_grid(view_year, view_month, today=current, selected_day=day)

    context: Dict[str, object] = {
        "year": view_year,
        "month": view_month,
        "month_name": formatter.format_month_name(view_month, label_language),
        "year_label": formatter.format_number(view_year, label_language),
        "language": label_language,
        "approximate": grid.approximate,
        "leading_blanks": grid.leading_blanks,
        "weekday_headers": formatter.weekday_headers(compact),
        "weeks": [[_serialize_cell(cell, label_language) for cell in week] for week in grid.weeks()],
    }
    if day is not None and 1 <= day <= grid.days:
        selected = BSDate(view_year, view_month, day)
        context["selected_label"] = _bs_label(selected, label_language)
        if not grid.approximate:
            context["selected_gregorian_label"] = formatter.gregorian_date_label(bs_to_gregorian(selected))
    return context


def get_supported_range() -> Dict[str, object]:
    first, last = gregorian_range()
    min_year, max_year = epoch_table.supported_range()
    return {
        "min_year": min_year,
        "max_year": max_year,
        "gregorian_start": first.isoformat(),
        "gregorian_end": last.isoformat(),
    }


get_today = maybe_whitelist(get_today)
convert_to_bs = maybe_whitelist(convert_to_bs)
convert_to_gregorian = maybe_whitelist(convert_to_gregorian)
get_month_view = maybe_whitelist(get_month_view)
get_supported_range = maybe_whitelist(get_supported_range)
