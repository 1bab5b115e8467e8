"""Display names and Devanagari numerals for Bikram Sambat dates."""
from __future__ import annotations

from datetime import date
from types import MappingProxyType
from typing import List, Literal, Mapping, Union

__all__ = [
    "DEFAULT_LANGUAGE",
    "LABEL_LANGUAGES",
    "LabelLanguage",
    "MONTH_NAMES",
    "NEPALI_DIGITS",
    "NEPALI_MONTH_NAMES",
    "NEPALI_WEEKDAY_NAMES",
    "WEEKDAY_ABBREVIATIONS",
    "WEEKDAY_NAMES",
    "bs_date_label",
    "format_bs_date",
    "format_month_name",
    "format_number",
    "gregorian_date_label",
    "localize_date_label",
    "localize_date_string",
    "month_name",
    "parse_label_language",
    "to_localized_numeral",
    "weekday_headers",
    "weekday_name",
]

MONTH_NAMES = (
    "Baisakh", "Jestha", "Ashadh", "Shrawan",
    "Bhadra", "Ashwin", "Kartik", "Mangsir",
    "Poush", "Magh", "Falgun", "Chaitra",
)

# Indexed by weekday, 0 = Sunday.
WEEKDAY_NAMES = (
    "Aaitabar", "Sombar", "Mangalbar",
    "Budhabar", "Bihibar", "Sukrabar", "Sanibar",
)
WEEKDAY_ABBREVIATIONS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
_WEEKDAY_INITIALS = ("S", "M", "T", "W", "T", "F", "S")
_ENGLISH_WEEKDAYS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
_ENGLISH_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

LabelLanguage = Literal["english", "nepali"]
LABEL_LANGUAGES = ("english", "nepali")
DEFAULT_LANGUAGE: LabelLanguage = "english"

NEPALI_DIGITS: Mapping[str, str] = MappingProxyType({
    "0": "०",
    "1": "१",
    "2": "२",
    "3": "३",
    "4": "४",
    "5": "५",
    "6": "६",
    "7": "७",
    "8": "८",
    "9": "९",
})

NEPALI_WEEKDAY_NAMES: Mapping[str, str] = MappingProxyType({
    "Sunday": "आइतबार",
    "Monday": "सोमबार",
    "Tuesday": "मङ्गलबार",
    "Wednesday": "बुधबार",
    "Thursday": "बिहीबार",
    "Friday": "शुक्रबार",
    "Saturday": "शनिबार",
    # romanised names produced by bs_date_label
    "Aaitabar": "आइतबार",
    "Sombar": "सोमबार",
    "Mangalbar": "मङ्गलबार",
    "Budhabar": "बुधबार",
    "Bihibar": "बिहीबार",
    "Sukrabar": "शुक्रबार",
    "Sanibar": "शनिबार",
})

NEPALI_MONTH_NAMES: Mapping[str, str] = MappingProxyType({
    "Baishakh": "बैशाख",
    "Baisakh": "बैशाख",
    "Jestha": "जेठ",
    "Ashadh": "असार",
    "Shrawan": "श्रावण",
    "Bhadra": "भाद्र",
    "Ashwin": "आश्विन",
    "Kartik": "कार्तिक",
    "Mangsir": "मंसिर",
    "Poush": "पौष",
    "Magh": "माघ",
    "Falgun": "फाल्गुन",
    "Chaitra": "चैत्र",
})


def month_name(month: int) -> str:
    """Return the romanised BS month name for a 0-based month."""

    if not (0 <= month <= 11):
        raise ValueError(f"month must be in 0..11, got {month}")
    return MONTH_NAMES[month]


def weekday_name(weekday: int) -> str:
    if not (0 <= weekday <= 6):
        raise ValueError(f"weekday must be in 0..6, got {weekday}")
    return WEEKDAY_NAMES[weekday]


def weekday_headers(compact: bool = False) -> List[str]:
    """Column headers for a Sunday-first month grid."""

    return list(_WEEKDAY_INITIALS if compact else WEEKDAY_ABBREVIATIONS)


def to_localized_numeral(value: Union[int, str]) -> str:
    return "".join(NEPALI_DIGITS.get(char, char) for char in str(value))


def localize_date_string(day: Union[int, str], weekday: str, month: str, year: Union[int, str]) -> str:
    """Render the four parts of a date label in Nepali.

    Names missing from the lookup tables are kept as given.
    """

    return " ".join(
        (
            to_localized_numeral(day),
            NEPALI_WEEKDAY_NAMES.get(weekday, weekday),
            NEPALI_MONTH_NAMES.get(month, month),
            to_localized_numeral(year),
        )
    )


def localize_date_label(label: str) -> str:
    """Localize a ``"13 Tuesday Falgun 2081"`` style label.

    Labels that do not split into exactly four parts are returned unchanged.
    """

    parts = label.split(" ")
    if len(parts) != 4:
        return label
    return localize_date_string(*parts)


def bs_date_label(year: int, month: int, day: int, weekday: int) -> str:
    return f"{day} {weekday_name(weekday)} {month_name(month)} {year}"


def gregorian_date_label(value: date) -> str:
    """Long English label, e.g. ``Tuesday, February 25, 2025``."""

    weekday = _ENGLISH_WEEKDAYS[(value.weekday() + 1) % 7]
    return f"{weekday}, {_ENGLISH_MONTHS[value.month - 1]} {value.day}, {value.year}"


def parse_label_language(value: str) -> LabelLanguage:
    normalized = str(value).strip().lower()
    if normalized not in LABEL_LANGUAGES:
        raise ValueError(
            "language must be one of: {}".format(", ".join(LABEL_LANGUAGES))
        )
    return normalized  # type: ignore[return-value]


def format_number(value: Union[int, str], language: LabelLanguage) -> str:
    if language == "nepali":
        return to_localized_numeral(value)
    return str(value)


def format_month_name(month: int, language: LabelLanguage) -> str:
    name = month_name(month)
    if language == "nepali":
        return NEPALI_MONTH_NAMES.get(name, name)
    return name


def format_bs_date(year: int, month: int, day: int, weekday: int, language: LabelLanguage) -> str:
    """``bs_date_label`` rendered in the requested label language."""

    label = bs_date_label(year, month, day, weekday)
    if language == "nepali":
        return localize_date_label(label)
    return label
