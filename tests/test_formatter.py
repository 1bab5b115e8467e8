from datetime import date

import pytest

from bikram_sambat.api.formatter import (
    NEPALI_MONTH_NAMES,
    NEPALI_WEEKDAY_NAMES,
    WEEKDAY_NAMES,
    bs_date_label,
    format_bs_date,
    format_month_name,
    format_number,
    gregorian_date_label,
    localize_date_label,
    localize_date_string,
    month_name,
    parse_label_language,
    to_localized_numeral,
    weekday_headers,
    weekday_name,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("2081", "२०८१"),
        ("abc1", "abc१"),
        (13, "१३"),
        (0, "०"),
        ("", ""),
    ],
)
def test_to_localized_numeral(value, expected):
    assert to_localized_numeral(value) == expected


def test_localize_date_string():
    assert localize_date_string(13, "Tuesday", "Falgun", 2081) == "१३ मङ्गलबार फाल्गुन २०८१"


def test_localize_date_string_passes_unknown_names_through():
    assert localize_date_string("1", "Funday", "Smarch", "2081") == "१ Funday Smarch २०८१"


def test_localize_date_label():
    assert localize_date_label("13 Tuesday Falgun 2081") == "१३ मङ्गलबार फाल्गुन २०८१"
    assert localize_date_label("1 Sanibar Baisakh 2081") == "१ शनिबार बैशाख २०८१"
    assert localize_date_label("Falgun 2081") == "Falgun 2081"


def test_bs_date_label():
    assert bs_date_label(2081, 10, 13, 2) == "13 Mangalbar Falgun 2081"


def test_gregorian_date_label():
    assert gregorian_date_label(date(2025, 2, 25)) == "Tuesday, February 25, 2025"
    assert gregorian_date_label(date(2024, 4, 13)) == "Saturday, April 13, 2024"


def test_names():
    assert month_name(0) == "Baisakh"
    assert month_name(11) == "Chaitra"
    assert weekday_name(6) == "Sanibar"
    assert weekday_headers() == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    assert weekday_headers(compact=True) == ["S", "M", "T", "W", "T", "F", "S"]
    with pytest.raises(ValueError):
        month_name(12)
    with pytest.raises(ValueError):
        weekday_name(7)


def test_lookup_tables_are_read_only():
    with pytest.raises(TypeError):
        NEPALI_WEEKDAY_NAMES["Sunday"] = "x"
    with pytest.raises(TypeError):
        NEPALI_MONTH_NAMES["Magh"] = "x"


def test_every_romanised_weekday_is_localisable():
    assert all(name in NEPALI_WEEKDAY_NAMES for name in WEEKDAY_NAMES)
    assert NEPALI_WEEKDAY_NAMES["Mangalbar"] == NEPALI_WEEKDAY_NAMES["Tuesday"]


@pytest.mark.parametrize("value", ["english", " English", "NEPALI"])
def test_parse_label_language(value):
    assert parse_label_language(value) == value.strip().lower()


def test_parse_label_language_rejects_unknown():
    with pytest.raises(ValueError, match="english, nepali"):
        parse_label_language("hindi")


def test_format_in_label_language():
    assert format_number(2081, "english") == "2081"
    assert format_number(2081, "nepali") == "२०८१"
    assert format_month_name(10, "english") == "Falgun"
    assert format_month_name(10, "nepali") == "फाल्गुन"
    assert format_bs_date(2081, 10, 13, 2, "english") == "13 Mangalbar Falgun 2081"
    assert format_bs_date(2081, 10, 13, 2, "nepali") == "१३ मङ्गलबार फाल्गुन २०८१"
